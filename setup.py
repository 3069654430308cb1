"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='hint-algebra',
	version='0.1.0',
	packages=['hintalgebra'],
	entry_points={
		'console_scripts': ["hintalgebra = hintalgebra.cmdline:main"],
	},
	license='MIT',
	description='Parse, validate, and canonically re-render union and intersection type expressions',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Code Generators",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
