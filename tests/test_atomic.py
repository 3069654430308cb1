import unittest

from hintalgebra.ontology import InvalidTypeName, IllegalCombination
from hintalgebra.atomic import AtomicType, BUILT_IN_PRECEDENCE

def atoms(*names):
	return [AtomicType.from_string(n) for n in names]

class FromString(unittest.TestCase):

	def test_built_ins(self):
		for keyword, precedence in BUILT_IN_PRECEDENCE.items():
			with self.subTest(keyword):
				for spelling in keyword, keyword.upper(), keyword.capitalize():
					sut = AtomicType.from_string(spelling)
					self.assertEqual(AtomicType(keyword, precedence), sut)
					self.assertTrue(sut.is_builtin)

	def test_class_names(self):
		for text, name in [
			("Foo", "Foo"),
			("\\Foo", "Foo"),
			("Foo\\Bar", "Foo\\Bar"),
			("\\Foo\\Bar_9", "Foo\\Bar_9"),
			("  Spaced  ", "Spaced"),
			("_private", "_private"),
			("Ünïcode", "Ünïcode"),
		]:
			with self.subTest(text):
				sut = AtomicType.from_string(text)
				self.assertEqual(name, sut.name)
				self.assertEqual(0, sut.sort_index)
				self.assertFalse(sut.is_builtin)

	def test_rejects_nonsense(self):
		for text in ["", " ", "9lives", "Foo\\", "\\\\Foo", "Foo\\\\Bar", "Foo-Bar", "(Foo", "Foo)", "?int", "Foo Bar"]:
			with self.subTest(text):
				with self.assertRaises(InvalidTypeName) as cm:
					AtomicType.from_string(text)
				self.assertEqual(text, cm.exception.text)
				self.assertIsNone(cm.exception.span)

	def test_sort_key(self):
		ordered = sorted(atoms("null", "string", "Zed", "int", "Abc", "never"), key=AtomicType.sort_key)
		self.assertEqual(["Abc", "Zed", "int", "string", "null", "never"], [a.name for a in ordered])

	def test_renderings(self):
		foo, num = atoms("Foo", "int")
		self.assertEqual("\\Foo", foo.fully_qualified_name())
		self.assertEqual("int", num.fully_qualified_name())
		self.assertEqual("Foo", str(foo))

class UnionRules(unittest.TestCase):

	def test_loners(self):
		for loner in "mixed", "void", "never":
			with self.subTest(loner):
				sut, = atoms(loner)
				self.assertFalse(sut.can_union_with(atoms("int")))
				with self.assertRaises(IllegalCombination) as cm:
					sut.assert_can_union_with(atoms("int", "Foo"))
				self.assertEqual(loner, cm.exception.text)
				self.assertEqual(("int", "Foo"), cm.exception.conflicts)

	def test_duplicates(self):
		foo, = atoms("Foo")
		self.assertFalse(foo.can_union_with(atoms("FOO")))
		self.assertFalse(foo.can_union_with(atoms("\\Foo")))
		self.assertTrue(foo.can_union_with(atoms("Bar", "null")))

	def test_redundancy(self):
		for subject, company in [
			("bool", "false"),
			("bool", "true"),
			("iterable", "array"),
			("object", "Foo"),
			("true", "false"),
		]:
			with self.subTest(subject=subject, company=company):
				sut, = atoms(subject)
				self.assertFalse(sut.can_union_with(atoms(company)))
				with self.assertRaises(IllegalCombination) as cm:
					sut.assert_can_union_with(atoms(company, "null"))
				self.assertEqual((AtomicType.from_string(company).name,), cm.exception.conflicts)
				self.assertIn('"%s"'%subject, cm.exception.message)

	def test_ordinary_company(self):
		for subject in "int", "string", "null", "false", "static", "object", "array":
			with self.subTest(subject):
				sut, = atoms(subject)
				self.assertTrue(sut.can_union_with(atoms("float", "callable")))

class IntersectionRules(unittest.TestCase):

	def test_only_classes(self):
		foo, bar = atoms("Foo", "Bar")
		self.assertTrue(foo.can_intersect_with([bar]))
		for keyword in BUILT_IN_PRECEDENCE:
			with self.subTest(keyword):
				sut, = atoms(keyword)
				self.assertFalse(sut.can_intersect_with([foo]))

	def test_duplicates(self):
		foo, = atoms("Foo")
		with self.assertRaises(IllegalCombination) as cm:
			foo.assert_can_intersect_with(atoms("Bar", "foo"))
		self.assertEqual(("foo",), cm.exception.conflicts)

class StandaloneRules(unittest.TestCase):

	def test_standalone(self):
		for name in "null", "false", "true":
			with self.subTest(name):
				with self.assertRaises(IllegalCombination):
					AtomicType.from_string(name).assert_can_stand_alone()
		AtomicType.from_string("int").assert_can_stand_alone()
		AtomicType.from_string("Foo").assert_can_stand_alone()

	def test_nullable(self):
		for name in "null", "mixed", "void", "never", "false", "true":
			with self.subTest(name):
				with self.assertRaises(IllegalCombination):
					AtomicType.from_string(name).assert_can_be_nullable()
		AtomicType.from_string("string").assert_can_be_nullable()
		AtomicType.from_string("Foo").assert_can_be_nullable()


if __name__ == '__main__':
	unittest.main()
