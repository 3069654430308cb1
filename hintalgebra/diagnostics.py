import sys, random
from typing import Any
from boozetools.support.failureprone import SourceText, illustration

from .ontology import TypeExpressionError, IllegalCombination, NotComposite

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Heavens', 'Jeepers', 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the trouble found in type expressions, for later telling. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list["Pic"]: return list(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the command-line calls:
	def bad_expression(self, expression:str, ex:TypeExpressionError):
		source = SourceText(expression)
		span = ex.span if ex.span is not None else slice(0, len(expression))
		if isinstance(ex, IllegalCombination):
			caption = "conflicts with " + ", ".join(ex.conflicts) if ex.conflicts else "not allowed here"
			footer = ["These types cannot be combined this way."]
		elif isinstance(ex, NotComposite):
			caption = "no '|' or '&' in sight"
			footer = []
		else:
			caption = "confused here"
			footer = []
		self.issue(Pic(ex.message, [Annotation(source, span, caption)], footer))

class Annotation:
	source: SourceText
	slice: slice
	caption: str
	def __init__(self, source:SourceText, where:slice, caption:str=""):
		self.source = source
		self.slice = where
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def description(self) -> str: return self._intro
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
