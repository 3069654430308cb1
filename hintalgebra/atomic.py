"""
Atomic types: the leaves of the type algebra.

A leaf is either one of the built-in keywords or the name of some class or interface.
Built-ins carry a fixed precedence which drives canonical ordering;
class names all share precedence zero, so they lead, and sort by name among themselves.

The legality rules for combining leaves also live here, so the composite
machinery never needs to know what "mixed" or "never" might mean.
"""
import re
from typing import NamedTuple, Sequence

from .ontology import InvalidTypeName, IllegalCombination

BUILT_IN_PRECEDENCE = {
	'bool': 1,
	'int': 2,
	'float': 3,
	'string': 4,
	'array': 5,
	'callable': 6,
	'iterable': 7,
	'object': 8,
	'static': 9,
	'mixed': 10,
	'void': 11,
	'false': 12,
	'true': 13,
	'null': 14,
	'never': 15,
}

CLASS_PRECEDENCE = 0

# These absorb or annihilate everything else, so they refuse company in a union.
LONERS = frozenset(['mixed', 'void', 'never'])
NOT_NULLABLE = frozenset(['null', 'mixed', 'void', 'never', 'false', 'true'])
NOT_STANDALONE = frozenset(['null', 'false', 'true'])

# Pairs where the first already covers the second in a union.
_REDUNDANT = {
	'bool': ('false', 'true'),
	'iterable': ('array',),
}

_IDENTIFIER = re.compile(r"[^\W\d]\w*(?:\\[^\W\d]\w*)*\Z")

class AtomicType(NamedTuple):
	name: str
	sort_index: int

	@staticmethod
	def from_string(text:str) -> "AtomicType":
		""" Interpret one segment of a type expression as a leaf. """
		trimmed = text.strip()
		if trimmed.startswith('\\'): trimmed = trimmed[1:]
		lower = trimmed.lower()
		if lower in BUILT_IN_PRECEDENCE:
			return AtomicType(lower, BUILT_IN_PRECEDENCE[lower])
		if not _IDENTIFIER.match(trimmed):
			raise InvalidTypeName('Provided type "%s" is not a keyword or a valid class name'%text, text)
		return AtomicType(trimmed, CLASS_PRECEDENCE)

	@property
	def is_builtin(self) -> bool: return self.sort_index != CLASS_PRECEDENCE

	def sort_key(self) -> tuple[int, str]: return self.sort_index, self.name

	def identity(self) -> str:
		# Class names are case-insensitive; keywords were lower-cased already.
		return self.name.lower()

	def fully_qualified_name(self) -> str:
		return self.name if self.is_builtin else '\\'+self.name

	def render(self, context): return context.visit(self)

	def __str__(self): return self.name

	def assert_can_union_with(self, others:Sequence["AtomicType"]):
		if self.name in LONERS:
			raise self._conflict('Type "%s" cannot be composed in a union with any other types', others)
		for other in others:
			if other.identity() == self.identity():
				raise self._conflict('Type "%s" cannot be composed in a union with the same type', [other])
		redundant = [o for o in others if o.name in _REDUNDANT.get(self.name, ())]
		if redundant:
			raise self._conflict('Type "%s" already covers %s; the union is redundant', redundant)
		if self.name == 'object':
			classes = [o for o in others if not o.is_builtin]
			if classes:
				raise self._conflict('Type "%s" already covers the class types %s; the union is redundant', classes)
		if self.name == 'true':
			falsehood = [o for o in others if o.name == 'false']
			if falsehood:
				raise self._conflict('Type "%s" cannot be composed in a union with %s: use "bool" instead', falsehood)

	def assert_can_intersect_with(self, others:Sequence["AtomicType"]):
		if self.is_builtin:
			raise self._conflict('Type "%s" cannot be part of an intersection type', others)
		for other in others:
			if other.identity() == self.identity():
				raise self._conflict('Type "%s" cannot be composed in an intersection with the same type', [other])

	def can_union_with(self, others:Sequence["AtomicType"]) -> bool:
		return _complies(self.assert_can_union_with, others)

	def can_intersect_with(self, others:Sequence["AtomicType"]) -> bool:
		return _complies(self.assert_can_intersect_with, others)

	def assert_can_stand_alone(self):
		if self.name in NOT_STANDALONE:
			raise self._conflict('Type "%s" cannot be used as a standalone type', ())

	def assert_can_be_nullable(self):
		if self.name in NOT_NULLABLE:
			raise self._conflict('Type "%s" cannot be marked nullable', ())

	def _conflict(self, pattern:str, culprits:Sequence["AtomicType"]) -> IllegalCombination:
		names = [c.name for c in culprits]
		if pattern.count('%s') == 2: message = pattern % (self.name, _quote(names))
		else: message = pattern % self.name
		return IllegalCombination(message, self.name, names)

def _quote(names):
	return ", ".join('"%s"'%n for n in names)

def _complies(assertion, others) -> bool:
	try: assertion(others)
	except IllegalCombination: return False
	else: return True
