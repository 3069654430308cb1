"""
These most-fundamental bits of the type algebra are separate from the rest
to avoid various circular-import scenarios: the separators, the family of
complaints a type expression can provoke, and the notion of "a type" itself.
"""
from typing import Optional, Sequence, Union, TYPE_CHECKING

if TYPE_CHECKING:
	from .atomic import AtomicType
	from .composite import CompositeType

UNION_SEPARATOR = '|'
INTERSECTION_SEPARATOR = '&'
NULLABLE_MARKER = '?'

# A type is either a leaf or a combination. Consumers match on the two cases.
Type = Union["AtomicType", "CompositeType"]

class TypeExpressionError(ValueError):
	"""
	Something is wrong with a type expression. Carries the offending text
	and, once somebody knows it, the slice of the whole expression it came from.
	"""
	def __init__(self, message:str, text:str, span:Optional[slice]=None):
		super().__init__(message)
		self.message, self.text, self.span = message, text, span

	def at(self, span:slice) -> "TypeExpressionError":
		# The innermost locator wins.
		if self.span is None: self.span = span
		return self

class MalformedExpression(TypeExpressionError):
	""" The text does not have the shape of a type expression. """

class InvalidTypeName(MalformedExpression):
	""" A segment is neither a built-in keyword nor a plausible class name. """

class NotComposite(TypeExpressionError):
	""" No union or intersection operator anywhere: that's an atomic type's job. """

class IllegalCombination(TypeExpressionError):
	""" An atomic type may not keep company with (some of) its siblings. """
	conflicts: tuple[str, ...]
	def __init__(self, message:str, text:str, conflicts:Sequence[str]=(), span:Optional[slice]=None):
		super().__init__(message, text, span)
		self.conflicts = tuple(conflicts)
