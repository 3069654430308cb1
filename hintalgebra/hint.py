"""
A complete type hint: whatever may appear where a declaration wants a type.
That's an atomic type, maybe marked nullable with a "?" prefix,
or else a composite, which spells its own nullability with "|null".
"""
from typing import NamedTuple

from .ontology import (
	Type, NULLABLE_MARKER, UNION_SEPARATOR, INTERSECTION_SEPARATOR,
	TypeExpressionError, MalformedExpression,
)
from . import composite, rendering

class TypeHint(NamedTuple):
	type: Type
	nullable: bool = False

	@staticmethod
	def from_string(text:str, rules:composite.Rules=composite.STANDARD) -> "TypeHint":
		""" Spans in any resulting complaint refer to the text as given. """
		everything = slice(0, len(text))
		nullable, trimmed = _trim_nullable(text.strip())
		if UNION_SEPARATOR not in trimmed and INTERSECTION_SEPARATOR not in trimmed:
			try:
				atom = rules.parse_atom(trimmed)
				atom.assert_can_stand_alone()
				if nullable: atom.assert_can_be_nullable()
			except TypeExpressionError as ex: raise ex.at(everything)
			return TypeHint(atom, nullable)
		if nullable:
			message = 'Type "%s" is a composite type, and therefore cannot also be marked nullable with the "?" prefix'%text
			raise MalformedExpression(message, text, everything)
		return TypeHint(composite.parse(text, rules))

	def _prefix(self): return NULLABLE_MARKER if self.nullable else ""

	def declaration(self) -> str: return self._prefix() + rendering.declaration(self.type)

	def __str__(self): return self._prefix() + rendering.documentation(self.type)

	def equals(self, other:"TypeHint") -> bool:
		return self.declaration() == other.declaration()

def _trim_nullable(text:str) -> tuple[bool, str]:
	if text.startswith(NULLABLE_MARKER): return True, text[1:]
	else: return False, text
