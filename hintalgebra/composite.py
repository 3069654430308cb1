"""
Composite types: unions and intersections of two or more simpler types.

The grammar is small enough that no parser-generator is called for:
"|" always binds looser than "&", so one look at the text decides the
top-level operator, and each segment either recurses (it has an "&")
or is a leaf. Parentheses are optional around an intersection on input,
but always appear on output.

Construction is the only way in, and it either returns a fully-formed,
canonically-ordered, validated tree or raises. There are no setters.
"""
from typing import Callable, Iterator, NamedTuple, Sequence

from .ontology import (
	Type, UNION_SEPARATOR, INTERSECTION_SEPARATOR,
	TypeExpressionError, MalformedExpression, NotComposite, IllegalCombination,
)
from .atomic import AtomicType

class Rules(NamedTuple):
	""" Everything the composite machinery needs to know about leaves. """
	parse_atom: Callable[[str], AtomicType]
	union_check: Callable[[AtomicType, Sequence[AtomicType]], None]
	intersection_check: Callable[[AtomicType, Sequence[AtomicType]], None]

STANDARD = Rules(AtomicType.from_string, AtomicType.assert_can_union_with, AtomicType.assert_can_intersect_with)

def predicate_rules(can_union_with, can_intersect_with, parse_atom=AtomicType.from_string) -> Rules:
	"""
	Adapt a pair of pure predicates, each (atom, others) -> bool,
	into the assertion style the validator uses.
	"""
	def guard(predicate, mode):
		def check(atom, others):
			if not predicate(atom, others):
				names = [o.name for o in others]
				message = 'Type "%s" cannot be composed in %s with %s' % (atom.name, mode, ", ".join(names))
				raise IllegalCombination(message, atom.name, names)
		return check
	return Rules(parse_atom, guard(can_union_with, "a union"), guard(can_intersect_with, "an intersection"))

class CompositeType(NamedTuple):
	members: tuple[Type, ...]
	is_intersection: bool

	@property
	def separator(self) -> str:
		return INTERSECTION_SEPARATOR if self.is_intersection else UNION_SEPARATOR

	def render(self, context) -> str: return context.visit(self)

	def __str__(self):
		from .rendering import documentation
		return documentation(self)

def parse(expression:str, rules:Rules=STANDARD) -> CompositeType:
	""" Build the canonical, validated composite that a textual expression denotes. """
	if UNION_SEPARATOR not in expression and INTERSECTION_SEPARATOR not in expression:
		raise NotComposite('Type "%s" is not a union or intersection type'%expression, expression, slice(0, len(expression)))
	return _build(expression, _trim(expression, 0, len(expression)), rules)

def _build(whole:str, span:slice, rules:Rules) -> CompositeType:
	text = whole[span]
	if UNION_SEPARATOR in text:
		is_intersection, separator = False, UNION_SEPARATOR
	else:
		is_intersection, separator = True, INTERSECTION_SEPARATOR
		if text.startswith('('):
			if not text.endswith(')'):
				message = 'Invalid intersection type "%s": missing closing parenthesis'%text
				raise MalformedExpression(message, text, span)
			span = _trim(whole, span.start+1, span.stop-1)

	# Splitting an intersection at every "&" leaves no "&" in any piece,
	# so only a union can ever hold a nested group.
	entries = []
	for piece in _pieces(whole, span, separator):
		if INTERSECTION_SEPARATOR in whole[piece]: member = _build(whole, piece, rules)
		else: member = _atom(whole, piece, rules)
		entries.append((member, piece))

	entries.sort(key=lambda e: canonical_key(e[0]))
	_validate(entries, is_intersection, rules)
	return CompositeType(tuple(m for m, _ in entries), is_intersection)

def _atom(whole:str, piece:slice, rules:Rules) -> AtomicType:
	try: return rules.parse_atom(whole[piece])
	except TypeExpressionError as ex: raise ex.at(piece)

def canonical_key(member:Type) -> tuple:
	""" Atomics first, by (sort-index, name); nested composites after, by their spelling. """
	if isinstance(member, AtomicType): return 0, member.sort_index, member.name
	else: return 1, 0, str(member)

def _validate(entries, is_intersection:bool, rules:Rules):
	"""
	Each atom answers to its atomic siblings only. Nested groups are
	opaque here; they answered to their own siblings when they were built.
	"""
	check = rules.intersection_check if is_intersection else rules.union_check
	for index, (member, piece) in enumerate(entries):
		if not isinstance(member, AtomicType): continue
		others = [m for i, (m, _) in enumerate(entries) if i != index and isinstance(m, AtomicType)]
		if not others: continue
		try: check(member, others)
		except TypeExpressionError as ex: raise ex.at(piece)

def _pieces(whole:str, span:slice, separator:str) -> Iterator[slice]:
	""" Split the span at each separator, trimming blanks off every piece. """
	start = span.start
	while True:
		stop = whole.find(separator, start, span.stop)
		if stop < 0: break
		yield _trim(whole, start, stop)
		start = stop + 1
	yield _trim(whole, start, span.stop)

def _trim(whole:str, start:int, stop:int) -> slice:
	while start < stop and whole[start].isspace(): start += 1
	while stop > start and whole[stop-1].isspace(): stop -= 1
	return slice(start, stop)
