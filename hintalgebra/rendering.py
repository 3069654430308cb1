"""
Turning type-trees back into text.

There are two audiences: the declaration itself, where class names must be
fully-qualified, and the documentation, where the bare name reads better.
The composite logic is the same for both; only the leaves differ.
"""
from boozetools.support.foundation import Visitor
from .ontology import Type
from .atomic import AtomicType
from .composite import CompositeType

class Renderer(Visitor):
	def visit_AtomicType(self, atom:AtomicType) -> str:
		raise NotImplementedError(type(self))

	def visit_CompositeType(self, composite:CompositeType) -> str:
		return composite.separator.join(map(self.member, composite.members))

	def member(self, it:Type) -> str:
		text = self.visit(it)
		# Only an intersection within a union ever needs the parentheses.
		if isinstance(it, CompositeType) and it.is_intersection: return "(%s)"%text
		return text

class DeclarationRenderer(Renderer):
	@staticmethod
	def visit_AtomicType(atom:AtomicType) -> str: return atom.fully_qualified_name()

class DocumentationRenderer(Renderer):
	@staticmethod
	def visit_AtomicType(atom:AtomicType) -> str: return atom.name

DECLARATION = DeclarationRenderer()
DOCUMENTATION = DocumentationRenderer()

def declaration(it:Type) -> str: return it.render(DECLARATION)
def documentation(it:Type) -> str: return it.render(DOCUMENTATION)

def tree(it:Type, indent:str="") -> list[str]:
	""" An outline of the structure, one node per line, for the curious. """
	if isinstance(it, CompositeType):
		lines = [indent + ("intersection" if it.is_intersection else "union")]
		for m in it.members: lines.extend(tree(m, indent+"    "))
		return lines
	else:
		kind = "built-in" if it.is_builtin else "class"
		return [indent + "%s (%s, %d)"%(it.name, kind, it.sort_index)]
