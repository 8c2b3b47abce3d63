"""
The parse tree for markup: one `Element` per tag, children in document order.

Elements are immutable. The grammar builds an opening tag's node first, with no children,
and then makes a new node with the children attached once it has seen the matching
closing tag. Nobody ever observes a half-finished node.
"""

from dataclasses import dataclass, replace
from typing import Iterator

from ..combinators.primitives import IDENTIFIER_CHARACTERS

@dataclass(frozen=True)
class Element:
	name: str
	attributes: tuple = ()  # of (name, value) pairs, in declaration order; duplicates are kept.
	children: tuple = ()    # of Element

	def with_children(self, children) -> "Element":
		return replace(self, children=tuple(children))

	def attribute(self, name:str, default=None):
		""" The value first declared for `name`, if any. """
		for key, value in self.attributes:
			if key == name: return value
		return default

	def walk(self) -> Iterator["Element"]:
		""" This node and all its descendants, in document order. """
		yield self
		for child in self.children: yield from child.walk()

	def as_dict(self) -> dict:
		""" Plain data, suitable for `json.dump`. """
		return {
			'name': self.name,
			'attributes': [list(pair) for pair in self.attributes],
			'children': [child.as_dict() for child in self.children],
		}

def render(element:Element, indent:int=None) -> str:
	"""
	Write the tree back out as markup the grammar will accept.
	Childless elements come out self-closing. With `indent`, each element gets its own
	line, nested `indent` spaces per level; otherwise it's all on one line.
	Raises ValueError for anything the grammar could never read back.
	"""
	pieces = list(_pieces(element, 0))
	if indent is None: return ''.join(text for depth, text in pieces)
	return '\n'.join(' '*(indent*depth) + text for depth, text in pieces)

def _pieces(element:Element, depth:int):
	start = '<' + _checked_name(element.name) + ''.join(
		' %s="%s"'%(_checked_name(key), _checked_value(value)) for key, value in element.attributes
	)
	if not element.children:
		yield depth, start + '/>'
		return
	if not element.name: raise ValueError("An unnamed element cannot have children: its closing tag would read as a child")
	yield depth, start + '>'
	for child in element.children: yield from _pieces(child, depth+1)
	yield depth, '</%s>'%element.name

def _checked_name(name:str) -> str:
	if not IDENTIFIER_CHARACTERS.issuperset(name): raise ValueError("Not a valid name: %r"%name)
	return name

def _checked_value(value:str) -> str:
	if '"' in value: raise ValueError("Attribute values cannot contain a double-quote: %r"%value)
	return value
