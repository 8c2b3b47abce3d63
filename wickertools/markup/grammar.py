"""
A strict little subset of XML: elements, attributes with double-quoted values, nesting.
No text content, comments, entities, or any of the rest.

Everything here is composed from the combinators. Each builder function returns a fresh
parser; parsers are values, so build once and reuse as you please. The grammar is
recursive (an element may contain elements) but the recursion only happens at parse
time, inside `and_then`, so building `element()` doesn't chase its own tail.
"""

from ..combinators.core import fmap, pair, left, right, either, zero_or_more, one_or_more, pred, and_then
from ..combinators.interface import Failure, Parser, expect_complete
from ..combinators.primitives import any_char, match_literal, identifier
from .tree import Element

WHITESPACE = ' \n' # Tabs are deliberately not on the list.

def quoted_string() -> Parser:
	""" Double-quoted text, taken verbatim: no escapes, hence no double-quotes inside. """
	body = zero_or_more(pred(any_char, lambda c: c != '"'))
	return fmap(right(match_literal('"'), left(body, match_literal('"'))), ''.join)

def whitespace_char() -> Parser: return pred(any_char, lambda c: c in WHITESPACE)
def space0() -> Parser: return zero_or_more(whitespace_char())
def space1() -> Parser: return one_or_more(whitespace_char())

def attribute_pair() -> Parser:
	""" name="value" -> (name, value) """
	return pair(identifier, right(match_literal('='), quoted_string()))

def attributes() -> Parser:
	""" Each attribute must be preceded by some whitespace. """
	return zero_or_more(right(space1(), attribute_pair()))

def element_start() -> Parser:
	""" <name attr="..." ... -> (name, [attribute pairs]) """
	return right(match_literal('<'), pair(identifier, attributes()))

def open_element() -> Parser:
	return fmap(left(element_start(), match_literal('>')), _childless)

def single_element() -> Parser:
	return fmap(left(element_start(), match_literal('/>')), _childless)

def close_element(expected_name:str) -> Parser:
	""" </name> where the name must be exactly `expected_name`. The value is the name. """
	tag = right(match_literal('</'), left(identifier, match_literal('>')))
	return pred(tag, lambda name: name == expected_name)

def parent_element() -> Parser:
	"""
	An opening tag, any number of child elements, and the closing tag that goes with it.
	What counts as "the closing tag" depends on what was opened, hence `and_then`.
	"""
	def contents(opened:Element) -> Parser:
		children = left(zero_or_more(element()), close_element(opened.name))
		return fmap(children, opened.with_children)
	return and_then(open_element(), contents)

def whitespace_wrap(parser:Parser) -> Parser:
	""" Optional whitespace on either side. """
	return right(space0(), left(parser, space0()))

def element() -> Parser:
	return whitespace_wrap(either(single_element(), parent_element()))

def parse(text:str):
	"""
	Parse one element (and its descendants) from the front of the text.
	Returns the outcome: a Success holds the Element and whatever text follows it.
	Trailing text is not an error here; see `parse_document` if it should be.
	Each level of nesting costs a dozen or so Python frames, so a deep enough document
	comes back as a Failure rather than blowing the interpreter stack.
	"""
	try: return _document(text)
	except RecursionError: return Failure("nesting too deep: %s"%text[:40])

def parse_document(text:str) -> Element:
	""" Parse exactly one element and nothing else, or raise a LanguageError. """
	return expect_complete(parse(text))

def _childless(start) -> Element:
	name, pairs = start
	return Element(name, tuple(pairs))

_document = element()
