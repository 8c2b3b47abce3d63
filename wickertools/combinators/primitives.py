""" The leaves: the only parsers that actually look at characters. """

import string

from .interface import Success, Failure, Parser

IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + '-')

def any_char(text:str):
	""" Consume exactly one character. On empty input, the complaint is the (empty) input itself. """
	if text: return Success(text[1:], text[0])
	return Failure(text)

def match_literal(expected:str) -> Parser:
	""" Recognize exactly `expected` at the front of the text. The value is always the empty string. """
	def parse(text:str):
		if text.startswith(expected): return Success(text[len(expected):], "")
		return Failure("no match for: '%s' in: %s"%(expected, text))
	return parse

def identifier(text:str):
	"""
	The longest run of ASCII letters and hyphens at the front of the text.

	Note well: this never fails. If the first character doesn't qualify, the result is
	the empty string and the text comes back untouched. Anything that needs a real name
	must check for itself (with `pred`, say).
	"""
	size = 0
	for c in text:
		if c not in IDENTIFIER_CHARACTERS: break
		size += 1
	return Success(text[size:], text[:size])
