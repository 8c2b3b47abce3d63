"""
The combinators proper. Each function here takes a parser (or two) and returns a new one.

Every parser is a pure function of the text it's given, so the combinators carry no
state of their own: build a parser once and use it as often as you like, anywhere.
The first failure in a sequence comes back out exactly as it went in. The exceptions
are `either`, which reports only its second branch's complaint, and `one_or_more`,
which has its own.

There is exactly one place with any backtracking, and that's `either`. Since a failed
parser never hands back a cursor, there's nothing to undo: just try the other branch
on the same text.
"""

from typing import Callable

from .interface import Success, Failure, Parser

def fmap(parser:Parser, transform:Callable) -> Parser:
	""" Run the parser; on success, pass the value through `transform`. """
	def parse(text:str):
		outcome = parser(text)
		if not outcome: return outcome
		return Success(outcome.remaining, transform(outcome.value))
	return parse

def pair(parser_a:Parser, parser_b:Parser) -> Parser:
	"""
	Strict sequence: `parser_a`, then `parser_b` on whatever it left behind.
	The value is a 2-tuple. If `parser_b` fails, that's the end of it:
	there is no going back to ask `parser_a` for a shorter match.
	"""
	def parse(text:str):
		first = parser_a(text)
		if not first: return first
		second = parser_b(first.remaining)
		if not second: return second
		return Success(second.remaining, (first.value, second.value))
	return parse

def left(parser_a:Parser, parser_b:Parser) -> Parser:
	""" Sequence, keeping only the left-hand value. """
	return fmap(pair(parser_a, parser_b), _first)

def right(parser_a:Parser, parser_b:Parser) -> Parser:
	""" Sequence, keeping only the right-hand value. """
	return fmap(pair(parser_a, parser_b), _second)

def either(parser_a:Parser, parser_b:Parser) -> Parser:
	""" Try `parser_a`; failing that, try `parser_b` from the very same spot. """
	def parse(text:str):
		outcome = parser_a(text)
		if outcome: return outcome
		return parser_b(text)
	return parse

def zero_or_more(parser:Parser) -> Parser:
	"""
	Apply the parser as many times as it will go, collecting values in a list.
	This never fails: zero matches is an empty list and the text untouched.
	"""
	def parse(text:str):
		values = []
		return Success(_repeat(parser, text, values), values)
	return parse

def one_or_more(parser:Parser) -> Parser:
	""" Like `zero_or_more`, but the first application must succeed. """
	def parse(text:str):
		outcome = parser(text)
		if not outcome: return Failure("'%s' not matched"%text)
		values = [outcome.value]
		if outcome.remaining == text: return Success(text, values)
		return Success(_repeat(parser, outcome.remaining, values), values)
	return parse

def pred(parser:Parser, predicate:Callable[..., bool]) -> Parser:
	"""
	Run the parser, then veto the value unless `predicate` approves.
	A veto reports the text as it was before the parser ran, and (like any
	failure) does not advance, so an enclosing `either` may still try something else.
	"""
	def parse(text:str):
		outcome = parser(text)
		if not outcome: return outcome
		if predicate(outcome.value): return outcome
		return Failure(text)
	return parse

def and_then(parser:Parser, continuation:Callable[..., Parser]) -> Parser:
	"""
	Monadic bind. Run the parser, hand its value to `continuation` to get the
	next parser, and run that on what's left. This is how the grammar can insist
	that a closing tag matches the name of the opening tag it just saw.
	"""
	def parse(text:str):
		outcome = parser(text)
		if not outcome: return outcome
		return continuation(outcome.value)(outcome.remaining)
	return parse

def _repeat(parser:Parser, text:str, values:list) -> str:
	"""
	Append to `values` until the parser fails; return the text after the last success.
	A success that consumes nothing would only repeat itself forever, so it ends the loop.
	"""
	while True:
		outcome = parser(text)
		if not outcome or outcome.remaining == text: return text
		values.append(outcome.value)
		text = outcome.remaining

def _first(both): return both[0]
def _second(both): return both[1]
