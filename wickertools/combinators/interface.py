"""
This file aggregates the value types and exception types which the combinators deal in.

A parser is nothing but a function from the unconsumed text to an outcome.
The outcome is either a `Success` (what's left of the text, plus whatever was
recognized) or a `Failure` (a message, and nothing else). These are two separate
classes rather than one record with optional fields: you can't build an outcome
that is somehow both, or neither.

Failure is a perfectly ordinary return value. Nothing in the combinator layer
raises on bad input. The exceptions below exist for the convenience of callers
who would rather have a value or a stack trace than inspect outcomes themselves.
"""

from typing import Any, Callable, NamedTuple, Union

class Success(NamedTuple):
	""" The parser recognized `value` and left `remaining` for whoever comes next. """
	remaining: str
	value: Any

	def __bool__(self): return True

class Failure(NamedTuple):
	""" The parser did not match. `error` says why, in plain words. """
	error: str

	def __bool__(self): return False

Outcome = Union[Success, Failure]

Parser = Callable[[str], Outcome]

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the parsing machinery. """

class ParseFailed(LanguageError):
	""" Raised by `expect_complete` when handed a Failure. """
	def __init__(self, error:str):
		super().__init__(error)
		self.error = error

class IncompleteParse(LanguageError):
	"""
	Raised by `expect_complete` when the parse succeeded but left text unconsumed.
	Parameters are:
		the value recognized so far.
		the unconsumed remainder.
	"""
	def __init__(self, value, remaining:str):
		super().__init__("unconsumed input: %r"%remaining)
		self.value, self.remaining = value, remaining

def expect_complete(outcome:Outcome):
	"""
	The combinators never insist on reaching the end of the text.
	If you do, pass the outcome through here: you get back the value, or an exception.
	"""
	if not outcome: raise ParseFailed(outcome.error)
	if outcome.remaining: raise IncompleteParse(outcome.value, outcome.remaining)
	return outcome.value
