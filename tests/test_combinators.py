import unittest
from wickertools.combinators.core import fmap, pair, left, right, either, zero_or_more, one_or_more, pred, and_then
from wickertools.combinators.interface import Success, Failure
from wickertools.combinators.primitives import any_char, match_literal, identifier


class TestOutcomes(unittest.TestCase):
	def test_truthiness(self):
		self.assertTrue(Success("", ""))
		self.assertTrue(Success("", None))
		self.assertFalse(Failure("nope"))
		self.assertFalse(Failure(""))

	def test_variants_are_distinct(self):
		self.assertNotEqual(Success("x", "y"), Failure("x"))
		self.assertNotIsInstance(Failure("x"), Success)


class TestSequencing(unittest.TestCase):
	def test_fmap(self):
		mapper = fmap(identifier, lambda text: text + " map stuff")
		self.assertEqual(Success(" extra", "ident-ifier map stuff"), mapper("ident-ifier extra"))

	def test_fmap_forwards_failure(self):
		self.assertEqual(Failure("no match for: 'x' in: y"), fmap(match_literal("x"), str.upper)("y"))

	def test_pair(self):
		pairer = pair(identifier, match_literal(" ext"))
		self.assertEqual(Success("ra", ("identifier", "")), pairer("identifier extra"))
		pairer = pair(match_literal("<"), identifier)
		self.assertEqual(Success("/>", ("", "my-first-element")), pairer("<my-first-element/>"))

	def test_pair_forwards_first_failure(self):
		pairer = pair(match_literal("a"), match_literal("b"))
		self.assertEqual(Failure("no match for: 'a' in: xb"), pairer("xb"))
		self.assertEqual(Failure("no match for: 'b' in: c"), pairer("ac"))

	def test_left(self):
		parser = left(identifier, match_literal(" literal"))
		self.assertEqual(Success("", "identifier"), parser("identifier literal"))

	def test_right(self):
		parser = right(match_literal("<"), identifier)
		self.assertEqual(Success("/>", "identifier"), parser("<identifier/>"))

	def test_left_and_right_fail_together(self):
		for combinator in left, right:
			with self.subTest(combinator=combinator.__name__):
				parser = combinator(identifier, match_literal("="))
				self.assertEqual(Failure("no match for: '=' in: !"), parser("abc!"))


class TestEither(unittest.TestCase):
	def test_first_branch_wins(self):
		parser = either(match_literal("a"), any_char)
		self.assertEqual(Success("bc", ""), parser("abc"))

	def test_backtracks_to_original_input(self):
		partial = pair(match_literal("ab"), match_literal("X"))
		parser = either(partial, match_literal("abc"))
		self.assertEqual(Success("d", ""), parser("abcd"))
		self.assertEqual(parser("abcd"), parser("abcd"))

	def test_reports_only_second_error(self):
		parser = either(match_literal("x"), match_literal("y"))
		self.assertEqual(Failure("no match for: 'y' in: z"), parser("z"))


class TestRepetition(unittest.TestCase):
	def test_one_or_more(self):
		parser = one_or_more(match_literal("ha"))
		self.assertEqual(Success("", ["", "", ""]), parser("hahaha"))
		self.assertEqual(Success("h", ["", ""]), parser("hahah"))
		self.assertEqual(Failure("'ahaha' not matched"), parser("ahaha"))

	def test_zero_or_more(self):
		parser = zero_or_more(match_literal("ha"))
		self.assertEqual(Success("", ["", "", ""]), parser("hahaha"))
		self.assertEqual(Success("ahaha", []), parser("ahaha"))
		self.assertEqual(Success("", []), parser(""))

	def test_zero_or_more_never_fails(self):
		parser = zero_or_more(any_char)
		for text in ["", "a", "abc", "\n"]:
			with self.subTest(text=text):
				outcome = parser(text)
				self.assertTrue(outcome)
				self.assertEqual(list(text), outcome.value)

	def test_one_or_more_fails_iff_first_fails(self):
		digit = pred(any_char, str.isdigit)
		parser = one_or_more(digit)
		for text in ["1", "12a", "a1", "", "x"]:
			with self.subTest(text=text):
				self.assertEqual(bool(digit(text)), bool(parser(text)))

	def test_stops_when_nothing_is_consumed(self):
		self.assertEqual(Success("123", []), zero_or_more(identifier)("123"))
		self.assertEqual(Success(" 1", ["abc"]), zero_or_more(identifier)("abc 1"))
		self.assertEqual(Success("123", [""]), one_or_more(identifier)("123"))


class TestPred(unittest.TestCase):
	def test_pred(self):
		parser = pred(any_char, lambda c: c == 'o')
		self.assertEqual(Success("mg", "o"), parser("omg"))
		self.assertEqual(Failure("lol"), parser("lol"))

	def test_forwards_inner_failure(self):
		parser = pred(any_char, lambda c: True)
		self.assertEqual(Failure(""), parser(""))


class TestAndThen(unittest.TestCase):
	def test_continuation_sees_value(self):
		doubled = and_then(any_char, match_literal)
		self.assertEqual(Success("b", ""), doubled("aab"))
		self.assertEqual(Failure("no match for: 'a' in: bb"), doubled("abb"))

	def test_forwards_first_failure(self):
		def never(value): raise AssertionError("should not be called")
		self.assertEqual(Failure(""), and_then(any_char, never)(""))


if __name__ == '__main__':
	unittest.main()
