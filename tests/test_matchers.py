import unittest

from pypincheck.core import matchers


class TestCrossPattern(unittest.TestCase):

    def test_all_sweeps_match(self):
        for pin in ("159753", "159357", "951357", "951753", "357159", "357951", "753159", "753951"):
            self.assertTrue(matchers.is_cross_pattern(pin), pin)

    def test_exact_match_only(self):
        """A sweep embedded in a longer PIN is not a cross pattern."""
        self.assertFalse(matchers.is_cross_pattern("1597530"))
        self.assertFalse(matchers.is_cross_pattern("15975"))
        self.assertFalse(matchers.is_cross_pattern("159750"))
        self.assertFalse(matchers.is_cross_pattern(""))


class TestOddEvenSeries(unittest.TestCase):

    def test_detects_series_anywhere(self):
        self.assertTrue(matchers.has_odd_or_even_series("013579"))
        self.assertTrue(matchers.has_odd_or_even_series("024681"))
        self.assertTrue(matchers.has_odd_or_even_series("135791"))

    def test_partial_or_reversed_series(self):
        self.assertFalse(matchers.has_odd_or_even_series("1357"))
        self.assertFalse(matchers.has_odd_or_even_series("97531"))
        self.assertFalse(matchers.has_odd_or_even_series("86420"))


class TestConsecutiveSeries(unittest.TestCase):

    def test_table_has_sixteen_triples(self):
        self.assertEqual(len(matchers.CONSECUTIVE_TRIPLES), 16)
        self.assertIn("012", matchers.CONSECUTIVE_TRIPLES)
        self.assertIn("789", matchers.CONSECUTIVE_TRIPLES)
        self.assertIn("987", matchers.CONSECUTIVE_TRIPLES)
        self.assertIn("210", matchers.CONSECUTIVE_TRIPLES)

    def test_ascending_and_descending(self):
        self.assertTrue(matchers.has_consecutive_series("4321"))
        self.assertTrue(matchers.has_consecutive_series("904560"))

    def test_no_wrap_around(self):
        self.assertFalse(matchers.has_consecutive_series("890"))
        self.assertFalse(matchers.has_consecutive_series("109"))
        self.assertFalse(matchers.has_consecutive_series("1357"))

    def test_non_digits_break_series(self):
        self.assertFalse(matchers.has_consecutive_series("1a23"))


class TestRepeatedDigits(unittest.TestCase):

    def test_longest_run(self):
        self.assertEqual(matchers.longest_digit_run(""), 0)
        self.assertEqual(matchers.longest_digit_run("abc"), 0)
        self.assertEqual(matchers.longest_digit_run("1234"), 1)
        self.assertEqual(matchers.longest_digit_run("1122333"), 3)
        self.assertEqual(matchers.longest_digit_run("11a11"), 2)

    def test_default_threshold(self):
        self.assertTrue(matchers.has_repeated_digits("1123"))
        self.assertFalse(matchers.has_repeated_digits("1213"))

    def test_explicit_threshold(self):
        self.assertTrue(matchers.has_repeated_digits("1122333", 3))
        self.assertFalse(matchers.has_repeated_digits("1122", 3))

    def test_non_digit_runs_ignored(self):
        self.assertFalse(matchers.has_repeated_digits("aa"))


class TestRepeatedPairs(unittest.TestCase):

    def test_longest_pair_run(self):
        self.assertEqual(matchers.longest_pair_run(""), 0)
        self.assertEqual(matchers.longest_pair_run("1"), 0)
        self.assertEqual(matchers.longest_pair_run("12"), 1)
        self.assertEqual(matchers.longest_pair_run("12121234"), 3)
        self.assertEqual(matchers.longest_pair_run("912125"), 2)

    def test_default_threshold(self):
        self.assertTrue(matchers.has_repeated_pairs("12121234"))
        self.assertFalse(matchers.has_repeated_pairs("12341234"))

    def test_odd_offset(self):
        self.assertTrue(matchers.has_repeated_pairs("93434"))

    def test_explicit_threshold(self):
        self.assertFalse(matchers.has_repeated_pairs("121234", 3))
        self.assertTrue(matchers.has_repeated_pairs("121212", 3))

    def test_same_digit_pairs(self):
        self.assertTrue(matchers.has_repeated_pairs("1111"))

    def test_pairs_must_be_digits(self):
        self.assertFalse(matchers.has_repeated_pairs("1a1a1a"))


class TestDigitsOnly(unittest.TestCase):

    def test_digits(self):
        self.assertTrue(matchers.is_digits_only("0123456789"))

    def test_rejects_letters_and_empty(self):
        self.assertFalse(matchers.is_digits_only("12a4"))
        self.assertFalse(matchers.is_digits_only(""))
        self.assertFalse(matchers.is_digits_only(" 1234"))

    def test_rejects_non_ascii_digits(self):
        self.assertFalse(matchers.is_digits_only("١٢٣٤"))

    def test_length_within(self):
        self.assertTrue(matchers.is_length_within("1234", 4, 6))
        self.assertFalse(matchers.is_length_within("123", 4, 6))
        self.assertFalse(matchers.is_length_within("1234567", 4, 6))


if __name__ == '__main__':
    unittest.main()
