"""
Tests for bound resolution.

resolve() never raises for user error; it returns a Failure tagged
with the error kind.
"""

import pytest

from oddsieve.bounds import MAX_BOUND, MIN_BOUND, check_bound, parse_int32, resolve
from oddsieve.errors import ErrorKind, Failure


def assert_failure(result, kind, detail=None):
    assert isinstance(result, Failure), f"expected {kind} failure, got {result!r}"
    assert result.kind is kind, f"expected {kind}, got {result.kind}"
    if detail is not None:
        assert result.detail == detail


class TestArgumentCount:

    def test_no_arguments(self):
        assert_failure(resolve([]), ErrorKind.USAGE)

    def test_two_arguments(self):
        assert_failure(resolve(["10", "20"]), ErrorKind.USAGE)

    def test_count_checked_before_parse(self):
        """Bad text in a wrong-count call is still a usage error."""
        assert_failure(resolve(["abc", "def"]), ErrorKind.USAGE)


class TestParse:

    def test_valid(self):
        assert parse_int32("30") == 30
        assert parse_int32("-7") == -7
        assert parse_int32("0") == 0
        assert parse_int32("007") == 7

    def test_not_a_number(self):
        for text in ["abc", "", "-", "1.5", "0x1f", "1e6"]:
            assert_failure(parse_int32(text), ErrorKind.PARSE, "not a number")

    def test_trailing_garbage(self):
        for text in ["12abc", "30 ", "30\n", "1,000"]:
            assert_failure(parse_int32(text), ErrorKind.PARSE, "not a number")

    def test_forms_python_int_would_accept(self):
        """Whitespace, '+', underscores and non-ASCII digits are rejected."""
        for text in [" 30", "+30", "1_000", "٣٠", "３０"]:
            assert_failure(parse_int32(text), ErrorKind.PARSE, "not a number")

    def test_int32_limits(self):
        assert parse_int32("2147483647") == 2**31 - 1
        assert parse_int32("-2147483648") == -(2**31)

    def test_overflow(self):
        for text in ["2147483648", "-2147483649", "99999999999999999999"]:
            assert_failure(parse_int32(text), ErrorKind.PARSE, "number out of range")

    def test_overflow_past_int_digit_limit(self):
        """Thousands of digits are an overflow, not a crash in int()."""
        for text in ["9" * 5000, "-" + "9" * 5000, "1" + "0" * 5000]:
            assert_failure(parse_int32(text), ErrorKind.PARSE, "number out of range")
        assert_failure(resolve(["9" * 5000]), ErrorKind.PARSE, "number out of range")

    def test_leading_zeros_ignored(self):
        """Zero padding of any length does not change the value."""
        assert parse_int32("0" * 5000 + "30") == 30
        assert parse_int32("-" + "0" * 5000 + "7") == -7
        assert parse_int32("0" * 5000) == 0
        assert parse_int32("000" + "2147483647") == 2**31 - 1
        assert resolve(["0" * 5000 + "30"]) == 30


class TestRange:

    def test_limits_accepted(self):
        assert check_bound(MIN_BOUND) == 2
        assert check_bound(MAX_BOUND) == 1_000_000_000

    def test_outside_rejected(self):
        for n in [-5, 0, 1, 1_000_000_001, 2**31 - 1]:
            assert_failure(check_bound(n), ErrorKind.RANGE)


class TestResolve:

    def test_valid(self):
        assert resolve(["30"]) == 30
        assert resolve(["2"]) == 2
        assert resolve(["1000000000"]) == 1_000_000_000

    def test_parse_error(self):
        assert_failure(resolve(["abc"]), ErrorKind.PARSE, "not a number")

    def test_overflow_is_parse_error(self):
        assert_failure(resolve(["99999999999999999999"]), ErrorKind.PARSE, "number out of range")

    def test_range_errors(self):
        for text in ["1", "0", "-3", "1000000001", "2147483647"]:
            assert_failure(resolve([text]), ErrorKind.RANGE)

    def test_no_side_effects_on_args(self):
        args = ["30"]
        resolve(args)
        assert args == ["30"]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
