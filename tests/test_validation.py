"""Tests for formkit.validation — validators over inflated values."""

from formkit.validation import email, first_error, in_range, matches, max_length, min_length, one_of


class TestLength:
    def test_max_length(self) -> None:
        assert max_length(5)("12345") is None
        assert max_length(5)("123456") == "Field should not exceed 5 characters"

    def test_min_length(self) -> None:
        assert min_length(3)("abc") is None
        assert min_length(3)("ab") == "Field must be at least 3 characters"

    def test_non_string_value(self) -> None:
        assert max_length(2)(1234) == "Field should not exceed 2 characters"


class TestTextShape:
    def test_email(self) -> None:
        assert email("first.last@sub.domain.org") is None
        assert email("user@") is not None
        assert email("user@localhost") is not None
        assert email("a b@example.com") is not None

    def test_matches_whole_value(self) -> None:
        check = matches(r"\d+")
        assert check("123") is None
        assert check("123abc") == r"Must match pattern: \d+"

    def test_matches_custom_message(self) -> None:
        assert matches(r"\d+", "Digits only")("x") == "Digits only"

    def test_one_of_keeps_given_order(self) -> None:
        check = one_of("red", "green")
        assert check("red") is None
        assert check("blue") == "Must be one of: red, green"

    def test_one_of_compares_values(self) -> None:
        assert one_of(1, 2, 3)(2) is None
        assert one_of(1, 2, 3)("2") == "Must be one of: 1, 2, 3"


class TestInRange:
    def test_bounds(self) -> None:
        check = in_range(1, 10)
        assert check(5) is None
        assert check(0) == "Value must be at least 1"
        assert check(11) == "Value must be at most 10"

    def test_open_bounds(self) -> None:
        assert in_range(low=0)(1000) is None
        assert in_range(high=0)(-5) is None

    def test_not_a_number(self) -> None:
        assert in_range(0, 1)("1") == "Must be a number"
        assert in_range(0, 1)(True) == "Must be a number"


def test_first_error_stops_at_first_failure() -> None:
    calls: list[str] = []

    def failing(value: object) -> str:
        calls.append("failing")
        return "first"

    def never(value: object) -> str:
        calls.append("never")
        return "second"

    assert first_error([failing, never], "x") == "first"
    assert calls == ["failing"]
    assert first_error([], "x") is None
