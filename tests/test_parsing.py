import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    ParseError,
    check_duplicates,
    is_blank,
    parse_arguments,
    parse_int,
    split_words,
)

int32 = st.integers(min_value=-2147483648, max_value=2147483647)


def test_split_words_drops_empty_pieces():
    assert split_words("  1 2   3 ", " ") == ["1", "2", "3"]


def test_split_words_empty():
    assert split_words("", " ") == []
    assert split_words("    ", " ") == []


@given(st.lists(st.text(alphabet="abc123", min_size=1), max_size=10))
def test_split_words_round_trip(words):
    assert split_words("  ".join(words), " ") == words


@pytest.mark.parametrize("text", ["", " ", "\t\n", " \v\f\r "])
def test_is_blank_true(text):
    assert is_blank(text) is True


@pytest.mark.parametrize("text", ["1", " 1 ", "\tx"])
def test_is_blank_false(text):
    assert is_blank(text) is False


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_int_overflow(text):
    with pytest.raises(ParseError):
        parse_int(text)


@pytest.mark.parametrize("text", ["", "-", "+", "+-1", "--1", "abc", " x1"])
def test_parse_int_rejects_non_numbers(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_int_whitespace_sign_and_trailing():
    assert parse_int("  \t+17") == 17
    assert parse_int("-5") == -5
    assert parse_int("12abc") == 12


@given(int32)
def test_parse_int_round_trip(value):
    assert parse_int(str(value)) == value


def test_check_duplicates():
    check_duplicates([1, 2, 3])
    with pytest.raises(ParseError):
        check_duplicates([1, 2, 1])


def test_parse_arguments_single_string():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]


def test_parse_arguments_multiple():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []
    assert parse_arguments([""]) == []


@pytest.mark.parametrize(
    "args",
    [["   "], ["1 \t 2"], ["1", ""], ["1", "  "], ["1 1"], ["1", "x"], ["2147483648"]],
)
def test_parse_arguments_errors(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


@given(st.lists(int32, unique=True, min_size=1, max_size=20))
def test_parse_arguments_round_trip(values):
    assert parse_arguments([" ".join(map(str, values))]) == values
    if len(values) > 1:
        assert parse_arguments([str(v) for v in values]) == values


def test_parse_error_message():
    with pytest.raises(ParseError, match="^Error$"):
        parse_arguments(["1", "1"])