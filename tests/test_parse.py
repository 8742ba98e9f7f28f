import pytest

from pushswap.parse import (
    InputError,
    has_duplicates,
    parse_arguments,
    parse_number,
)


@pytest.mark.parametrize("token", ["42", "+42", "7", "0", "00", "-13"])
def test_parse_number_matches_int(token):
    assert parse_number(token) == int(token)


def test_parse_number_bounds():
    assert parse_number("2147483647") == 2147483647
    assert parse_number("-2147483648") == -2147483648


@pytest.mark.parametrize(
    "token",
    [
        "2147483648",
        "-2147483649",
        "99999999999999999999",
        "-0",
        "+0",
        "+00",
        "-",
        "+",
        "",
        "12a",
        "a12",
        "1-2",
        "--1",
        "+-1",
        "\t5",
        "5\n",
        "1.5",
    ],
)
def test_parse_number_rejects(token):
    with pytest.raises(InputError):
        parse_number(token)


def test_input_error_is_value_error_with_message():
    with pytest.raises(ValueError, match="^Error$"):
        parse_number("x")


def test_has_duplicates():
    assert has_duplicates([1, 2, 1]) is True
    assert has_duplicates([1, 2, 3]) is False
    assert has_duplicates([5]) is False
    assert has_duplicates([]) is False


def test_parse_arguments_separate():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_parse_arguments_joined_and_mixed():
    assert parse_arguments(["3 1", "2", " 4  5 "]) == [3, 1, 2, 4, 5]


def test_parse_arguments_signs():
    assert parse_arguments(["-5", "+6", "0"]) == [-5, 6, 0]


def test_parse_arguments_only_spaces_gives_nothing():
    assert parse_arguments(["   "]) == []
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["1", ""],
        ["1 2", "2"],
        ["1", "x"],
        ["1", "-0"],
        ["2147483648"],
        ["1\t2"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_parse_arguments_round_trip():
    values = [10, -3, 7, 2147483647, -2147483648, 0]
    assert parse_arguments([" ".join(str(v) for v in values)]) == values
    assert parse_arguments([str(v) for v in values]) == values