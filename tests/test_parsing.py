import pytest

from pushswap.parsing import (
    InputError,
    atoi,
    atoi_long,
    check_arg,
    parse_arguments,
    split_words,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  -42", -42),
        ("\t\n+7", 7),
        ("12ab", 12),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0


def test_atoi_stops_at_second_sign():
    assert atoi("--5") == atoi("")


@pytest.mark.parametrize(
    ("text", "expected"),
    [("123", 123), ("-5", -5), ("\t 9", 9), ("+3", 3), ("2147483648", 2147483648)],
)
def test_atoi_long_reads_whole_number(text, expected):
    assert atoi_long(text) == expected


def test_atoi_long_trailing_garbage_gives_zero():
    assert atoi_long("5-") == atoi_long("") == atoi("x")


def test_atoi_long_is_wider_than_atoi():
    assert atoi_long("-2147483649") == -2147483649
    assert atoi("-2147483649") != -2147483649


def test_split_words_drops_empty_pieces():
    assert split_words("1 2  3 ", " ") == ["1", "2", "3"]
    assert split_words("", " ") == []
    assert split_words("   ", " ") == []


def test_split_words_round_trip():
    words = ["7", "-1", "300"]
    assert split_words(" ".join(words)) == words


@pytest.mark.parametrize(
    "text", ["0", "42", "-42", "2147483647", "-2147483648", "5-"]
)
def test_check_arg_accepts(text):
    assert check_arg(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "-", "+1", "1a", " 1", "--1", "-0", "2147483648", "-2147483649"],
)
def test_check_arg_rejects(text):
    assert check_arg(text) is False


def test_parse_no_arguments_is_empty():
    assert parse_arguments([]) == []


def test_parse_separate_arguments():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_single_quoted_argument():
    assert parse_arguments(["3 -1  2"]) == [3, -1, 2]


def test_parse_agrees_between_forms():
    args = ["10", "2147483647", "-2147483648", "0"]
    assert parse_arguments(args) == parse_arguments([" ".join(args)])


@pytest.mark.parametrize("arg", ["5", "", "   "])
def test_parse_single_value_is_empty(arg):
    assert parse_arguments([arg]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["1 1"],
        ["1", "x"],
        ["x"],
        ["1 x"],
        ["5-", "5"],
        ["1", "2147483648"],
        ["1", ""],
    ],
)
def test_parse_rejects_bad_input(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_message_and_kind():
    with pytest.raises(ValueError, match="^Error$"):
        parse_arguments(["2", "2"])