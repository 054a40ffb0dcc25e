"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import takewhile

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _leading_digits(text: str) -> str:
    return "".join(takewhile(lambda ch: ch in _DIGITS, text))


def _strip_sign(text: str) -> tuple[int, str]:
    if text[:1] in ("+", "-"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def atoi(text: str) -> int:
    """Read a leading 32-bit integer, ignoring whatever follows it.

    Leading whitespace and one sign are accepted. Values wrap around as
    32-bit integers do; after twenty digits the result is 0 for a negative
    number and -1 otherwise.
    """
    sign, rest = _strip_sign(text.lstrip(_WHITESPACE))
    number = 0
    for count, ch in enumerate(_leading_digits(rest)):
        if count > 19:
            return 0 if sign == -1 else -1
        number = _wrap(number * 10 + int(ch), 32)
    return _wrap(sign * number, 32)


def atoi_long(text: str) -> int:
    """Read a whole string as a 64-bit integer.

    Leading whitespace and one sign are accepted. Any character left after
    the digits makes the result 0. Values wrap around as 64-bit integers do.
    """
    sign, rest = _strip_sign(text.lstrip(_WHITESPACE))
    digits = _leading_digits(rest)
    if rest[len(digits):]:
        return 0
    result = 0
    for ch in digits:
        result = _wrap(result * 10 + int(ch), 64)
    return _wrap(result * sign, 64)


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def check_arg(text: str) -> bool:
    """Tell whether ``text`` is acceptable as one number for the stack.

    Only digits and minus signs may appear, the value must fit in a 32-bit
    signed integer, and a value read as zero must start with a digit.
    """
    if not text or any(ch not in _DIGITS and ch != "-" for ch in text):
        return False
    value = atoi_long(text)
    if value == 0 and text[0] not in _DIGITS:
        return False
    return INT_MIN <= value <= INT_MAX


def _validated_values(words: list[str]) -> list[int]:
    if not all(check_arg(word) for word in words):
        raise InputError()
    values = [atoi(word) for word in words]
    if len(set(values)) != len(values):
        raise InputError()
    return values


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the program's arguments into the values for stack ``a``.

    With no arguments there is nothing to sort and the result is empty. A
    single argument is split on spaces; if it holds fewer than two numbers
    the result is also empty. Invalid or repeated numbers raise
    ``InputError``.
    """
    args = list(args)
    if not args:
        return []
    if len(args) == 1:
        words = split_words(args[0], " ")
        if not all(check_arg(word) for word in words):
            raise InputError()
        if len(words) < 2:
            return []
        return _validated_values(words)
    return _validated_values(args)