"""Non-negative numbers written in base four, with addition and subtraction."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from functools import total_ordering
from itertools import zip_longest

_DIGIT_CHARS = frozenset("0123")
_FORMAT = re.compile(r"0|[1-3][0-3]*")


@total_ordering
class Quaternary:
    """A base-four number stored as its digits, least significant first.

    A number built from no digits at all is empty: it prints as an empty
    string and orders before every non-empty number, including zero.
    """

    __slots__ = ("_digits",)

    def __init__(self, number: str = "0") -> None:
        if not isinstance(number, str):
            raise TypeError("number must be a string")
        if not _FORMAT.fullmatch(number):
            raise ValueError("Passed string has invalid four number format")
        self._digits = [int(char) for char in reversed(number)]

    @classmethod
    def _with_digits(cls, digits: list[int]) -> Quaternary:
        obj = cls.__new__(cls)
        obj._digits = digits
        return obj

    @classmethod
    def repeat(cls, n: int, digit: str) -> Quaternary:
        """Build a number of ``n`` copies of ``digit``."""
        if not isinstance(digit, str) or digit not in _DIGIT_CHARS:
            raise ValueError("digit is invalid")
        if n < 0:
            raise ValueError("n must not be negative")
        return cls._with_digits([int(digit)] * n)

    @classmethod
    def from_digits(cls, digits: Iterable[str]) -> Quaternary:
        """Build a number from digit characters, most significant first."""
        chars = list(digits)
        if any(not isinstance(char, str) or char not in _DIGIT_CHARS for char in chars):
            raise ValueError("Passed digits contain invalid characters")
        return cls._with_digits([int(char) for char in reversed(chars)])

    def _significant(self) -> tuple[int, ...]:
        """Digits without leading zeros, most significant first."""
        if not self._digits:
            return ()
        end = len(self._digits)
        while end > 1 and self._digits[end - 1] == 0:
            end -= 1
        return tuple(reversed(self._digits[:end]))

    def _key(self) -> tuple[int, tuple[int, ...]]:
        significant = self._significant()
        return len(significant), significant

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self._significant())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternary):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quaternary):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _sum_digits(self, other: Quaternary) -> list[int]:
        result = []
        carry = 0
        for a, b in zip_longest(self._digits, other._digits, fillvalue=0):
            carry, digit = divmod(a + b + carry, 4)
            result.append(digit)
        if carry:
            result.append(carry)
        return result

    def _difference_digits(self, other: Quaternary) -> list[int]:
        if self < other:
            raise ValueError("Cannot subtract right value bigger than left value")
        result = []
        borrow = 0
        for a, b in zip_longest(self._digits, other._digits, fillvalue=0):
            digit = a - b - borrow
            borrow = 1 if digit < 0 else 0
            result.append(digit + 4 * borrow)
        return result

    def __add__(self, other: object) -> Quaternary:
        if not isinstance(other, Quaternary):
            return NotImplemented
        return self._with_digits(self._sum_digits(other))

    def __sub__(self, other: object) -> Quaternary:
        if not isinstance(other, Quaternary):
            return NotImplemented
        return self._with_digits(self._difference_digits(other))

    def __iadd__(self, other: object) -> Quaternary:
        if not isinstance(other, Quaternary):
            return NotImplemented
        self._digits = self._sum_digits(other)
        return self

    def __isub__(self, other: object) -> Quaternary:
        if not isinstance(other, Quaternary):
            return NotImplemented
        self._digits = self._difference_digits(other)
        return self


def _words_from_stdin() -> Iterable[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read two base-four numbers and print their sum, difference and ordering.

    The numbers are taken from ``argv`` when given, otherwise from standard input.
    """
    words = iter(argv) if argv else _words_from_stdin()
    print("[Four calculator]")
    try:
        print("Enter four number A: ", end="", flush=True)
        a = Quaternary(next(words, ""))
        print("Enter four number B: ", end="", flush=True)
        b = Quaternary(next(words, ""))
    except ValueError as error:
        print(f"\nError: {error}", file=sys.stderr)
        return 1

    print(f"Sum: {a + b}")
    try:
        print(f"Subtract: {a - b}")
    except ValueError as error:
        print(f"Subtract error: {error}")

    for label, value in (
        ("A < B", a < b),
        ("A > B", a > b),
        ("A <= B", a <= b),
        ("A >= B", a >= b),
        ("A == B", a == b),
        ("A != B", a != b),
    ):
        print(f"{label}: {int(value)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())