"""Palindrome check for a single word."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def _read_word() -> str:
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a word and report whether it is a palindrome.

    The word is taken from ``argv`` when given, otherwise from standard input.
    """
    print("[Polyndrom checker 4000]")
    print("Enter string: ", end="", flush=True)
    text = argv[0] if argv else _read_word()
    if argv:
        print()

    if is_palindrome(text):
        print("String IS polyndrom")
    else:
        print("String is NOT polyndrom")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())