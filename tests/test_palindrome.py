import io

import pytest

from labworks.palindrome import is_palindrome, main


@pytest.mark.parametrize(
    "text",
    ["", "a", "aa", "bb", "bbb", "abba", "abbba", "abcba", "abccba"],
)
def test_positive_cases(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize(
    "text",
    ["ab", "ba", "bba", "abb", "aab", "abc", "abca", "acbba", "abbbc", "bbccba"],
)
def test_negative_cases(text):
    assert is_palindrome(text) is False


def test_main_reports_palindrome_from_argv(capsys):
    assert main(["abba"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("[Polyndrom checker 4000]\n")
    assert "String IS polyndrom" in out


def test_main_reports_non_palindrome_from_argv(capsys):
    assert main(["abc"]) == 0
    assert "String is NOT polyndrom" in capsys.readouterr().out


def test_main_reads_first_word_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n  abcba trailing\n"))
    assert main([]) == 0
    assert "String IS polyndrom" in capsys.readouterr().out


def test_main_reads_word_not_palindrome_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab\n"))
    main([])
    assert "String is NOT polyndrom" in capsys.readouterr().out