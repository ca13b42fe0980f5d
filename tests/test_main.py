"""Tests for `python -m addressbook`."""

import logging

import pytest

from addressbook.__main__ import main
from addressbook.application import SEPARATOR_LINE

_LINES = (
    "Alice,,,1600 Washington Blvd" + ",,," * 7 + "\n"
    "Bob,,,,,,Seattle" + ",,," * 6 + "\n"
)


@pytest.fixture
def book_file(monkeypatch, tmp_path):
    path = tmp_path / "book.txt"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ADDRESSBOOK_FILE", str(path))
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: None)
    return path


def test_prints_matching_contacts(book_file, capsys):
    book_file.write_text(_LINES, encoding="utf-8")
    assert main(["wash"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Name: Alice\n")
    assert "Bob" not in out
    assert out.endswith(SEPARATOR_LINE)


def test_prints_everything_without_keyword(book_file, capsys):
    book_file.write_text(_LINES, encoding="utf-8")
    assert main([]) == 0
    assert capsys.readouterr().out.count(SEPARATOR_LINE) == 2


def test_missing_file_exits_with_error(book_file, capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_undecodable_file_exits_with_error(book_file, capsys):
    book_file.write_bytes(b"Mi\xffke" + b",,," * 8 + b"\n")
    assert main([]) == 1
    assert capsys.readouterr().out == ""
