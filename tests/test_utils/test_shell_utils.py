"""Tests for shell quoting helpers."""

from ssh_shell.utils.shell import escape, join_command


def test_escape_leaves_safe_words_alone():
    assert escape("ls") == "ls"
    assert escape("/var/log/syslog") == "/var/log/syslog"


def test_escape_quotes_spaces_and_metacharacters():
    assert escape("a b") == "'a b'"
    assert escape("$(rm -rf /)") == "'$(rm -rf /)'"


def test_escape_handles_single_quotes():
    assert escape("it's") == "'it'\"'\"'s'"


def test_escape_empty_string():
    assert escape("") == "''"


def test_join_command_quotes_each_argument():
    assert join_command(["grep", "-r", "two words", "/srv"]) == "grep -r 'two words' /srv"
