"""Tests for declcli.tui.completers."""

from __future__ import annotations

import io

from prompt_toolkit.document import Document

from declcli.commands import CommandHandler, RegistryBuilder
from declcli.core.utils import make_console
from declcli.tui.completers import _CommandCompleter


def _handler():
    builder = (
        RegistryBuilder()
        .add("add", print, help="Add two numbers", params=[int, int])
        .add("Alpha", print, help="Mixed case", params=[])
        .add("hello", print, help="Greets", params=[])
    )
    return CommandHandler(builder, console=make_console(io.StringIO()))


class TestCommandCompleter:
    def _completions(self, text):
        completer = _CommandCompleter(_handler())
        doc = Document(text, len(text))
        return list(completer.get_completions(doc, None))

    def test_empty_returns_all(self):
        texts = [c.text for c in self._completions("")]
        assert sorted(texts) == sorted(["add", "Alpha", "hello", "help", "quit"])

    def test_prefix_filters(self):
        texts = [c.text for c in self._completions("he")]
        assert sorted(texts) == ["hello", "help"]

    def test_case_insensitive(self):
        texts = [c.text for c in self._completions("AL")]
        assert texts == ["Alpha"]

    def test_start_position_replaces_word(self):
        (completion,) = self._completions("qu")
        assert completion.text == "quit"
        assert completion.start_position == -2

    def test_meta_is_help(self):
        (completion,) = self._completions("ad")
        assert completion.display_meta_text == "Add two numbers"

    def test_no_completion_after_first_word(self):
        assert self._completions("add 1") == []

    def test_no_completion_inside_quote(self):
        assert self._completions('"he') == []

    def test_leading_spaces_ignored(self):
        texts = [c.text for c in self._completions("  qu")]
        assert texts == ["quit"]
