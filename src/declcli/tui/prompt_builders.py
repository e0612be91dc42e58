"""Prompt-toolkit prompt and toolbar builders."""

from __future__ import annotations

from prompt_toolkit.formatted_text import HTML, FormattedText

from ..core.config import DEFAULT_PROMPT


def _build_prompt(text: str = DEFAULT_PROMPT) -> FormattedText:
    return FormattedText([("class:prompt", text)])


def _build_toolbar(cmd_handler):
    n_commands = len(cmd_handler.completions)

    def _toolbar():
        return HTML(f" <b>{n_commands}</b> commands | tab: complete | help | quit")

    return _toolbar
