"""Prompt-toolkit completer for command names."""

from __future__ import annotations

from prompt_toolkit.completion import Completer, Completion


class _CommandCompleter(Completer):
    """Autocomplete the first word against the handler's completion snapshot."""

    def __init__(self, cmd_handler):
        self._handler = cmd_handler
        self._candidates = sorted(cmd_handler.completions, key=str.lower)

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip(" ")
        if " " in text or text.startswith('"'):
            return
        prefix = text.lower()
        for name in self._candidates:
            if name.lower().startswith(prefix):
                yield Completion(
                    name,
                    start_position=-len(text),
                    display_meta=self._handler.describe(name),
                )
