"""CommandHandler: the CLI object that owns registry, dispatcher and completions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console

from ..core.utils import make_console
from .descriptors import CommandDescriptor, ParameterDescriptor
from .dispatcher import SHUTDOWN, DispatchOutcome, Dispatcher
from .help import list_completions, render_help
from .registry import CommandRegistry
from .types import TextType


class CommandHandler:
    """Turn a set of handlers into a dispatchable command surface.

    Either subclass it and decorate methods with ``@command``, or pass a
    ``RegistryBuilder`` (or any object with decorated methods) as *source*.
    The registry and the completion set are built once, here.
    """

    def __init__(self, source: Any = None, *, console: Console | None = None):
        self.console = console if console is not None else make_console()
        self.registry = CommandRegistry.build(
            self if source is None else source,
            builtins=self._builtin_descriptors(),
        )
        self.dispatcher = Dispatcher(self.registry, self.console)
        self.completions = list_completions(self.registry)

    def _builtin_descriptors(self) -> list[CommandDescriptor]:
        return [
            CommandDescriptor("help", "list all available commands", (), self._print_command_list),
            CommandDescriptor(
                "help",
                "print detailed help of a given command",
                (ParameterDescriptor(TextType(), "command for which help should be provided", "command"),),
                self._print_help,
            ),
            CommandDescriptor("quit", "quits the cli", (), self._quit),
        ]

    # ── built-in commands ──────────────────────────────────────────

    def _print_command_list(self) -> None:
        self.console.print(render_help(self.registry), markup=False)

    def _print_help(self, command: str) -> None:
        self.console.print(render_help(self.registry, command), markup=False)

    def _quit(self):
        return SHUTDOWN

    # ── dispatch ───────────────────────────────────────────────────

    def help_text(self, name: str | None = None) -> str:
        return render_help(self.registry, name)

    def describe(self, name: str) -> str:
        """First-line help of *name*, used as completion meta."""
        matches = self.registry.named(name)
        return matches[0].help if matches else ""

    def handle(self, line: str) -> DispatchOutcome:
        return self.dispatcher.dispatch_line(line)

    def execute(self, name: str, args: Sequence[str]) -> DispatchOutcome:
        return self.dispatcher.execute(name, args)

    def loop(self, prompt: str | None = None, session=None, config=None):
        """Run the interactive loop until ``quit`` or end of input."""
        from ..core.config import load_config
        from ..tui import run_repl

        config = config or load_config(prompt=prompt)
        if prompt is not None:
            config.prompt = prompt
        return run_repl(self, config, session=session)
