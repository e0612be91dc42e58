"""Public API for the declcli TUI package."""

from .repl import run_repl

__all__ = ["run_repl"]
