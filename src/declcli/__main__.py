"""CLI entry point: run the demo shell in a prompt-toolkit REPL."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .core.config import load_config
from .core.errors import ConfigError
from .core.utils import make_console, setup_logging
from .demo import DemoShell
from .tui import run_repl

console = make_console()


@click.command()
@click.option("--prompt", "-p", default=None, help="Prompt string (default '> ')")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging to stderr")
@click.option(
    "--history",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="History file (default ~/.declcli/history)",
)
def _click_main(prompt: str | None, verbose: bool, history: Path | None):
    """declcli — declarative command shell demo."""
    try:
        config = load_config(prompt=prompt, verbose=verbose)
    except ConfigError as e:
        console.print(f"error: {e}", style="bold", markup=False)
        sys.exit(1)
    if history is not None:
        config.history_file = history

    setup_logging(config.verbose, config.log_file)

    shell = DemoShell(console=console)
    console.print("type [bold]help[/bold] for commands, [bold]quit[/bold] to exit", style="dim")
    run_repl(shell, config)


def main():
    _click_main()


if __name__ == "__main__":
    main()
