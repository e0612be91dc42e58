"""Interactive REPL loop built on prompt_toolkit."""

from __future__ import annotations

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory

from ..commands import CommandHandler, OutcomeKind
from .completers import _CommandCompleter
from .prompt_builders import _build_prompt, _build_toolbar

logger = logging.getLogger(__name__)


def _create_session(cmd_handler: CommandHandler, config) -> PromptSession:
    history_path = config.history_path
    history_path.parent.mkdir(parents=True, exist_ok=True)
    return PromptSession(
        history=FileHistory(str(history_path)),
        multiline=False,
        completer=_CommandCompleter(cmd_handler),
        auto_suggest=AutoSuggestFromHistory(),
        bottom_toolbar=_build_toolbar(cmd_handler),
    )


def run_repl(cmd_handler: CommandHandler, config, session=None) -> OutcomeKind | None:
    """Read, dispatch and print until ``quit`` or end of input."""
    if session is None:
        session = _create_session(cmd_handler, config)
    return _run_repl_loop(cmd_handler, session, config.prompt)


def _run_repl_loop(cmd_handler: CommandHandler, session, prompt: str) -> OutcomeKind | None:
    """Drive the loop; returns SHUTDOWN_REQUESTED after ``quit``, None at end of input."""
    console = cmd_handler.console
    message = _build_prompt(prompt)

    while True:
        try:
            line = session.prompt(message)
        except KeyboardInterrupt:
            console.print()
            continue
        except EOFError:
            console.print()
            return None
        except Exception:
            # a broken reader ends the session like end of input
            logger.warning("line reader failed, ending session", exc_info=True)
            return None

        outcome = cmd_handler.handle(line)
        if outcome.should_exit:
            logger.debug("shutdown requested by %s", outcome.command)
            return outcome.kind
