"""Dispatcher: match a command by name and arity, coerce, invoke, classify."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console

from ..core.errors import ArgumentConversionError, CommandError, ShutdownSignal
from .coercion import coerce_all
from .registry import CommandRegistry
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "Unknown command or wrong parameter count"
CONVERSION_ERROR_MESSAGE = "invalid numeric parameter given"
COMMAND_FAILED_PREFIX = "failed to execute command: "


class _Shutdown:
    """Marker a handler returns to end the loop."""

    def __repr__(self) -> str:
        return "SHUTDOWN"


SHUTDOWN = _Shutdown()


class OutcomeKind(enum.Enum):
    EMPTY = "empty"
    SUCCESS = "success"
    UNKNOWN_COMMAND = "unknown_command"
    ARGUMENT_CONVERSION_ERROR = "argument_conversion_error"
    USER_REPORTED_ERROR = "user_reported_error"
    SHUTDOWN_REQUESTED = "shutdown_requested"
    UNHANDLED_ERROR = "unhandled_error"


@dataclass(frozen=True)
class DispatchOutcome:
    """Tagged result of dispatching one input line."""

    kind: OutcomeKind
    command: str = ""
    message: str = ""
    error: BaseException | None = None

    @property
    def should_exit(self) -> bool:
        return self.kind is OutcomeKind.SHUTDOWN_REQUESTED

    @property
    def ok(self) -> bool:
        return self.kind in (OutcomeKind.SUCCESS, OutcomeKind.EMPTY)


class Dispatcher:
    """Runs commands against a registry, printing diagnostics on *console*."""

    def __init__(self, registry: CommandRegistry, console: Console):
        self.registry = registry
        self.console = console

    def _say(self, text: str, style: str | None = None) -> None:
        self.console.print(text, style=style, markup=False)

    def dispatch_line(self, line: str) -> DispatchOutcome:
        tokens = tokenize(line)
        if not tokens:
            return DispatchOutcome(OutcomeKind.EMPTY)
        return self.execute(tokens[0], tokens[1:])

    def execute(self, name: str, args: Sequence[str]) -> DispatchOutcome:
        descriptor = self.registry.find(name, len(args))
        if descriptor is None:
            logger.debug("no match for %s/%d", name, len(args))
            self._say(UNKNOWN_COMMAND_MESSAGE)
            return DispatchOutcome(OutcomeKind.UNKNOWN_COMMAND, name, UNKNOWN_COMMAND_MESSAGE)

        try:
            values = coerce_all(args, descriptor.parameters)
        except ArgumentConversionError as e:
            logger.debug("conversion failed for %s: %s", descriptor.name, e)
            self._say(CONVERSION_ERROR_MESSAGE)
            return DispatchOutcome(
                OutcomeKind.ARGUMENT_CONVERSION_ERROR, descriptor.name, CONVERSION_ERROR_MESSAGE, e
            )

        logger.debug("invoking %s/%d", descriptor.name, descriptor.arity)
        try:
            result = descriptor.handler(*values)
        except ShutdownSignal as e:
            return DispatchOutcome(OutcomeKind.SHUTDOWN_REQUESTED, descriptor.name, str(e), e)
        except CommandError as e:
            message = COMMAND_FAILED_PREFIX + str(e)
            self._say(message)
            return DispatchOutcome(OutcomeKind.USER_REPORTED_ERROR, descriptor.name, message, e)
        except KeyboardInterrupt as e:
            self._say("interrupted", style="dim")
            return DispatchOutcome(OutcomeKind.UNHANDLED_ERROR, descriptor.name, "interrupted", e)
        except Exception as e:
            logger.debug("command %s raised %s", descriptor.name, type(e).__name__, exc_info=True)
            self._say(f"error: {e}", style="bold")
            self.console.print_exception()
            return DispatchOutcome(OutcomeKind.UNHANDLED_ERROR, descriptor.name, str(e), e)

        if result is SHUTDOWN:
            return DispatchOutcome(OutcomeKind.SHUTDOWN_REQUESTED, descriptor.name)
        return DispatchOutcome(OutcomeKind.SUCCESS, descriptor.name)
