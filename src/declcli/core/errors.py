"""Exception hierarchy: reportable command failures, conversion, registration, config."""

from __future__ import annotations


class CLIError(Exception):
    """Base class for declcli failures."""


class CommandError(CLIError):
    """Deliberate, user-facing failure raised by a command handler.

    The dispatcher prints it as ``failed to execute command: <message>`` and
    the loop keeps running.
    """


class ArgumentConversionError(CLIError, ValueError):
    """A token could not be coerced into its parameter's semantic type."""

    def __init__(self, token: str, type_label: str, reason: str = ""):
        self.token = token
        self.type_label = type_label
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"cannot convert {token!r} to {type_label}{detail}")


class RegistrationError(CLIError, TypeError):
    """A command or parameter declaration cannot be turned into a descriptor."""


class ConfigError(CLIError, ValueError):
    """Settings file or environment configuration is invalid."""


class ShutdownSignal(Exception):
    """Raised by a handler to end the loop; converted to an outcome by the dispatcher."""
