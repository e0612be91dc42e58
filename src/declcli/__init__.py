"""declcli: a command shell built from declared handler metadata."""

from .commands import (
    SHUTDOWN,
    Arg,
    Char,
    CommandDescriptor,
    CommandHandler,
    CommandRegistry,
    DispatchOutcome,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    OutcomeKind,
    ParameterDescriptor,
    RegistryBuilder,
    command,
)
from .core.errors import (
    ArgumentConversionError,
    CLIError,
    CommandError,
    ConfigError,
    RegistrationError,
    ShutdownSignal,
)

__all__ = [
    "SHUTDOWN",
    "Arg",
    "ArgumentConversionError",
    "CLIError",
    "Char",
    "CommandDescriptor",
    "CommandError",
    "CommandHandler",
    "CommandRegistry",
    "ConfigError",
    "DispatchOutcome",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "OutcomeKind",
    "ParameterDescriptor",
    "RegistrationError",
    "RegistryBuilder",
    "ShutdownSignal",
    "command",
]
