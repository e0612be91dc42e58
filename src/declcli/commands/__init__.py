"""Commands: descriptors, registry, coercion, dispatch, and help rendering."""

from .coercion import coerce, coerce_all
from .descriptors import NO_HELP, Arg, CommandDescriptor, ParameterDescriptor, command
from .dispatcher import (
    COMMAND_FAILED_PREFIX,
    CONVERSION_ERROR_MESSAGE,
    SHUTDOWN,
    UNKNOWN_COMMAND_MESSAGE,
    DispatchOutcome,
    Dispatcher,
    OutcomeKind,
)
from .handler import CommandHandler
from .help import list_completions, render_help
from .registry import CommandRegistry, RegistryBuilder
from .tokenizer import tokenize
from .types import (
    BooleanType,
    Char,
    CharacterType,
    EnumeratedType,
    Float32,
    Float64,
    FloatingType,
    Int8,
    Int16,
    Int32,
    Int64,
    IntegerType,
    TextType,
)

__all__ = [
    "COMMAND_FAILED_PREFIX",
    "CONVERSION_ERROR_MESSAGE",
    "NO_HELP",
    "SHUTDOWN",
    "UNKNOWN_COMMAND_MESSAGE",
    "Arg",
    "BooleanType",
    "Char",
    "CharacterType",
    "CommandDescriptor",
    "CommandHandler",
    "CommandRegistry",
    "DispatchOutcome",
    "Dispatcher",
    "EnumeratedType",
    "Float32",
    "Float64",
    "FloatingType",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntegerType",
    "OutcomeKind",
    "ParameterDescriptor",
    "RegistryBuilder",
    "TextType",
    "coerce",
    "coerce_all",
    "command",
    "list_completions",
    "render_help",
    "tokenize",
]
