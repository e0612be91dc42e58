"""Command and parameter descriptors, plus the @command / Arg declaration helpers."""

from __future__ import annotations

import inspect
import itertools
import typing
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Annotated, Any

from ..core.errors import RegistrationError
from .types import SemanticType, resolve_type

NO_HELP = "no help given"

_COMMAND_ATTR = "__declcli_command__"
_declaration_counter = itertools.count()


@dataclass(frozen=True)
class ParameterDescriptor:
    semantic_type: SemanticType
    help: str = NO_HELP
    name: str = ""


@dataclass(frozen=True)
class CommandDescriptor:
    """Immutable metadata for one invocable command."""

    name: str
    help: str
    parameters: tuple[ParameterDescriptor, ...]
    handler: Callable[..., Any] = field(compare=False)

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def matches(self, name: str, arity: int | None = None) -> bool:
        if self.name.lower() != name.lower():
            return False
        return arity is None or self.arity == arity


@dataclass(frozen=True)
class Arg:
    """Parameter metadata for ``Annotated[int, Arg("summand 1")]``."""

    help: str = NO_HELP


@dataclass(frozen=True)
class CommandSpec:
    """What @command attaches to a function, before it is bound."""

    name: str
    help: str
    order: int


def command(name: str | None = None, *, help: str = "") -> Callable:
    """Mark a method as a command handler.

    Usage::

        @command("add", help="Add two numbers")
        def add(self, a: Annotated[int, Arg("summand 1")], b: int): ...

    Declaration order is recorded so that registries list and match commands
    in the order they were written.
    """

    def decorator(fn: Callable) -> Callable:
        spec = CommandSpec(
            name=name or fn.__name__,
            help=help or (inspect.getdoc(fn) or "").split("\n", 1)[0],
            order=next(_declaration_counter),
        )
        setattr(fn, _COMMAND_ATTR, spec)
        return fn

    return decorator


def command_spec(obj: Any) -> CommandSpec | None:
    return getattr(obj, _COMMAND_ATTR, None)


def validate_name(name: str) -> str:
    if not name or any(c.isspace() for c in name) or '"' in name:
        raise RegistrationError(f"invalid command name: {name!r}")
    return name


def _arg_help(annotation: Any) -> str:
    if typing.get_origin(annotation) is Annotated:
        for meta in annotation.__metadata__:
            if isinstance(meta, Arg):
                return meta.help
    return NO_HELP


def parameters_from_signature(fn: Callable) -> tuple[ParameterDescriptor, ...]:
    """Build parameter descriptors from a (bound) callable's annotations."""
    try:
        hints = typing.get_type_hints(fn, include_extras=True)
    except (NameError, TypeError) as e:
        raise RegistrationError(f"cannot resolve annotations of {fn!r}: {e}") from e

    params: list[ParameterDescriptor] = []
    for p in inspect.signature(fn).parameters.values():
        if p.kind not in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            raise RegistrationError(
                f"{fn.__qualname__}: parameter {p.name!r} must be positional"
            )
        if p.default is not p.empty:
            raise RegistrationError(
                f"{fn.__qualname__}: parameter {p.name!r} cannot have a default"
            )
        if p.name not in hints:
            raise RegistrationError(f"{fn.__qualname__}: parameter {p.name!r} is not annotated")
        annotation = hints[p.name]
        params.append(
            ParameterDescriptor(
                semantic_type=resolve_type(annotation),
                help=_arg_help(annotation),
                name=p.name,
            )
        )
    return tuple(params)


def make_parameter(entry: Any) -> ParameterDescriptor:
    """Accept a ParameterDescriptor, a ``(type, help)`` pair, or a bare type."""
    if isinstance(entry, ParameterDescriptor):
        return entry
    if isinstance(entry, tuple):
        if len(entry) != 2:
            raise RegistrationError(f"parameter entry must be (type, help): {entry!r}")
        annotation, help_text = entry
        return ParameterDescriptor(resolve_type(annotation), help_text or NO_HELP)
    return ParameterDescriptor(resolve_type(entry), _arg_help(entry))
