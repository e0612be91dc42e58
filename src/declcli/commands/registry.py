"""Immutable command registry, built once from a handler source."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from ..core.errors import RegistrationError
from .descriptors import (
    CommandDescriptor,
    command_spec,
    make_parameter,
    parameters_from_signature,
    validate_name,
)

logger = logging.getLogger(__name__)


def check_arity(descriptor: CommandDescriptor) -> CommandDescriptor:
    """Reject *descriptor* if its handler cannot take ``arity`` positional arguments."""
    try:
        sig = inspect.signature(descriptor.handler)
    except (TypeError, ValueError):
        # Some builtins expose no signature; nothing to check against.
        return descriptor
    try:
        sig.bind(*range(descriptor.arity))
    except TypeError as e:
        raise RegistrationError(
            f"handler for {descriptor.name!r} cannot take {descriptor.arity} arguments: {e}"
        ) from None
    return descriptor


class RegistryBuilder:
    """Explicit, ordered registration of commands.

    Usage::

        builder = RegistryBuilder().add(
            "add", add, help="Add two numbers", params=[(int, "summand 1"), (int, "summand 2")]
        )

    Without ``params`` the parameters are read from the handler's annotations.
    """

    def __init__(self) -> None:
        self._descriptors: list[CommandDescriptor] = []

    def add(
        self,
        name: str,
        handler: Callable[..., Any],
        *,
        help: str = "",
        params: Sequence[Any] | None = None,
    ) -> RegistryBuilder:
        if not callable(handler):
            raise RegistrationError(f"handler for {name!r} is not callable")
        parameters = (
            parameters_from_signature(handler)
            if params is None
            else tuple(make_parameter(p) for p in params)
        )
        self._descriptors.append(
            check_arity(CommandDescriptor(validate_name(name), help, parameters, handler))
        )
        return self

    def add_descriptor(self, descriptor: CommandDescriptor) -> RegistryBuilder:
        if not isinstance(descriptor, CommandDescriptor):
            raise RegistrationError(f"not a CommandDescriptor: {descriptor!r}")
        validate_name(descriptor.name)
        self._descriptors.append(check_arity(descriptor))
        return self

    def descriptors(self) -> tuple[CommandDescriptor, ...]:
        return tuple(self._descriptors)


def introspect(source: Any) -> list[CommandDescriptor]:
    """Collect @command-decorated methods of *source* in declaration order."""
    if inspect.ismodule(source):
        namespaces = [vars(source)]
    else:
        namespaces = [vars(klass) for klass in type(source).__mro__]

    found = []
    seen: set[str] = set()
    for ns in namespaces:
        for attr, raw in ns.items():
            if attr in seen or attr.startswith("__") or isinstance(raw, property):
                continue
            seen.add(attr)
            member = getattr(source, attr, None)
            spec = command_spec(member)
            if spec is None or not callable(member):
                continue
            found.append((spec.order, attr, spec, member))

    descriptors = []
    for _order, attr, spec, member in sorted(found, key=lambda f: (f[0], f[1])):
        descriptors.append(
            CommandDescriptor(
                name=validate_name(spec.name),
                help=spec.help,
                parameters=parameters_from_signature(member),
                handler=member,
            )
        )
        logger.debug("registered %s/%d from %s", spec.name, descriptors[-1].arity, attr)
    return descriptors


class CommandRegistry:
    """Ordered, read-only sequence of command descriptors."""

    def __init__(self, descriptors: Iterable[CommandDescriptor]):
        self._descriptors = tuple(descriptors)

    @classmethod
    def build(
        cls,
        source: Any,
        builtins: Iterable[CommandDescriptor] = (),
    ) -> CommandRegistry:
        """Snapshot *source*'s commands, followed by *builtins*.

        *source* may be a RegistryBuilder, an iterable of descriptors, or an
        object whose methods carry @command.
        """
        if isinstance(source, RegistryBuilder):
            own = list(source.descriptors())
        elif isinstance(source, Iterable) and not isinstance(source, (str, bytes)):
            builder = RegistryBuilder()
            for d in source:
                builder.add_descriptor(d)
            own = list(builder.descriptors())
        else:
            own = introspect(source)
        return cls([*own, *builtins])

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __getitem__(self, index: int) -> CommandDescriptor:
        return self._descriptors[index]

    def find(self, name: str, arity: int) -> CommandDescriptor | None:
        """First descriptor (in discovery order) matching name and arity."""
        for d in self._descriptors:
            if d.matches(name, arity):
                return d
        return None

    def named(self, name: str) -> list[CommandDescriptor]:
        return [d for d in self._descriptors if d.matches(name)]

    def names(self) -> list[str]:
        seen: dict[str, None] = {}
        for d in self._descriptors:
            seen.setdefault(d.name, None)
        return list(seen)
