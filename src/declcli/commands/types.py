"""Semantic parameter types and the annotations that map onto them."""

from __future__ import annotations

import enum
import typing
from dataclasses import dataclass
from typing import Annotated, Any, Union

from ..core.errors import RegistrationError


@dataclass(frozen=True)
class BooleanType:
    label = "boolean"


@dataclass(frozen=True)
class IntegerType:
    bits: int = 32

    def __post_init__(self) -> None:
        if self.bits not in (8, 16, 32, 64):
            raise RegistrationError(f"unsupported integer width: {self.bits}")

    @property
    def label(self) -> str:
        return f"int{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1


@dataclass(frozen=True)
class CharacterType:
    label = "char"


@dataclass(frozen=True)
class FloatingType:
    bits: int = 64

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise RegistrationError(f"unsupported floating-point width: {self.bits}")

    @property
    def label(self) -> str:
        return f"float{self.bits}"


@dataclass(frozen=True)
class EnumeratedType:
    enum_cls: type[enum.Enum]

    @property
    def label(self) -> str:
        return self.enum_cls.__name__

    @property
    def members(self) -> tuple[str, ...]:
        return tuple(self.enum_cls.__members__)


@dataclass(frozen=True)
class TextType:
    label = "text"


SemanticType = Union[BooleanType, IntegerType, CharacterType, FloatingType, EnumeratedType, TextType]

_SEMANTIC_TYPES = (BooleanType, IntegerType, CharacterType, FloatingType, EnumeratedType, TextType)

# Annotation aliases for handler signatures
Int8 = Annotated[int, IntegerType(8)]
Int16 = Annotated[int, IntegerType(16)]
Int32 = Annotated[int, IntegerType(32)]
Int64 = Annotated[int, IntegerType(64)]
Float32 = Annotated[float, FloatingType(32)]
Float64 = Annotated[float, FloatingType(64)]
Char = Annotated[str, CharacterType()]

_PLAIN_TYPES: dict[Any, SemanticType] = {
    bool: BooleanType(),
    int: IntegerType(32),
    float: FloatingType(64),
    str: TextType(),
}


def is_semantic_type(value: Any) -> bool:
    return isinstance(value, _SEMANTIC_TYPES)


def resolve_type(annotation: Any) -> SemanticType:
    """Map a handler annotation (or a semantic type instance) to a semantic type.

    ``Annotated`` metadata wins over the base type, so ``Int64`` resolves to
    ``IntegerType(64)`` even though its base is plain ``int``.
    """
    if is_semantic_type(annotation):
        return annotation

    if typing.get_origin(annotation) is Annotated:
        for meta in annotation.__metadata__:
            if is_semantic_type(meta):
                return meta
        return resolve_type(typing.get_args(annotation)[0])

    if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
        return EnumeratedType(annotation)

    try:
        return _PLAIN_TYPES[annotation]
    except (KeyError, TypeError):
        raise RegistrationError(f"no semantic type for annotation {annotation!r}") from None
