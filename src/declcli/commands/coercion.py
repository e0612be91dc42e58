"""Convert string tokens into typed handler arguments."""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Sequence
from typing import Any

from ..core.errors import ArgumentConversionError
from .types import (
    BooleanType,
    CharacterType,
    EnumeratedType,
    FloatingType,
    IntegerType,
    SemanticType,
    TextType,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:nan|inf(?:inity)?|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)[fd]?",
    re.IGNORECASE,
)


def _to_boolean(token: str) -> bool:
    # Anything but "true" is False, never an error.
    return token.lower() == "true"


def _to_integer(token: str, t: IntegerType) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise ArgumentConversionError(token, t.label, "not an integer")
    out_of_range = f"out of range [{t.min_value}, {t.max_value}]"
    # Leading zeros do not count; more digits than max_value cannot fit.
    digits = token.lstrip("+-").lstrip("0")
    if len(digits) > len(str(t.max_value)):
        raise ArgumentConversionError(token, t.label, out_of_range)
    value = int(digits or "0")
    if token.startswith("-"):
        value = -value
    if not t.min_value <= value <= t.max_value:
        raise ArgumentConversionError(token, t.label, out_of_range)
    return value


def _to_character(token: str, t: CharacterType) -> str:
    """First code point of *token*; an astral character stays whole."""
    if not token:
        raise ArgumentConversionError(token, t.label, "empty")
    return token[0]


def _to_floating(token: str, t: FloatingType) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise ArgumentConversionError(token, t.label, "not a number")
    if token[-1] in "fFdD" and not token.lower().endswith("inf"):
        token = token[:-1]
    value = float(token)
    if t.bits == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            value = math.copysign(math.inf, value)
    return value


def _to_enum(token: str, t: EnumeratedType) -> Any:
    try:
        return t.enum_cls.__members__[token]
    except KeyError:
        raise ArgumentConversionError(
            token, t.label, f"expected one of {', '.join(t.members)}"
        ) from None


def coerce(token: str, semantic_type: SemanticType) -> Any:
    """Convert *token* to *semantic_type*, raising ArgumentConversionError on failure."""
    if isinstance(semantic_type, BooleanType):
        return _to_boolean(token)
    if isinstance(semantic_type, IntegerType):
        return _to_integer(token, semantic_type)
    if isinstance(semantic_type, CharacterType):
        return _to_character(token, semantic_type)
    if isinstance(semantic_type, FloatingType):
        return _to_floating(token, semantic_type)
    if isinstance(semantic_type, EnumeratedType):
        return _to_enum(token, semantic_type)
    if isinstance(semantic_type, TextType):
        return token
    raise TypeError(f"unknown semantic type: {semantic_type!r}")


def coerce_all(tokens: Sequence[str], parameters: Sequence) -> list[Any]:
    """Coerce *tokens* positionally against *parameters*; the first failure aborts."""
    return [coerce(token, p.semantic_type) for token, p in zip(tokens, parameters, strict=True)]
