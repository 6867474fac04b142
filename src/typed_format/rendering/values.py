"""Renderable value kinds.

Every bound argument is classified once into a closed set of kinds. The
renderer and the resolver dispatch on the kind instead of probing the value
again for each fragment.
"""

from collections.abc import Iterable
from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
import numbers
from typing import NamedTuple
from typing import Protocol
from typing import runtime_checkable

from pydantic import BaseModel

from typed_format.parsing.types import Specifier


class ValueKind(StrEnum):
    """Closed set of value kinds understood by the renderer."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    PAIR = "pair"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    RENDERABLE = "renderable"


class Pair(NamedTuple):
    """Two values rendered as ``first: second``."""

    first: object
    second: object


@runtime_checkable
class Renderable(Protocol):
    """Protocol for values that render themselves.

    Implementations may also provide ``select(name: str) -> object`` to
    support field selectors such as ``{0.name}``.
    """

    def __typed_format__(self, specifier: Specifier) -> str:
        """Render the value under the decoded specifier."""
        ...


def classify(value: object) -> ValueKind:
    """Determine the kind of a value.

    Args:
        value: Any caller supplied value

    Returns:
        The kind used for selector resolution and rendering. Values that fit
        no other kind are rendered as strings.

    """
    match value:
        case bool():
            return ValueKind.BOOLEAN
        case int():
            return ValueKind.INTEGER
        case numbers.Real() | Decimal():
            return ValueKind.FLOAT
        case str() | bytes() | bytearray():
            return ValueKind.STRING
        case Pair():
            return ValueKind.PAIR
        case Renderable():
            return ValueKind.RENDERABLE
        case Mapping() | BaseModel():
            return ValueKind.MAPPING
        case Iterable():
            return ValueKind.SEQUENCE
    return ValueKind.STRING


def mapping_items(value: object) -> list[tuple[object, object]]:
    """Return the entries of a mapping-kind value in iteration order."""
    if isinstance(value, BaseModel):
        return list(dict(value).items())
    if isinstance(value, Mapping):
        return list(value.items())
    msg = f"Expected a mapping, got {type(value).__name__}"
    raise TypeError(msg)
