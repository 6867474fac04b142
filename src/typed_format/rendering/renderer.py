"""Rendering of classified values under a specifier.

Containers are rendered element by element, each element under the same
specifier, wrapped in the delimiters configured on FormatConfig.
"""

from typed_format.core.config import FormatConfig
from typed_format.parsing.enums import Align
from typed_format.parsing.types import Specifier
from typed_format.rendering.numeric import FLOAT_TYPES
from typed_format.rendering.numeric import render_float
from typed_format.rendering.numeric import render_integer
from typed_format.rendering.padding import pad
from typed_format.rendering.padding import truncate_text
from typed_format.rendering.values import ValueKind
from typed_format.rendering.values import classify
from typed_format.rendering.values import mapping_items

BOOLEAN_WORDS = ("False", "True")


def render_text(text: str, specifier: Specifier) -> str:
    """Render text, truncated to the precision and padded to the width."""
    return pad(truncate_text(text, specifier), specifier, default_align=Align.LEFT)


def render_number(value: int | float, specifier: Specifier, *, integer: bool) -> str:
    """Render an integer or float and pad it.

    Integers asked for a float presentation type are promoted to float.
    """
    if integer and specifier.type not in FLOAT_TYPES:
        text = render_integer(int(value), specifier)
        return pad(text, specifier, value=value, integer=True)
    value = float(value)
    return pad(render_float(value, specifier), specifier, value=value)


def as_text(value: object) -> str:
    """Return the text of a string-kind value, decoding bytes as UTF-8."""
    if isinstance(value, bytes | bytearray):
        return value.decode("utf-8", errors="replace")
    return str(value)


def render_kind(
    value: object,
    kind: ValueKind,
    specifier: Specifier | None,
    config: FormatConfig,
) -> str:
    """Render a value whose kind is already known.

    Args:
        value: Value to render
        kind: Kind of ``value`` as returned by classify
        specifier: Decoded specifier, None when the placeholder had none
        config: Formatter configuration

    Returns:
        Rendered text

    """
    spec = specifier if specifier is not None else Specifier()
    match kind:
        case ValueKind.BOOLEAN:
            if specifier is None:
                return render_text(BOOLEAN_WORDS[bool(value)], spec)
            return render_number(int(bool(value)), spec, integer=True)
        case ValueKind.INTEGER:
            return render_number(value, spec, integer=True)  # type: ignore[arg-type]
        case ValueKind.FLOAT:
            return render_number(value, spec, integer=False)  # type: ignore[arg-type]
        case ValueKind.PAIR:
            first, second = value  # type: ignore[misc]
            return _render_pair(first, second, specifier, config)
        case ValueKind.MAPPING:
            entries = [
                _render_pair(k, v, specifier, config) for k, v in mapping_items(value)
            ]
            return (
                f"{config.map_open}"
                f"{config.map_separator.join(entries)}"
                f"{config.map_close}"
            )
        case ValueKind.SEQUENCE:
            elements = [
                render_value(element, specifier, config)
                for element in value  # type: ignore[attr-defined]
            ]
            return (
                f"{config.array_open}"
                f"{config.array_separator.join(elements)}"
                f"{config.array_close}"
            )
        case ValueKind.RENDERABLE:
            return value.__typed_format__(spec)  # type: ignore[attr-defined]
    return render_text(as_text(value), spec)


def _render_pair(
    first: object,
    second: object,
    specifier: Specifier | None,
    config: FormatConfig,
) -> str:
    return (
        f"{config.pair_open}"
        f"{render_value(first, specifier, config)}"
        f"{config.pair_separator}"
        f"{render_value(second, specifier, config)}"
        f"{config.pair_close}"
    )


def render_value(
    value: object,
    specifier: Specifier | None = None,
    config: FormatConfig | None = None,
) -> str:
    """Render any value under a specifier.

    Args:
        value: Value to render
        specifier: Decoded specifier. None renders booleans as words.
        config: Formatter configuration, defaults to FormatConfig()

    Returns:
        Rendered text

    """
    return render_kind(value, classify(value), specifier, config or FormatConfig())

