"""Padding and alignment assembler.

Assembles the final text of a field as::

    [left pad][sign][internal pad][prefix][text][%][right pad]
"""

import math

from typed_format.parsing.enums import Align
from typed_format.parsing.enums import PresentationType
from typed_format.parsing.enums import Sign
from typed_format.parsing.types import Specifier

BASE_PREFIXES: dict[PresentationType, str] = {
    PresentationType.BINARY: "0b",
    PresentationType.OCTAL: "0o",
    PresentationType.HEX_LOWER: "0x",
    PresentationType.HEX_UPPER: "0X",
}


def pad(
    text: str,
    specifier: Specifier,
    *,
    value: float | None = None,
    integer: bool = False,
    default_align: Align = Align.RIGHT,
) -> str:
    """Pad rendered text to the specifier's width.

    Args:
        text: Rendered text, possibly starting with a sign character
        specifier: Decoded specifier
        value: The numeric value rendered, None for text
        integer: Whether ``text`` is an integer rendering, which enables base
            prefixes for the alternate form
        default_align: Alignment used when the specifier has none

    Returns:
        The padded field text

    """
    numeric = value is not None
    align = specifier.align or default_align
    if not numeric and align == Align.INTERNAL:
        align = Align.RIGHT

    sign = ""
    body = text
    if numeric:
        non_negative = not math.isnan(value) and value >= 0
        if specifier.sign == Sign.SPACE and non_negative:
            sign = " "
        elif align == Align.INTERNAL and body[:1] in ("+", "-"):
            sign, body = body[0], body[1:]

    prefix = ""
    if integer and specifier.alternate_form and specifier.type is not None:
        prefix = BASE_PREFIXES.get(specifier.type, "")

    percent = "%" if numeric and specifier.type == PresentationType.PERCENT else ""

    content = len(sign) + len(prefix) + len(body)
    padding = max(0, specifier.width - content)
    left = center = right = 0
    match align:
        case Align.LEFT:
            right = padding
        case Align.CENTER:
            left = padding // 2
            right = padding - left
        case Align.INTERNAL:
            center = padding
        case _:
            left = padding

    fill = specifier.fill_char
    return f"{fill * left}{sign}{fill * center}{prefix}{body}{percent}{fill * right}"


def truncate_text(text: str, specifier: Specifier) -> str:
    """Apply precision as a maximum field size for text."""
    if specifier.precision is not None and specifier.precision < len(text):
        return text[: specifier.precision]
    return text
