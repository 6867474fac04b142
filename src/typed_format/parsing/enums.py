"""Enumerations for the format specifier mini-language."""

from enum import StrEnum


class Align(StrEnum):
    """Alignment of a value within its field width."""

    LEFT = "<"
    RIGHT = ">"
    CENTER = "^"
    INTERNAL = "="


class Sign(StrEnum):
    """Sign display modes for numeric values."""

    ALWAYS = "+"
    NEGATIVE = "-"
    SPACE = " "


class PresentationType(StrEnum):
    """Presentation types accepted at the end of a specifier.

    Attributes:
        BINARY: Base 2 integer.
        OCTAL: Base 8 integer.
        HEX_LOWER: Base 16 integer with lower-case digits.
        HEX_UPPER: Base 16 integer with upper-case digits.
        LOCALIZED: Number with comma digit grouping.
        PERCENT: Float multiplied by 100, fixed, followed by a percent sign.
        FIXED: Fixed-point float.
        FIXED_UPPER: Fixed-point float, upper case.
        SCIENTIFIC: Exponent notation.
        SCIENTIFIC_UPPER: Exponent notation, upper case.
        GENERAL: Fixed or exponent notation depending on magnitude.
        GENERAL_UPPER: General notation, upper case.
        DECIMAL: Base 10 integer.

    """

    BINARY = "b"
    OCTAL = "o"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    LOCALIZED = "n"
    PERCENT = "%"
    FIXED = "f"
    FIXED_UPPER = "F"
    SCIENTIFIC = "e"
    SCIENTIFIC_UPPER = "E"
    GENERAL = "g"
    GENERAL_UPPER = "G"
    DECIMAL = "d"


class Coercion(StrEnum):
    """Explicit conversions requested with ``!`` in a placeholder."""

    STRING = "s"
    REPR = "r"
    INTEGER = "i"
    DECIMAL = "d"
