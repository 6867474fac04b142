"""Integer and floating point rendering.

The functions here produce the bare digits of a number, including a leading
``+`` or ``-`` where one applies. Width, fill, alignment, the space sign,
base prefixes and the percent sign are added afterwards by the padding
assembler.

When a float is rendered without an explicit precision the precision is
chosen dynamically: as few fractional digits as needed to show the value,
bounded by a minimum and maximum, switching to exponent notation for very
small values and, for the general types, for large ones.
"""

import math
import sys

from typed_format.parsing.enums import PresentationType
from typed_format.parsing.enums import Sign
from typed_format.parsing.types import Specifier

TOLERANCE = math.sqrt(sys.float_info.epsilon)
SCIENTIFIC_LIMIT = 5
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_UINT64_MASK = 2**64 - 1

DEFAULT_MIN_PRECISION = 1
DEFAULT_MAX_PRECISION = 16
GENERAL_MIN_PRECISION = 0
GENERAL_MAX_PRECISION = 6
GENERAL_SCIENTIFIC_CEILING = 6
FIXED_DEFAULT_PRECISION = 6

BASE_TYPES = frozenset(
    {
        PresentationType.BINARY,
        PresentationType.OCTAL,
        PresentationType.HEX_LOWER,
        PresentationType.HEX_UPPER,
    }
)
FLOAT_TYPES = frozenset(
    {
        PresentationType.PERCENT,
        PresentationType.FIXED,
        PresentationType.FIXED_UPPER,
        PresentationType.SCIENTIFIC,
        PresentationType.SCIENTIFIC_UPPER,
        PresentationType.GENERAL,
        PresentationType.GENERAL_UPPER,
    }
)
_GENERAL_TYPES = frozenset(
    {
        PresentationType.GENERAL,
        PresentationType.GENERAL_UPPER,
        PresentationType.LOCALIZED,
    }
)
_SCIENTIFIC_TYPES = frozenset(
    {PresentationType.SCIENTIFIC, PresentationType.SCIENTIFIC_UPPER}
)
_FIXED_TYPES = frozenset(
    {
        PresentationType.FIXED,
        PresentationType.FIXED_UPPER,
        PresentationType.PERCENT,
    }
)


def _sign_flag(specifier: Specifier) -> str:
    return "+" if specifier.sign == Sign.ALWAYS else ""


def _grouping_flag(specifier: Specifier) -> str:
    if specifier.thousands or specifier.type == PresentationType.LOCALIZED:
        return ","
    return ""


def render_integer(value: int, specifier: Specifier) -> str:
    """Render an integer in the base selected by the specifier.

    Negative values in binary, octal and hex are written as their 64-bit two's
    complement. Decimal output honours the ``+`` sign mode and comma
    grouping.

    Args:
        value: Integer to render
        specifier: Decoded specifier

    Returns:
        Digits of the integer, with a sign for decimal output

    """
    if specifier.type in BASE_TYPES:
        if value < 0:
            value &= _UINT64_MASK
        return format(value, specifier.type.value)
    return format(value, f"{_sign_flag(specifier)}{_grouping_flag(specifier)}d")


def dynamic_precision(
    value: float,
    min_precision: int = DEFAULT_MIN_PRECISION,
    max_precision: int = DEFAULT_MAX_PRECISION,
    scientific_ceiling: int = 0,
) -> tuple[int, bool]:
    """Choose a precision for a float rendered without one.

    Args:
        value: Value to render
        min_precision: Fewest fractional digits to show
        max_precision: Most digits to show, integer digits included
        scientific_ceiling: Integer digit count above which exponent notation
            is used. 0 disables the ceiling.

    Returns:
        Tuple of the precision and whether exponent notation should be used

    """
    if not math.isfinite(value):
        return min_precision, False

    magnitude = abs(value)
    integer_part = math.trunc(magnitude)
    integer_digits = 0
    above_ceiling = False
    if integer_part > 0:
        integer_digits = int(math.log10(magnitude)) + 1
        above_ceiling = 0 < scientific_ceiling < integer_digits

    precision = 0
    scientific = False
    if above_ceiling:
        # Trailing zeros of the integer part need no digits.
        trailing_zeros = 0
        while integer_part % 10 == 0:
            integer_part //= 10
            trailing_zeros += 1
        precision = (integer_digits - 1) - trailing_zeros
    elif integer_digits < max_precision:
        leading_zeros = 0
        in_leading_zeros = integer_part == 0
        remainder = magnitude - math.trunc(magnitude)
        while remainder > TOLERANCE and 1 - remainder > TOLERANCE:
            remainder *= 10
            digit = math.trunc(remainder)
            if in_leading_zeros and digit == 0:
                leading_zeros += 1
            else:
                in_leading_zeros = False
            remainder -= digit
            precision += 1
        precision = max(precision, min_precision)

        if precision >= SCIENTIFIC_LIMIT and leading_zeros > 0:
            scientific = True
            precision = max(0, precision - (leading_zeros + 1))

    precision = min(precision, max_precision)
    if above_ceiling:
        scientific = True
        # The digit before the point counts towards the maximum.
        if precision == max_precision:
            precision -= 1
    elif integer_digits + precision > max_precision:
        precision = precision - integer_digits if integer_digits < precision else 0

    return precision, scientific


def _format_float(
    value: float, precision: int, code: str, specifier: Specifier
) -> str:
    text = format(
        value,
        f"{_sign_flag(specifier)}{_grouping_flag(specifier)}.{precision}{code}",
    )
    if specifier.is_uppercase:
        text = text.upper()
    return text


def render_float(value: float, specifier: Specifier) -> str:
    """Render a float under the specifier.

    Percent values are multiplied by 100 here; the percent sign itself is
    appended by the padding assembler.

    Args:
        value: Value to render
        specifier: Decoded specifier

    Returns:
        Rendered number without padding

    """
    value = float(value)
    if specifier.type == PresentationType.PERCENT:
        value *= 100.0

    if specifier.precision is not None:
        if specifier.type in _SCIENTIFIC_TYPES:
            code = "e"
        elif specifier.type in _GENERAL_TYPES:
            code = "g"
        else:
            code = "f"
        return _format_float(value, specifier.precision, code, specifier)

    if specifier.type in _FIXED_TYPES:
        return _format_float(value, FIXED_DEFAULT_PRECISION, "f", specifier)
    if specifier.type in _SCIENTIFIC_TYPES:
        return _format_float(value, FIXED_DEFAULT_PRECISION, "e", specifier)

    if specifier.type in _GENERAL_TYPES:
        precision, scientific = dynamic_precision(
            value,
            GENERAL_MIN_PRECISION,
            GENERAL_MAX_PRECISION,
            GENERAL_SCIENTIFIC_CEILING,
        )
    else:
        precision, scientific = dynamic_precision(value)
    return _format_float(value, precision, "e" if scientific else "f", specifier)


def truncate_int64(value: float) -> int:
    """Truncate a number towards zero into the signed 64-bit range.

    Raises:
        OverflowError: When the value is infinite or out of range
        ValueError: When the value is NaN

    """
    result = math.trunc(value)
    if not INT64_MIN <= result <= INT64_MAX:
        msg = f"{value!r} does not fit in a 64-bit signed integer"
        raise OverflowError(msg)
    return result
