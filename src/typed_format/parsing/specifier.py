"""Specifier decoding.

Turns the raw text following ``:`` in a placeholder into a Specifier. The
grammar is, with every segment optional::

    [[fill]align][sign][#][0][width][,][.precision][type]

Decoding stops at the first character that does not fit the next segment,
leaving trailing text unconsumed.
"""

from typed_format.core.errors import TemplateSyntaxError
from typed_format.parsing.enums import Align
from typed_format.parsing.enums import PresentationType
from typed_format.parsing.enums import Sign
from typed_format.parsing.types import Specifier

INT_MAX = 2**31 - 1

_ALIGN_TOKENS = frozenset(a.value for a in Align)
_SIGN_TOKENS = frozenset(s.value for s in Sign)
_TYPE_TOKENS = frozenset(t.value for t in PresentationType)


def parse_integer(
    text: str,
    pos: int,
    default: int | None,
    *,
    template: str | None = None,
    offset: int = 0,
) -> tuple[int | None, int]:
    """Parse an unsigned decimal integer embedded in a template.

    Args:
        text: Text being scanned
        pos: Position in ``text`` to start at
        default: Value returned when no digits are present
        template: Full template, used for error reporting
        offset: Position of ``text`` within ``template``

    Returns:
        Tuple of the parsed value (or ``default``) and the new position

    Raises:
        TemplateSyntaxError: On a sign character, ``-0`` or overflow

    """
    source = text if template is None else template
    value = 0
    found = False
    while pos < len(text):
        c = text[pos]
        if c == "-":
            if text[pos + 1 : pos + 2] == "0" and not found:
                msg = "-0 is not a valid integer"
            else:
                msg = "A sign character is not allowed at this position"
            raise TemplateSyntaxError(msg, source, offset + pos)
        if not ("0" <= c <= "9"):
            break
        found = True
        value = value * 10 + (ord(c) - ord("0"))
        if value > INT_MAX:
            msg = "Integer value overflows, use a smaller number"
            raise TemplateSyntaxError(msg, source, offset + pos)
        pos += 1

    if not found:
        return default, pos
    return value, pos


def decode_specifier(
    text: str, *, template: str | None = None, offset: int = 0
) -> tuple[Specifier, int]:
    """Decode specifier text, reporting how much of it was consumed.

    Args:
        text: Raw specifier text
        template: Full template, used for error reporting
        offset: Position of ``text`` within ``template``

    Returns:
        Tuple of the decoded Specifier and the number of characters consumed.
        A consumed count below ``len(text)`` means trailing characters were
        not understood and have been ignored.

    Raises:
        TemplateSyntaxError: When an embedded integer is invalid

    """
    fields: dict[str, object] = {}
    pos = 0
    n = len(text)

    # fill and align
    if n >= 2 and text[1] in _ALIGN_TOKENS:
        fields["fill"] = text[0]
        fields["align"] = Align(text[1])
        pos = 2
    elif n >= 1 and text[0] in _ALIGN_TOKENS:
        fields["align"] = Align(text[0])
        pos = 1

    if pos < n and text[pos] in _SIGN_TOKENS:
        fields["sign"] = Sign(text[pos])
        pos += 1

    if pos < n and text[pos] == "#":
        fields["alternate_form"] = True
        pos += 1

    # sign-aware zero padding
    if pos < n and text[pos] == "0":
        fields["fill"] = "0"
        fields.setdefault("align", Align.INTERNAL)
        pos += 1

    width, pos = parse_integer(text, pos, 0, template=template, offset=offset)
    fields["width"] = width

    if pos < n and text[pos] == ",":
        fields["thousands"] = True
        pos += 1

    if pos < n and text[pos] == ".":
        pos += 1
        precision, pos = parse_integer(
            text, pos, None, template=template, offset=offset
        )
        fields["precision"] = precision

    if pos < n and text[pos] in _TYPE_TOKENS:
        fields["type"] = PresentationType(text[pos])
        pos += 1

    return Specifier.model_validate(fields), pos


def parse_specifier(text: str) -> Specifier:
    """Decode specifier text, ignoring unconsumed trailing characters."""
    specifier, _ = decode_specifier(text)
    return specifier
