"""Template and specifier parsing."""

from typed_format.parsing.enums import Align
from typed_format.parsing.enums import Coercion
from typed_format.parsing.enums import PresentationType
from typed_format.parsing.enums import Sign
from typed_format.parsing.lexer import TemplateParser
from typed_format.parsing.lexer import parse_template
from typed_format.parsing.specifier import decode_specifier
from typed_format.parsing.specifier import parse_specifier
from typed_format.parsing.types import Fragment
from typed_format.parsing.types import LiteralFragment
from typed_format.parsing.types import PlaceholderFragment
from typed_format.parsing.types import Selector
from typed_format.parsing.types import Specifier

__all__ = [
    "Align",
    "Coercion",
    "Fragment",
    "LiteralFragment",
    "PlaceholderFragment",
    "PresentationType",
    "Selector",
    "Sign",
    "Specifier",
    "TemplateParser",
    "decode_specifier",
    "parse_specifier",
    "parse_template",
]
