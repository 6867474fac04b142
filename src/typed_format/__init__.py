"""typed-format - type-aware string formatting with a Python-style syntax.

Templates contain literal text and placeholders such as ``{0:>8.2f}``. Every
positional argument is classified once into a value kind (boolean, integer,
float, string, pair, mapping, sequence or a self-rendering object) and
rendered into each placeholder that refers to it.

Placeholders support automatic and explicit indices, selectors that narrow a
value (``{0.name}``, ``{0[2]}``, ``{0.abs}``), explicit conversions
(``!s !r !i !d``), environment variables (``{$HOME}``) and a format
specifier mini-language with fill, alignment, sign, width, grouping,
precision and presentation type.
"""

from typed_format.core import FormatConfig
from typed_format.core import FormatError
from typed_format.core import ResolutionError
from typed_format.core import TemplateSyntaxError
from typed_format.core import UnboundArgumentError
from typed_format.formatter import Formatter
from typed_format.formatter import format
from typed_format.parsing import Fragment
from typed_format.parsing import LiteralFragment
from typed_format.parsing import PlaceholderFragment
from typed_format.parsing import Selector
from typed_format.parsing import Specifier
from typed_format.parsing import decode_specifier
from typed_format.parsing import parse_specifier
from typed_format.parsing import parse_template
from typed_format.project_info import ProjectInfo
from typed_format.project_info import get_project_info
from typed_format.rendering import Pair
from typed_format.rendering import Renderable
from typed_format.rendering import ValueKind
from typed_format.rendering import classify
from typed_format.rendering import render_value
from typed_format.validation import ArgumentValidationError
from typed_format.validation import TemplateReferences
from typed_format.validation import collect_references
from typed_format.validation import validate_arguments

__version__ = get_project_info().version

# Public API - supports both direct and module imports
__all__ = [
    "ArgumentValidationError",
    "FormatConfig",
    "FormatError",
    "Formatter",
    "Fragment",
    "LiteralFragment",
    "Pair",
    "PlaceholderFragment",
    "ProjectInfo",
    "Renderable",
    "ResolutionError",
    "Selector",
    "Specifier",
    "TemplateReferences",
    "TemplateSyntaxError",
    "UnboundArgumentError",
    "ValueKind",
    "__version__",
    "classify",
    "collect_references",
    "decode_specifier",
    "format",
    "get_project_info",
    "parse_specifier",
    "parse_template",
    "render_value",
    "validate_arguments",
]
