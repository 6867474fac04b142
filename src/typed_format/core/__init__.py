"""Core functionality for typed-format.

This module contains the error types and configuration shared by the parser
and the renderers.
"""

from typed_format.core.config import FormatConfig
from typed_format.core.errors import FormatError
from typed_format.core.errors import ResolutionError
from typed_format.core.errors import TemplateSyntaxError
from typed_format.core.errors import UnboundArgumentError

__all__ = [
    "FormatConfig",
    "FormatError",
    "ResolutionError",
    "TemplateSyntaxError",
    "UnboundArgumentError",
]
