"""Custom exceptions for typed-format.

This module provides the error taxonomy used across the engine. Template
problems surface as TemplateSyntaxError while problems with the supplied
arguments surface as ResolutionError or UnboundArgumentError, so callers can
tell a bad template from bad arguments.
"""


class FormatError(Exception):
    """Base exception for formatting errors.

    Attributes:
        template: The template being rendered when the error occurred.

    """

    def __init__(self, message: str, template: str = "") -> None:
        """Initialize with a message and the offending template."""
        self.message = message
        self.template = template
        super().__init__(message)


class TemplateSyntaxError(FormatError, ValueError):
    """Raised when a template or specifier is syntactically wrong.

    This occurs when:
    - A closing brace appears without a matching opening brace
    - A placeholder or index selector is never closed
    - An explicit conversion tag is not one of s, r, i, d
    - An embedded integer is signed, is -0, or overflows

    The string form shows the template with a caret under the position
    where the problem was detected.
    """

    def __init__(self, message: str, template: str, position: int) -> None:
        """Initialize with a message, the template and a 0-based position."""
        self.position = position
        super().__init__(message, template)

    def __str__(self) -> str:
        """Return a multi-line description pointing at the error."""
        return (
            f"Invalid string format, error at position: {self.position}\n"
            f"{self.template}\n"
            f"{' ' * self.position}^\n"
            f"{self.message}"
        )


class ResolutionError(FormatError, LookupError):
    """Raised when a bound value cannot be narrowed or coerced.

    This occurs when:
    - A selector references a missing key or index
    - A numeric transform is applied to a non-numeric value
    - An explicit conversion is applied to an incompatible value
    - An integer too large for a float is rendered or transformed as one
    """

    def __init__(
        self,
        message: str,
        template: str = "",
        position: int = -1,
        selector: str | None = None,
    ) -> None:
        """Initialize with the placeholder position and failing selector."""
        self.position = position
        self.selector = selector
        super().__init__(message, template)


class UnboundArgumentError(FormatError, IndexError):
    """Raised when a placeholder index has no corresponding argument.

    Only raised while strict unbound checking is enabled.
    """

    def __init__(self, index: int, template: str = "") -> None:
        """Initialize with the unbound positional index."""
        self.index = index
        super().__init__(
            f"Format parameter: {index} does not refer to a valid parameter.",
            template,
        )
