"""Template validation utilities."""

from collections.abc import Sequence

from pydantic import BaseModel
from pydantic import Field

from typed_format.core.errors import FormatError
from typed_format.parsing.lexer import parse_template
from typed_format.parsing.types import PlaceholderFragment


class ArgumentValidationError(FormatError, ValueError):
    """Raised when arguments do not match the placeholders of a template."""

    pass


class TemplateReferences(BaseModel):
    """Positional indices and environment names referenced by a template."""

    indices: set[int] = Field(default_factory=set)
    environment_names: set[str] = Field(default_factory=set)


def collect_references(template: object) -> TemplateReferences:
    """Extract the references made by a template without rendering it.

    Environment placeholders are recorded by name and not looked up.

    Args:
        template: Template text

    Returns:
        TemplateReferences for the template

    Raises:
        TypeError: When template is not a str
        TemplateSyntaxError: When the template is malformed

    """
    if not isinstance(template, str):
        msg = f"Cannot collect references from {type(template).__name__}"
        raise TypeError(msg)

    references = TemplateReferences()
    for fragment in parse_template(template, resolve_environment=False):
        if not isinstance(fragment, PlaceholderFragment):
            continue
        if fragment.environment_name is not None:
            references.environment_names.add(fragment.environment_name)
        elif fragment.index is not None:
            references.indices.add(fragment.index)
    return references


def validate_arguments(template: str, args: Sequence[object]) -> None:
    """Validate that every referenced index has an argument and none are unused.

    Args:
        template: Template text
        args: Positional arguments intended for the template

    Raises:
        ArgumentValidationError: When indices are missing or arguments unused

    """
    referenced = collect_references(template).indices
    provided = set(range(len(args)))
    missing = referenced - provided
    unused = provided - referenced

    if missing or unused:
        msg_parts = []
        if missing:
            msg_parts.append(
                f"Missing arguments: {', '.join(str(i) for i in sorted(missing))}"
            )
        if unused:
            msg_parts.append(
                f"Unused arguments: {', '.join(str(i) for i in sorted(unused))}"
            )
        msg = "; ".join(msg_parts)
        raise ArgumentValidationError(msg, template)
