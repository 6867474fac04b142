"""Core types produced by the template parser."""

from pydantic import BaseModel
from pydantic import Field

from typed_format.parsing.enums import Align
from typed_format.parsing.enums import Coercion
from typed_format.parsing.enums import PresentationType
from typed_format.parsing.enums import Sign


class Selector(BaseModel):
    """A single narrowing step applied to a bound value.

    Attributes:
        name: Field name, key, index digits or transform name.
        bracketed: True when written as ``[name]``, False for ``.name``.

    """

    model_config = {"frozen": True}

    name: str
    bracketed: bool = False

    def __str__(self) -> str:
        """Return the selector as it was written in the template."""
        return f"[{self.name}]" if self.bracketed else f".{self.name}"


class Specifier(BaseModel):
    """Decoded format specifier.

    A missing precision means floats use dynamic precision and strings are
    not truncated.
    """

    model_config = {"frozen": True}

    fill: str | None = None
    align: Align | None = None
    sign: Sign = Sign.NEGATIVE
    alternate_form: bool = False
    width: int = Field(default=0, ge=0)
    thousands: bool = False
    precision: int | None = Field(default=None, ge=0)
    type: PresentationType | None = None

    @property
    def fill_char(self) -> str:
        """Fill character to use for padding."""
        return self.fill if self.fill else " "

    @property
    def is_uppercase(self) -> bool:
        """Whether the presentation type asks for upper-case output."""
        return self.type in (
            PresentationType.FIXED_UPPER,
            PresentationType.SCIENTIFIC_UPPER,
            PresentationType.GENERAL_UPPER,
            PresentationType.HEX_UPPER,
        )


class LiteralFragment(BaseModel):
    """Literal template text, already unescaped."""

    text: str


class PlaceholderFragment(BaseModel):
    """A placeholder parsed from the template.

    Attributes:
        index: Positional argument index, None for environment placeholders.
        environment_name: Environment variable name for ``{$NAME}``.
        selectors: Selector chain, consumed left to right.
        coercion: Optional explicit conversion.
        specifier_text: Raw specifier text following ``:``.
        specifier: Specifier decoded from ``specifier_text``.
        text: Rendered text, filled in once during binding.
        bound: Whether ``text`` has been filled in.
        position: Template position of the opening brace.

    """

    index: int | None = None
    environment_name: str | None = None
    selectors: list[Selector] = Field(default_factory=list)
    coercion: Coercion | None = None
    specifier_text: str = ""
    specifier: Specifier = Field(default_factory=Specifier)
    text: str = ""
    bound: bool = False
    position: int = 0

    @property
    def is_environment(self) -> bool:
        """Whether this placeholder reads an environment variable."""
        return self.environment_name is not None


Fragment = LiteralFragment | PlaceholderFragment
