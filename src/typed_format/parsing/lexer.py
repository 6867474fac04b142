"""Template lexer and placeholder parser.

Splits a template into literal and placeholder fragments. Placeholders have
the form::

    { [ws] ( $NAME | [index] ) (.field | [key])* [!conv] [:spec] [ws] }

Doubled braces outside placeholders, and inside specifier text, stand for a
single literal brace.
"""

from collections.abc import Mapping
import os

from typed_format.core.config import FormatConfig
from typed_format.core.errors import TemplateSyntaxError
from typed_format.parsing.enums import Coercion
from typed_format.parsing.specifier import decode_specifier
from typed_format.parsing.specifier import parse_integer
from typed_format.parsing.types import Fragment
from typed_format.parsing.types import LiteralFragment
from typed_format.parsing.types import PlaceholderFragment
from typed_format.parsing.types import Selector

OPEN = "{"
CLOSE = "}"
SPECIFIER = ":"
ENVIRONMENT = "$"
CONVERSION = "!"
FIELD_SELECTOR = "."
INDEX_SELECTOR_OPEN = "["
INDEX_SELECTOR_CLOSE = "]"

_WHITESPACE = frozenset(" \t\r\n")
_CONVERSIONS = frozenset(c.value for c in Coercion)


def _is_identifier_char(c: str) -> bool:
    return c == "_" or ("a" <= c <= "z") or ("A" <= c <= "Z") or ("0" <= c <= "9")


class TemplateParser:
    """Single-use parser turning one template into fragments.

    Environment placeholders are resolved and rendered while parsing, so
    they never take part in argument binding.
    """

    def __init__(
        self,
        template: str,
        *,
        environ: Mapping[str, str] | None = None,
        config: FormatConfig | None = None,
        resolve_environment: bool = True,
    ) -> None:
        """Initialize the parser.

        Args:
            template: Template text to parse
            environ: Environment lookup, defaults to ``os.environ``
            config: Configuration used when rendering environment values
            resolve_environment: Whether to render environment placeholders

        """
        self.template = template
        self.environ = os.environ if environ is None else environ
        self.config = config or FormatConfig()
        self.resolve_environment = resolve_environment
        self.pos = 0
        self.next_index = 0
        self.fragments: list[Fragment] = []

    def parse(self) -> list[Fragment]:
        """Parse the whole template.

        Returns:
            Fragments in output order

        Raises:
            TemplateSyntaxError: When the template is malformed

        """
        while True:
            text = self._read_literal()
            if text:
                self.fragments.append(LiteralFragment(text=text))
            if self.pos >= len(self.template):
                return self.fragments
            self.fragments.append(self._read_placeholder())

    def _peek(self, ahead: int = 0) -> str:
        index = self.pos + ahead
        if index < len(self.template):
            return self.template[index]
        return ""

    def _error(self, message: str, position: int | None = None) -> TemplateSyntaxError:
        return TemplateSyntaxError(
            message, self.template, self.pos if position is None else position
        )

    def _skip_whitespace(self) -> None:
        while self._peek() and self._peek() in _WHITESPACE:
            self.pos += 1

    def _read_identifier(self) -> str:
        start = self.pos
        while self._peek() and _is_identifier_char(self._peek()):
            self.pos += 1
        return self.template[start : self.pos]

    def _read_literal(self) -> str:
        """Read literal text up to the next unescaped opening brace."""
        out: list[str] = []
        while self.pos < len(self.template):
            c = self.template[self.pos]
            if c == OPEN:
                if self._peek(1) != OPEN:
                    break
                self.pos += 1
            elif c == CLOSE:
                if self._peek(1) != CLOSE:
                    msg = "Unexpected '}', is this supposed to be escaped?"
                    raise self._error(msg)
                self.pos += 1
            out.append(c)
            self.pos += 1
        return "".join(out)

    def _read_placeholder(self) -> PlaceholderFragment:
        start = self.pos
        self.pos += 1
        self._skip_whitespace()

        fragment = PlaceholderFragment(position=start)
        if self._peek() == ENVIRONMENT:
            self.pos += 1
            fragment.environment_name = self._read_identifier()
        else:
            index, self.pos = parse_integer(
                self.template, self.pos, None, template=self.template
            )
            fragment.index = self.next_index if index is None else index
            self.next_index += 1

        self._read_selectors(fragment)
        self._read_conversion(fragment)
        self._read_specifier(fragment)

        self._skip_whitespace()
        if self._peek() != CLOSE:
            raise self._error("Expected format closing bracket '}'")
        self.pos += 1

        if fragment.is_environment and self.resolve_environment:
            self._render_environment(fragment)
        return fragment

    def _read_selectors(self, fragment: PlaceholderFragment) -> None:
        while self._peek() in (FIELD_SELECTOR, INDEX_SELECTOR_OPEN):
            bracketed = self._peek() == INDEX_SELECTOR_OPEN
            self.pos += 1
            name = self._read_identifier()
            if not name:
                raise self._error("Illegal selector syntax, expected a name")
            if bracketed:
                if self._peek() != INDEX_SELECTOR_CLOSE:
                    raise self._error("Illegal selector syntax, expected ']'")
                self.pos += 1
            fragment.selectors.append(Selector(name=name, bracketed=bracketed))

    def _read_conversion(self, fragment: PlaceholderFragment) -> None:
        if self._peek() != CONVERSION:
            return
        self.pos += 1
        tag = self._peek()
        if not tag or tag not in _CONVERSIONS:
            msg = "Unknown format conversion specifier, expected one of: s, r, i, and d"
            raise self._error(msg)
        fragment.coercion = Coercion(tag)
        self.pos += 1

    def _read_specifier(self, fragment: PlaceholderFragment) -> None:
        if self._peek() != SPECIFIER:
            return
        self.pos += 1
        offset = self.pos
        out: list[str] = []
        while self.pos < len(self.template):
            c = self.template[self.pos]
            if c == CLOSE:
                if self._peek(1) != CLOSE:
                    break
                self.pos += 1
            elif c == OPEN:
                if self._peek(1) != OPEN:
                    msg = "Unexpected '{', is this supposed to be escaped?"
                    raise self._error(msg)
                self.pos += 1
            out.append(c)
            self.pos += 1

        fragment.specifier_text = "".join(out)
        fragment.specifier, _ = decode_specifier(
            fragment.specifier_text, template=self.template, offset=offset
        )

    def _render_environment(self, fragment: PlaceholderFragment) -> None:
        # Deferred, rendering imports parsing.
        from typed_format.rendering.resolver import resolve

        name = fragment.environment_name or ""
        value = self.environ.get(name) or ""
        fragment.text = resolve(value, fragment, self.config, template=self.template)
        fragment.bound = True


def parse_template(
    template: str,
    *,
    environ: Mapping[str, str] | None = None,
    config: FormatConfig | None = None,
    resolve_environment: bool = True,
) -> list[Fragment]:
    """Split a template into literal and placeholder fragments.

    Args:
        template: Template text
        environ: Environment lookup for ``{$NAME}`` placeholders
        config: Configuration used to render environment values
        resolve_environment: Whether environment placeholders are rendered

    Returns:
        Fragments in output order

    Raises:
        TemplateSyntaxError: When the template is malformed

    """
    return TemplateParser(
        template,
        environ=environ,
        config=config,
        resolve_environment=resolve_environment,
    ).parse()
