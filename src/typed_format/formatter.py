"""Formatter: parsing, argument binding and assembly.

A template is parsed into fragments, each positional argument is classified
once and rendered into every placeholder that refers to it, and the
fragments are concatenated in order.
"""

from collections.abc import Mapping
from collections.abc import Sequence
import hashlib
import time

from opentelemetry import trace

from typed_format.core.config import FormatConfig
from typed_format.core.errors import FormatError
from typed_format.core.errors import UnboundArgumentError
from typed_format.parsing.lexer import parse_template
from typed_format.parsing.types import Fragment
from typed_format.parsing.types import LiteralFragment
from typed_format.parsing.types import PlaceholderFragment
from typed_format.rendering.resolver import resolve
from typed_format.rendering.values import ValueKind
from typed_format.rendering.values import classify

tracer = trace.get_tracer(__name__)


class Formatter:
    """Render templates against positional arguments.

    Example:
        >>> Formatter().format("{0} is {1:.2f}", "pi", 3.14159)
        'pi is 3.14'

    """

    def __init__(
        self,
        config: FormatConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            config: Formatter configuration, defaults to FormatConfig()
            environ: Lookup for ``{$NAME}`` placeholders, defaults to
                ``os.environ``

        """
        self.config = config or FormatConfig()
        self.environ = environ

    def format(self, template: str, *args: object) -> str:
        """Render a template with positional arguments.

        Args:
            template: Template text
            *args: Positional arguments referenced by index

        Returns:
            Rendered string

        Raises:
            TemplateSyntaxError: When the template is malformed
            ResolutionError: When a selector or conversion cannot be applied
            UnboundArgumentError: When strict and an index has no argument
            TypeError: When template is not a str

        """
        return self.vformat(template, args)

    def vformat(self, template: str, args: Sequence[object]) -> str:
        """Render a template with an argument sequence.

        Same as format() but takes the arguments as a sequence.
        """
        if not isinstance(template, str):
            msg = f"Format template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        if not self.config.trace:
            return self._render(template, args)
        return self._render_with_observability(template, args)

    def _render_with_observability(
        self, template: str, args: Sequence[object]
    ) -> str:
        with tracer.start_as_current_span("typed_format.render") as span:
            start_time = time.perf_counter()

            span.set_attribute("format.template_hash", _hash_template(template))
            span.set_attribute("format.argument_count", len(args))

            try:
                fragments = self._parse(template)
                span.set_attribute("format.fragment_count", len(fragments))
                result = self._bind_and_assemble(template, fragments, args)
            except FormatError as e:
                span.set_attribute("format.error", type(e).__name__)
                raise

            render_ms = (time.perf_counter() - start_time) * 1000
            span.set_attribute("format.render_ms", render_ms)
            span.set_attribute("format.result_length", len(result))

            return result

    def _render(self, template: str, args: Sequence[object]) -> str:
        fragments = self._parse(template)
        return self._bind_and_assemble(template, fragments, args)

    def _parse(self, template: str) -> list[Fragment]:
        return parse_template(template, environ=self.environ, config=self.config)

    def _bind_and_assemble(
        self,
        template: str,
        fragments: list[Fragment],
        args: Sequence[object],
    ) -> str:
        placeholders = [
            f
            for f in fragments
            if isinstance(f, PlaceholderFragment) and not f.is_environment
        ]
        for index, value in enumerate(args):
            kind = classify(value)
            # One-shot iterables feed every placeholder that refers to them.
            if kind == ValueKind.SEQUENCE and not isinstance(value, Sequence):
                value = tuple(value)  # type: ignore[call-overload]
            for fragment in placeholders:
                if fragment.index != index:
                    continue
                fragment.text = resolve(
                    value, fragment, self.config, template=template, kind=kind
                )
                fragment.bound = True

        return self._assemble(template, fragments)

    def _assemble(self, template: str, fragments: list[Fragment]) -> str:
        parts: list[str] = []
        for fragment in fragments:
            if isinstance(fragment, LiteralFragment):
                parts.append(fragment.text)
                continue
            if not fragment.bound and self.config.strict_unbound:
                raise UnboundArgumentError(fragment.index or 0, template)
            parts.append(fragment.text)
        return "".join(parts)


def _hash_template(template: str) -> str:
    """Generate hash of template for telemetry."""
    return hashlib.sha256(template[:500].encode()).hexdigest()[:16]


_default_formatter = Formatter()


def format(template: str, *args: object) -> str:  # noqa: A001
    """Render a template with positional arguments using default settings.

    Args:
        template: Template text
        *args: Positional arguments referenced by index

    Returns:
        Rendered string

    """
    return _default_formatter.vformat(template, args)
