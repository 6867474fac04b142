"""Selector and conversion resolution.

Narrows a bound value through a placeholder's selector chain, applies the
explicit conversion if one was requested, and renders the result.
"""

from collections.abc import Mapping
from collections.abc import Sequence
import math
import re

from pydantic import BaseModel

from typed_format.core.config import FormatConfig
from typed_format.core.errors import ResolutionError
from typed_format.parsing.enums import Coercion
from typed_format.parsing.types import PlaceholderFragment
from typed_format.parsing.types import Selector
from typed_format.rendering.numeric import truncate_int64
from typed_format.rendering.renderer import as_text
from typed_format.rendering.renderer import render_kind
from typed_format.rendering.values import ValueKind
from typed_format.rendering.values import classify

NUMERIC_TRANSFORMS = frozenset({"abs", "sign", "inc", "dec", "sqrt"})

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_CONTAINER_KINDS = frozenset(
    {
        ValueKind.PAIR,
        ValueKind.MAPPING,
        ValueKind.SEQUENCE,
        ValueKind.RENDERABLE,
    }
)


class _Resolution:
    """Resolution of one placeholder against one bound value."""

    def __init__(
        self, fragment: PlaceholderFragment, config: FormatConfig, template: str
    ) -> None:
        self.fragment = fragment
        self.config = config
        self.template = template

    def error(
        self, message: str, selector: Selector | None = None
    ) -> ResolutionError:
        return ResolutionError(
            message,
            self.template,
            self.fragment.position,
            None if selector is None else str(selector),
        )

    def select(self, value: object, kind: ValueKind, selector: Selector) -> object:
        """Apply one selector to a value."""
        name = selector.name
        match kind:
            case ValueKind.MAPPING:
                return self._select_key(value, selector)
            case ValueKind.SEQUENCE:
                return self._select_index(value, selector)
            case ValueKind.PAIR:
                first, second = value  # type: ignore[misc]
                if name in ("first", "0"):
                    return first
                if name in ("second", "1"):
                    return second
                raise self.error(f"Pair has no element {name!r}", selector)
            case ValueKind.BOOLEAN | ValueKind.INTEGER | ValueKind.FLOAT:
                return self._transform(value, selector)
            case ValueKind.RENDERABLE:
                select = getattr(value, "select", None)
                if not callable(select):
                    msg = f"{type(value).__name__} does not support selectors"
                    raise self.error(msg, selector)
                try:
                    return select(name)
                except (LookupError, AttributeError) as e:
                    msg = f"{type(value).__name__} has no field {name!r}"
                    raise self.error(msg, selector) from e

        msg = f"Selector {selector} cannot be applied to a {kind} value"
        raise self.error(msg, selector)

    def _select_key(self, value: object, selector: Selector) -> object:
        if isinstance(value, BaseModel):
            mapping: Mapping[object, object] = dict(value)
        else:
            mapping = value  # type: ignore[assignment]

        name = selector.name
        if name in mapping:
            return mapping[name]
        # Array-style access to integer keys, e.g. {0[1]}
        if selector.bracketed and name.isdigit() and int(name) in mapping:
            return mapping[int(name)]
        raise self.error(f"Key {name!r} not found", selector)

    def _select_index(self, value: object, selector: Selector) -> object:
        if not selector.name.isdigit():
            msg = f"Sequence selector must be an index, got {selector.name!r}"
            raise self.error(msg, selector)
        if isinstance(value, Sequence):
            items = value
        else:
            items = list(value)  # type: ignore[call-overload]
        index = int(selector.name)
        try:
            return items[index]
        except IndexError as e:
            msg = f"Index {index} out of range for sequence of length {len(items)}"
            raise self.error(msg, selector) from e

    def _transform(self, value: object, selector: Selector) -> object:
        if isinstance(value, bool):
            value = int(value)
        number: int | float = value  # type: ignore[assignment]
        match selector.name:
            case "abs":
                return abs(number)
            case "sign":
                negative = number < 0
                if isinstance(number, int):
                    return -1 if negative else 1
                return -1.0 if negative else 1.0
            case "inc":
                return number + 1
            case "dec":
                return number - 1
            case "sqrt":
                if number < 0:
                    msg = f"Cannot take the square root of {number}"
                    raise self.error(msg, selector)
                try:
                    return math.sqrt(number)
                except OverflowError as e:
                    msg = f"Cannot take the square root: {e}"
                    raise self.error(msg, selector) from e
        msg = (
            f"Unknown numeric transform {selector.name!r}, "
            f"expected one of: {', '.join(sorted(NUMERIC_TRANSFORMS))}"
        )
        raise self.error(msg, selector)

    def coerce(self, value: object, kind: ValueKind) -> tuple[object, ValueKind]:
        """Apply the fragment's explicit conversion."""
        coercion = self.fragment.coercion
        match coercion:
            case None:
                return value, kind
            case Coercion.STRING | Coercion.REPR:
                return render_kind(value, kind, None, self.config), ValueKind.STRING

        if kind in _CONTAINER_KINDS:
            msg = f"Conversion !{coercion} cannot be applied to a {kind} value"
            raise self.error(msg)
        try:
            if coercion == Coercion.INTEGER:
                return self._to_integer(value, kind), ValueKind.INTEGER
            return self._to_float(value, kind), ValueKind.FLOAT
        except (OverflowError, ValueError) as e:
            raise self.error(f"Conversion !{coercion} failed: {e}") from e

    def _to_integer(self, value: object, kind: ValueKind) -> int:
        if kind == ValueKind.STRING:
            match = _LEADING_INTEGER.match(as_text(value))
            if match is None:
                msg = f"{value!r} does not start with an integer"
                raise ValueError(msg)
            return truncate_int64(int(match.group(1)))
        return truncate_int64(value)  # type: ignore[arg-type]

    def _to_float(self, value: object, kind: ValueKind) -> float:
        if kind == ValueKind.STRING:
            match = _LEADING_FLOAT.match(as_text(value))
            if match is None:
                msg = f"{value!r} does not start with a number"
                raise ValueError(msg)
            return float(match.group(1))
        return float(value)  # type: ignore[arg-type]


def resolve(
    value: object,
    fragment: PlaceholderFragment,
    config: FormatConfig | None = None,
    *,
    template: str = "",
    kind: ValueKind | None = None,
) -> str:
    """Resolve and render a bound value for one placeholder.

    Args:
        value: The bound argument
        fragment: Placeholder providing selectors, conversion and specifier
        config: Formatter configuration
        template: Template being rendered, for error reporting
        kind: Kind of ``value`` when already classified

    Returns:
        Rendered text for the placeholder

    Raises:
        ResolutionError: When a selector or conversion cannot be applied, or
            a number is too large to render as a float

    """
    resolution = _Resolution(fragment, config or FormatConfig(), template)
    if kind is None:
        kind = classify(value)
    for selector in fragment.selectors:
        value = resolution.select(value, kind, selector)
        kind = classify(value)

    value, kind = resolution.coerce(value, kind)
    specifier = fragment.specifier if fragment.specifier_text else None
    try:
        return render_kind(value, kind, specifier, resolution.config)
    except OverflowError as e:
        raise resolution.error(f"Cannot render {kind} value: {e}") from e
