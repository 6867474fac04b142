"""Value resolution, rendering and padding."""

from typed_format.rendering.numeric import dynamic_precision
from typed_format.rendering.numeric import render_float
from typed_format.rendering.numeric import render_integer
from typed_format.rendering.padding import pad
from typed_format.rendering.renderer import render_kind
from typed_format.rendering.renderer import render_value
from typed_format.rendering.resolver import resolve
from typed_format.rendering.values import Pair
from typed_format.rendering.values import Renderable
from typed_format.rendering.values import ValueKind
from typed_format.rendering.values import classify

__all__ = [
    "Pair",
    "Renderable",
    "ValueKind",
    "classify",
    "dynamic_precision",
    "pad",
    "render_float",
    "render_integer",
    "render_kind",
    "render_value",
    "resolve",
]
