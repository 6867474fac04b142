"""Formatter configuration.

This module provides the deployment-time options for a Formatter: unbound
argument checking, container delimiters and tracing.
"""

from pydantic import BaseModel
from pydantic import Field


class FormatConfig(BaseModel):
    """Configuration for template rendering.

    Attributes:
        strict_unbound: Whether a placeholder without a matching argument
            raises UnboundArgumentError. When False such placeholders render
            as empty text. Default is True.
        array_open: Text written before the first element of a sequence.
        array_close: Text written after the last element of a sequence.
        array_separator: Text written between sequence elements.
        map_open: Text written before the first entry of a mapping.
        map_close: Text written after the last entry of a mapping.
        map_separator: Text written between mapping entries.
        pair_open: Text written before the first element of a pair.
        pair_close: Text written after the second element of a pair.
        pair_separator: Text written between the two elements of a pair.
        trace: Whether each render call emits an OpenTelemetry span.

    """

    model_config = {"frozen": True}

    strict_unbound: bool = Field(default=True)
    array_open: str = "["
    array_close: str = "]"
    array_separator: str = ", "
    map_open: str = "{"
    map_close: str = "}"
    map_separator: str = ", "
    pair_open: str = ""
    pair_close: str = ""
    pair_separator: str = Field(
        default=": ",
        description="Separator between the first and second element of a pair",
    )
    trace: bool = Field(default=True)
