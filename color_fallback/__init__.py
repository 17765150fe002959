from .color import Color, ParseError
from .parser import ColorFormat, classify, parse_color
from .compositor import composite
from .options import FallbackOptions, ResolvedOptions
from .fallback import (
    Declaration,
    DeclarationResult,
    convert_value,
    fallback_color,
    legacy_filters,
    legacy_filter_value,
    process_declaration,
    process_declarations,
)

__all__ = [
    "Color",
    "ParseError",
    "ColorFormat",
    "classify",
    "parse_color",
    "composite",
    "FallbackOptions",
    "ResolvedOptions",
    "Declaration",
    "DeclarationResult",
    "convert_value",
    "fallback_color",
    "legacy_filters",
    "legacy_filter_value",
    "process_declaration",
    "process_declarations",
]
