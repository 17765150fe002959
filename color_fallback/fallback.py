"""
Fallback generation for translucent colors in stylesheet declarations.

For every rgba()/hsla() expression in an eligible declaration, an opaque
color is computed by compositing it over the configured background. The
rewritten declaration is placed before the original, so engines without
alpha support keep the opaque value while the others let the later,
translucent one win. Optionally two legacy gradient filters are added for
very old engines.
"""

import re
import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .color import Color, ParseError
from .compositor import composite
from .options import DEFAULT_BACKGROUND_COLOR, ResolvedOptions
from .parser import parse_color

log = logging.getLogger(__name__)

ALPHA_FUNCTIONS = ("rgba", "hsla")
ALPHA_FUNC_RE = re.compile(r"\b(rgba|hsla)\(([^()]*)\)", re.IGNORECASE)

LEGACY_FILTER_TEMPLATE = "progid:DXImageTransform.Microsoft.gradient(startColorStr={0},endColorStr={0})"


class Declaration(BaseModel):
    property: str = Field(..., description="CSS property name")
    value: str = Field(..., description="CSS property value")


class DeclarationResult(BaseModel):
    fallback: Optional[Declaration] = None
    filters: List[Declaration] = Field(default_factory=list)
    alpha: Optional[float] = None

    @property
    def changed(self) -> bool:
        return self.fallback is not None


# Single expression -----------------------------------------------

def fallback_for(expression: str, background_color: str = DEFAULT_BACKGROUND_COLOR) -> Tuple[Color, Color]:
    """Return (foreground, opaque composite) for one color expression."""
    background = parse_color(background_color)
    foreground = parse_color(expression)
    return foreground, composite(foreground, background)


def fallback_color(expression: str, background_color: str = DEFAULT_BACKGROUND_COLOR) -> str:
    """Opaque '#rrggbb' fallback for a color expression; raises ParseError."""
    _, opaque = fallback_for(expression, background_color)
    return opaque.to_css_hex()


# Legacy filters --------------------------------------------------

def legacy_argb(opaque: Color, alpha: float) -> str:
    """8 digit ARGB string: the foreground alpha byte then the opaque channels."""
    return opaque.model_copy(update={"alpha": alpha}).to_argb_hex()


def legacy_filter_value(argb: str) -> str:
    return LEGACY_FILTER_TEMPLATE.format(argb)


def legacy_filters(opaque: Color, alpha: float) -> List[Declaration]:
    """The -ms-filter (quoted) and filter (unquoted) declarations."""
    value = legacy_filter_value(legacy_argb(opaque, alpha))
    return [
        Declaration(property="-ms-filter", value=f'"{value}"'),
        Declaration(property="filter", value=value),
    ]


# Declaration values ----------------------------------------------

def has_alpha_color(value: str) -> bool:
    lowered = value.lower()
    return any(name in lowered for name in ALPHA_FUNCTIONS)


def convert_value(
    value: str, background_color: str = DEFAULT_BACKGROUND_COLOR
) -> Tuple[str, Optional[float], Optional[Color]]:
    """
    Replace each rgba()/hsla() expression in value with its opaque hex.

    Returns the new value plus the alpha and opaque color of the last
    converted expression. Expressions that fail to parse are left as is.
    """
    last_alpha: Optional[float] = None
    last_opaque: Optional[Color] = None

    def replace(m: "re.Match[str]") -> str:
        nonlocal last_alpha, last_opaque
        expression = f"{m.group(1)}({m.group(2)})"
        try:
            foreground, opaque = fallback_for(expression, background_color)
        except ParseError as e:
            log.warning("Skipping fallback for %r: %s", expression, e.reason)
            return m.group(0)
        last_alpha, last_opaque = foreground.alpha, opaque
        log.debug("Converted %r to %s", expression, opaque.to_css_hex())
        return opaque.to_css_hex()

    return ALPHA_FUNC_RE.sub(replace, value), last_alpha, last_opaque


def process_declaration(
    declaration: Declaration,
    options: Optional[ResolvedOptions] = None,
    previous_property: Optional[str] = None,
) -> DeclarationResult:
    """Compute the fallback and legacy filters for a single declaration."""
    options = options or ResolvedOptions()
    if not declaration.value or not has_alpha_color(declaration.value):
        return DeclarationResult()
    if declaration.property not in options.properties:
        return DeclarationResult()
    # a fallback for the same property sits right above; nothing to add
    if previous_property is not None and previous_property == declaration.property:
        return DeclarationResult()

    value, alpha, opaque = convert_value(declaration.value, options.background_color)
    if value == declaration.value:
        return DeclarationResult()

    result = DeclarationResult(
        fallback=Declaration(property=declaration.property, value=value),
        alpha=alpha,
    )
    if (
        declaration.property in options.legacy_properties
        and opaque is not None
        and 0 < alpha < 1
    ):
        result.filters = legacy_filters(opaque, alpha)
    return result


def process_declarations(
    declarations: List[Declaration], options: Optional[ResolvedOptions] = None
) -> List[Declaration]:
    """
    Walk an ordered list of declarations from one rule block.

    Each changed declaration becomes: legacy filters (if any), the opaque
    fallback, then the untouched original.
    """
    options = options or ResolvedOptions()
    out: List[Declaration] = []
    for decl in declarations:
        previous = out[-1].property if out else None
        result = process_declaration(decl, options, previous)
        if result.changed:
            out.extend(result.filters)
            out.append(result.fallback)
        out.append(decl)
    return out
