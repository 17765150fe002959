"""
Fallback options and their normalized, resolved form.
"""

from typing import FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .color import ParseError
from .parser import parse_color

DEFAULT_PROPERTIES: List[str] = [
    "background-color",
    "background",
    "color",
    "border",
    "border-color",
    "outline",
    "outline-color",
]

DEFAULT_LEGACY_PROPERTIES: List[str] = [
    "background-color",
    "background",
]

DEFAULT_BACKGROUND_COLOR = "#ffffff"


def validate_background(v: str) -> str:
    """Reject background colors the parser cannot decode."""
    try:
        parse_color(v)
    except ParseError as e:
        raise ValueError(f"Invalid background color: {e}") from e
    return v


def resolve_legacy_properties(oldie: Union[bool, List[str], None]) -> FrozenSet[str]:
    """True expands to the background properties, a list is taken as is, anything else disables."""
    if oldie is True:
        return frozenset(DEFAULT_LEGACY_PROPERTIES)
    if isinstance(oldie, (list, tuple, set, frozenset)):
        return frozenset(oldie)
    return frozenset()


class ResolvedOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    properties: FrozenSet[str] = frozenset(DEFAULT_PROPERTIES)
    background_color: str = DEFAULT_BACKGROUND_COLOR
    legacy_properties: FrozenSet[str] = frozenset()


class FallbackOptions(BaseModel):
    """User facing options; camelCase names are accepted as aliases."""

    model_config = ConfigDict(populate_by_name=True)

    properties: Optional[List[str]] = Field(default=None, description="Properties eligible for a fallback")
    background_color: Optional[str] = Field(
        default=None, alias="backgroundColor", description="Background used for compositing"
    )
    oldie: Union[bool, List[str], None] = Field(
        default=None, description="Emit legacy filters: true, or a list of eligible properties"
    )

    @field_validator("background_color")
    @classmethod
    def _check_background(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else validate_background(v)

    def resolve(self, base: Optional[ResolvedOptions] = None) -> ResolvedOptions:
        """Merge onto base (defaults when omitted), normalizing oldie once."""
        base = base or ResolvedOptions()
        return ResolvedOptions(
            properties=frozenset(self.properties) if self.properties is not None else base.properties,
            background_color=self.background_color or base.background_color,
            legacy_properties=(
                resolve_legacy_properties(self.oldie) if self.oldie is not None else base.legacy_properties
            ),
        )
