from pydantic import BaseModel, Field
from typing import List, Optional

from color_fallback.fallback import Declaration
from color_fallback.options import FallbackOptions


class FallbackColorRequest(BaseModel):
    color: str = Field(..., description="The rgba()/hsla()/rgb()/hsl()/hex color to flatten")
    background_color: Optional[str] = Field(
        None, description="Background color to composite over; defaults to the configured one"
    )


class DeclarationRequest(BaseModel):
    property: str = Field(..., description="CSS property name")
    value: str = Field(..., description="CSS property value")
    previous_property: Optional[str] = Field(
        None, description="Property of the declaration directly above, if any"
    )
    options: Optional[FallbackOptions] = Field(None, description="Per request option overrides")


class DeclarationListRequest(BaseModel):
    declarations: List[Declaration] = Field(..., description="Ordered declarations of one rule block")
    options: Optional[FallbackOptions] = Field(None, description="Per request option overrides")
