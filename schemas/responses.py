from pydantic import BaseModel, Field
from typing import List, Optional

from color_fallback.fallback import Declaration


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = Field(None, description="Converted value")


class ErrorResponse(BaseModel):
    success: bool = False
    error: str = Field(..., description="What went wrong")


class LegacyFilterResponse(BaseModel):
    success: bool = True
    argb: str = Field(..., description="8 digit ARGB color, '#' prefixed")
    filter: str = Field(..., description="Legacy gradient filter value")


class DeclarationResponse(BaseModel):
    changed: bool
    fallback: Optional[Declaration] = Field(None, description="Opaque declaration to insert before the original")
    filters: List[Declaration] = Field(default_factory=list, description="Legacy filters to insert before the fallback")
    alpha: Optional[float] = Field(None, description="Alpha of the last converted color expression")


class DeclarationListResponse(BaseModel):
    declarations: List[Declaration]
    inserted: int = Field(..., description="Number of declarations added")
