"""
Endpoints for flattening translucent CSS colors into opaque fallbacks.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from color_fallback.color import ParseError
from color_fallback.fallback import (
    Declaration,
    fallback_for,
    legacy_argb,
    legacy_filter_value,
    process_declaration,
    process_declarations,
)
from color_fallback.options import FallbackOptions, ResolvedOptions
from schemas.requests import DeclarationListRequest, DeclarationRequest, FallbackColorRequest
from schemas.responses import (
    DeclarationListResponse,
    DeclarationResponse,
    ErrorResponse,
    LegacyFilterResponse,
    SuccessResponse,
)
from settings import get_options

log = logging.getLogger(__name__)

router = APIRouter()


def _effective(overrides: Optional[FallbackOptions], base: ResolvedOptions) -> ResolvedOptions:
    return overrides.resolve(base) if overrides is not None else base


def _error(status_code: int, message: str) -> JSONResponse:
    log.info("Rejected request: %s", message)
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post("/convert_fallback_color", response_model=SuccessResponse, operation_id="convert_fallback_color", responses={400: {"model": ErrorResponse}}, description="Composite a translucent CSS color over a background and return the opaque hex")
async def convert_fallback_color(request: FallbackColorRequest, options: ResolvedOptions = Depends(get_options)):
    """Flatten a single color expression."""
    background = request.background_color or options.background_color
    try:
        _, opaque = fallback_for(request.color, background)
    except ParseError as e:
        return _error(400, str(e))
    return SuccessResponse(success=True, message=opaque.to_css_hex())


@router.post("/legacy_filter", response_model=LegacyFilterResponse, operation_id="legacy_filter", responses={400: {"model": ErrorResponse}}, description="Build the legacy gradient filter value for a translucent CSS color")
async def legacy_filter(request: FallbackColorRequest, options: ResolvedOptions = Depends(get_options)):
    """ARGB string and filter value for a color with 0 < alpha < 1."""
    background = request.background_color or options.background_color
    try:
        foreground, opaque = fallback_for(request.color, background)
    except ParseError as e:
        return _error(400, str(e))
    if not 0 < foreground.alpha < 1:
        return _error(400, f"Color is not translucent: {request.color!r}")
    argb = legacy_argb(opaque, foreground.alpha)
    return LegacyFilterResponse(success=True, argb=argb, filter=legacy_filter_value(argb))


@router.post("/process_declaration", response_model=DeclarationResponse, operation_id="process_declaration", description="Compute the opaque fallback declaration and legacy filters for one CSS declaration")
async def process_declaration_endpoint(request: DeclarationRequest, options: ResolvedOptions = Depends(get_options)):
    result = process_declaration(
        Declaration(property=request.property, value=request.value),
        _effective(request.options, options),
        request.previous_property,
    )
    return DeclarationResponse(changed=result.changed, fallback=result.fallback, filters=result.filters, alpha=result.alpha)


@router.post("/process_declarations", response_model=DeclarationListResponse, operation_id="process_declarations", description="Insert opaque fallbacks into an ordered list of CSS declarations")
async def process_declarations_endpoint(request: DeclarationListRequest, options: ResolvedOptions = Depends(get_options)):
    out = process_declarations(request.declarations, _effective(request.options, options))
    inserted = len(out) - len(request.declarations)
    log.info("Processed %d declarations, inserted %d", len(request.declarations), inserted)
    return DeclarationListResponse(declarations=out, inserted=inserted)
