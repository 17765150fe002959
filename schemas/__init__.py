from .requests import DeclarationListRequest, DeclarationRequest, FallbackColorRequest
from .responses import (
    DeclarationListResponse,
    DeclarationResponse,
    ErrorResponse,
    LegacyFilterResponse,
    SuccessResponse,
)

__all__ = [
    "FallbackColorRequest",
    "DeclarationRequest",
    "DeclarationListRequest",
    "SuccessResponse",
    "ErrorResponse",
    "LegacyFilterResponse",
    "DeclarationResponse",
    "DeclarationListResponse",
]
