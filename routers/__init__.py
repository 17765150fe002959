from .fallbackTools import router as fallbackTools_router

__all__ = ["fallbackTools_router"]
