"""
RGBA Fallback MCP Server - FastAPI implementation
Provides endpoints that flatten translucent CSS colors into opaque fallbacks
"""

import sys
import logging
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

# Routers and shared state
from routers import fallbackTools_router
from settings import get_settings

log = logging.getLogger(__name__)

app = FastAPI(
    title="RGBA Fallback MCP Server",
    description="A FastAPI server computing opaque fallbacks for rgba()/hsla() colors",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers (paths unchanged)
app.include_router(fallbackTools_router)

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    log.info("Starting on %s:%d (background %s)", settings.host, settings.port, settings.background_color)
    uvicorn.run(app, host=settings.host, port=settings.port)
