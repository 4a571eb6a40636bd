"""
wifiscore API - Main FastAPI Application.

Control-plane REST API for the scoring parameter store.

Provides endpoints for:
- Reading the active scoring parameters
- Applying key=value overrides
- Per-band RSSI thresholds and frequency weights
"""

import os
import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wifiscore import __version__
from wifiscore.config.settings import get_settings
from wifiscore.config.params import ScoringParams, create_scoring_params
from wifiscore.api.routes import params_router


# Configure logging
_settings = get_settings()
logging.basicConfig(
    level=_settings.log_level,
    format=_settings.log_format
)
logger = logging.getLogger(__name__)


def create_app(params: Optional[ScoringParams] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        params: Parameter store to serve (built from settings if None)
    
    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title="wifiscore API",
        description="Runtime-tunable network scoring parameters",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    
    if params is None:
        params = create_scoring_params()
    app.state.scoring_params = params
    logger.info(f"Serving scoring params: {params.render_current()}")
    
    app.include_router(params_router)
    
    # Root endpoint
    @app.get("/", tags=["root"])
    async def root():
        """API root - returns basic info."""
        return {
            "name": "wifiscore API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health"
        }
    
    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "frequency_weights_supported": app.state.scoring_params.frequency_weights_supported,
            "timestamp": datetime.utcnow().isoformat() + "Z"
        }
    
    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if os.getenv("DEBUG") else None,
                "code": "INTERNAL_ERROR"
            }
        )
    
    return app


# Create the app instance
app = create_app()


# Entry point for running with uvicorn
if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "wifiscore.api.main:app",
        host=_settings.api_host,
        port=_settings.api_port,
        reload=os.getenv("DEBUG", "false").lower() == "true",
        log_level="info"
    )
