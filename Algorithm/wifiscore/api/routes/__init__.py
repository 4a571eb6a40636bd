"""
API Routes for wifiscore.

- params: Scoring parameter inspection and updates
"""

from wifiscore.api.routes.params import router as params_router

__all__ = ["params_router"]
