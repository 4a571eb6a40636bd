"""
Dependency injection for wifiscore API.

The scoring parameter store lives on the application state so each app
(and each test client) owns its own instance.
"""

from fastapi import Request

from wifiscore.config.params import ScoringParams


def get_scoring_params(request: Request) -> ScoringParams:
    """Get the ScoringParams owned by the running application."""
    return request.app.state.scoring_params
