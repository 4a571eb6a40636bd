"""
wifiscore API package.

HTTP control plane for reading and updating the scoring parameters.
"""

from wifiscore.api.main import create_app

__all__ = ["create_app"]
