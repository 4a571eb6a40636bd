"""
Configuration module for wifiscore.

Provides settings management and the scoring parameter store.
"""

from wifiscore.config.settings import Settings, get_settings, configure
from wifiscore.config.params import (
    ScoringParams,
    ScoringValues,
    Band,
    FrequencyWeight,
    create_scoring_params,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "configure",
    # Parameter Management
    "ScoringParams",
    "ScoringValues",
    "Band",
    "FrequencyWeight",
    "create_scoring_params",
]
