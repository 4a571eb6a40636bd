"""
Global configuration settings for wifiscore.

Loads configuration from environment variables (and a .env file) and
provides typed access to all process-level settings.
"""

import os
from typing import Optional, Dict, Any
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Global settings for wifiscore."""
    
    # Override applied to the scoring params at start-up
    score_params_override: str = ""
    
    # Platform capability: per-frequency weight scoring
    frequency_weights_supported: bool = False
    
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    def __post_init__(self):
        """Load settings from environment variables."""
        self.score_params_override = os.getenv(
            "SCORE_PARAMS_OVERRIDE", self.score_params_override
        )
        self.frequency_weights_supported = _env_flag(
            "FREQUENCY_WEIGHTS_SUPPORTED", self.frequency_weights_supported
        )
        self.api_host = os.getenv("API_HOST", self.api_host)
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        
        if os.getenv("API_PORT"):
            self.api_port = int(os.getenv("API_PORT"))
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score_params_override": self.score_params_override,
            "frequency_weights_supported": self.frequency_weights_supported,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "log_level": self.log_level,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**kwargs) -> Settings:
    """
    Configure global settings.
    
    Args:
        **kwargs: Settings to change
    
    Returns:
        Configured Settings instance
    """
    settings = get_settings()
    
    for key, value in kwargs.items():
        if hasattr(settings, key):
            setattr(settings, key, value)
    
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() rereads the environment."""
    global _settings
    _settings = None
