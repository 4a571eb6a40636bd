"""
Default-value sources for scoring parameters.

The platform supplies initial values by resource name. Missing or broken
entries fall back to the compiled-in defaults of ScoringValues.
"""

import os
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from wifiscore.config.params.errors import ValidationError
from wifiscore.config.params.models import (
    Band,
    ScoringValues,
    EXIT,
    ENTRY,
    SUFFICIENT,
    GOOD,
    ACTIVE_TRAFFIC,
    HIGH_TRAFFIC,
    BAND_TO_FIELD,
)
from wifiscore.config.params.validation import validate_values

logger = logging.getLogger(__name__)


# Resource names for per-element array defaults: (field, index) -> name
ARRAY_RESOURCE_NAMES: Dict[Tuple[str, int], str] = {
    ("rssi2", EXIT): "score_bad_rssi_threshold_24ghz",
    ("rssi2", ENTRY): "score_entry_rssi_threshold_24ghz",
    ("rssi2", SUFFICIENT): "score_low_rssi_threshold_24ghz",
    ("rssi2", GOOD): "score_good_rssi_threshold_24ghz",
    ("rssi5", EXIT): "score_bad_rssi_threshold_5ghz",
    ("rssi5", ENTRY): "score_entry_rssi_threshold_5ghz",
    ("rssi5", SUFFICIENT): "score_low_rssi_threshold_5ghz",
    ("rssi5", GOOD): "score_good_rssi_threshold_5ghz",
    ("rssi6", EXIT): "score_bad_rssi_threshold_6ghz",
    ("rssi6", ENTRY): "score_entry_rssi_threshold_6ghz",
    ("rssi6", SUFFICIENT): "score_low_rssi_threshold_6ghz",
    ("rssi6", GOOD): "score_good_rssi_threshold_6ghz",
    ("pps", ACTIVE_TRAFFIC): "min_packet_per_second_active_traffic",
    ("pps", HIGH_TRAFFIC): "min_packet_per_second_high_traffic",
}

# Resource names for scalar defaults: field -> name
SCALAR_RESOURCE_NAMES: Dict[str, str] = {
    "throughput_bonus_numerator": "throughput_bonus_numerator",
    "throughput_bonus_denominator": "throughput_bonus_denominator",
    "throughput_bonus_numerator_after_800mbps": "throughput_bonus_numerator_after_800mbps",
    "throughput_bonus_denominator_after_800mbps": "throughput_bonus_denominator_after_800mbps",
    "throughput_bonus_limit": "throughput_bonus_limit",
    "saved_network_bonus": "saved_network_bonus",
    "unmetered_network_bonus": "unmetered_network_bonus",
    "current_network_bonus_min": "current_network_bonus_min",
    "current_network_bonus_percent": "current_network_bonus_percent",
    "secure_network_bonus": "secure_network_bonus",
    "band_6ghz_bonus": "band_6ghz_bonus",
    "scoring_bucket_step_size": "scoring_bucket_step_size",
    "last_unmetered_selection_minutes": "last_selection_minutes",
    "last_metered_selection_minutes": "last_metered_selection_minutes",
    "estimate_rssi_error_margin": "estimate_rssi_error_margin_db",
}

BOOLEAN_RESOURCE_NAMES: Dict[str, str] = {
    "enable_6ghz_beacon_rssi_boost": "enable_6ghz_beacon_rssi_boost",
}


class DefaultsProvider(ABC):
    """Source of named platform default values."""
    
    @abstractmethod
    def get_integer(self, name: str) -> int:
        """
        Get an integer default.
        
        Raises:
            KeyError: If the name is unknown
        """
        pass
    
    @abstractmethod
    def get_boolean(self, name: str) -> bool:
        """
        Get a boolean default.
        
        Raises:
            KeyError: If the name is unknown
        """
        pass


class MappingDefaultsProvider(DefaultsProvider):
    """Defaults held in a plain mapping of resource name to value."""
    
    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values = dict(values or {})
    
    def get_integer(self, name: str) -> int:
        value = self._values[name]
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Resource {name} is not an integer: {value!r}")
        return value
    
    def get_boolean(self, name: str) -> bool:
        value = self._values[name]
        if not isinstance(value, bool):
            raise TypeError(f"Resource {name} is not a boolean: {value!r}")
        return value


class EnvironmentDefaultsProvider(DefaultsProvider):
    """
    Defaults read from environment variables.
    
    Resource ``saved_network_bonus`` is read from
    ``SCORE_DEFAULT_SAVED_NETWORK_BONUS`` with the default prefix.
    """
    
    def __init__(self, prefix: str = "SCORE_DEFAULT_", environ: Optional[Mapping[str, str]] = None):
        self._prefix = prefix
        self._environ = environ if environ is not None else os.environ
    
    def _lookup(self, name: str) -> str:
        value = self._environ.get(self._prefix + name.upper())
        if value is None or value == "":
            raise KeyError(name)
        return value
    
    def get_integer(self, name: str) -> int:
        return int(self._lookup(name))
    
    def get_boolean(self, name: str) -> bool:
        value = self._lookup(name).strip().lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"Resource {name} is not a boolean: {value!r}")


def _read(provider: DefaultsProvider, name: str, getter: str, fallback: Any) -> Any:
    want_bool = getter == "get_boolean"
    try:
        value = getattr(provider, getter)(name)
        # bool is an int subclass, so check it separately
        if isinstance(value, bool) != want_bool or not isinstance(value, int):
            raise TypeError(f"expected {'bool' if want_bool else 'int'}, got {value!r}")
        return value
    except KeyError:
        logger.debug(f"No platform default for {name}, using {fallback!r}")
    except (TypeError, ValueError) as e:
        logger.warning(f"Unusable platform default for {name}: {e}")
    return fallback


def load_band_defaults(
    provider: Optional[DefaultsProvider],
    band: Band,
    compiled: Optional[ScoringValues] = None
) -> Tuple[int, int, int, int]:
    """Get the default RSSI thresholds for one band."""
    compiled = compiled or ScoringValues()
    field = BAND_TO_FIELD[band]
    values = list(getattr(compiled, field))
    if provider is None:
        return tuple(values)
    for index in range(len(values)):
        name = ARRAY_RESOURCE_NAMES[(field, index)]
        values[index] = _read(provider, name, "get_integer", values[index])
    return tuple(values)


def load_default_values(provider: Optional[DefaultsProvider] = None) -> ScoringValues:
    """
    Build the initial parameter set.
    
    Every value the provider supplies overrides the compiled-in default.
    If the combined set is inconsistent, the compiled-in defaults are used
    as a whole so the store always starts from a valid configuration.
    
    Args:
        provider: Platform default source (compiled-in defaults only if None)
    
    Returns:
        Validated ScoringValues
    """
    compiled = ScoringValues()
    if provider is None:
        return compiled
    
    changes: Dict[str, Any] = {}
    for band in Band:
        changes[BAND_TO_FIELD[band]] = load_band_defaults(provider, band, compiled)
    
    pps = list(compiled.pps)
    for index in (ACTIVE_TRAFFIC, HIGH_TRAFFIC):
        name = ARRAY_RESOURCE_NAMES[("pps", index)]
        pps[index] = _read(provider, name, "get_integer", pps[index])
    changes["pps"] = tuple(pps)
    
    for field, name in SCALAR_RESOURCE_NAMES.items():
        changes[field] = _read(provider, name, "get_integer", getattr(compiled, field))
    for field, name in BOOLEAN_RESOURCE_NAMES.items():
        changes[field] = _read(provider, name, "get_boolean", getattr(compiled, field))
    
    try:
        values = ScoringValues.model_validate({**compiled.model_dump(), **changes})
        validate_values(values)
    except (ValidationError, PydanticValidationError) as e:
        logger.error(f"Inconsistent platform scoring defaults ({e}), using built-in defaults")
        return compiled
    return values
