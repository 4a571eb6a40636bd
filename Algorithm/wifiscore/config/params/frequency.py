"""
Frequency band classification and per-frequency weight overrides.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from wifiscore.config.params.models import Band, FrequencyWeight

logger = logging.getLogger(__name__)


# Band edges in MHz
BAND_24_GHZ_START_FREQ_MHZ = 2412
BAND_24_GHZ_END_FREQ_MHZ = 2484
BAND_5_GHZ_START_FREQ_MHZ = 5160
BAND_5_GHZ_END_FREQ_MHZ = 5885
BAND_6_GHZ_START_FREQ_MHZ = 5955
BAND_6_GHZ_END_FREQ_MHZ = 7115
# Channel 2 of operating class 136 sits below the main 6 GHz range
BAND_6_GHZ_OP_CLASS_136_CH_2_FREQ_MHZ = 5935

FREQUENCY_WEIGHT_LOW = -40
FREQUENCY_WEIGHT_DEFAULT = 0
FREQUENCY_WEIGHT_HIGH = 40

WEIGHT_SCORES: Dict[FrequencyWeight, int] = {
    FrequencyWeight.LOW: FREQUENCY_WEIGHT_LOW,
    FrequencyWeight.HIGH: FREQUENCY_WEIGHT_HIGH,
}


def is_24ghz(frequency: int) -> bool:
    return BAND_24_GHZ_START_FREQ_MHZ <= frequency <= BAND_24_GHZ_END_FREQ_MHZ


def is_5ghz(frequency: int) -> bool:
    return BAND_5_GHZ_START_FREQ_MHZ <= frequency <= BAND_5_GHZ_END_FREQ_MHZ


def is_6ghz(frequency: int) -> bool:
    if frequency == BAND_6_GHZ_OP_CLASS_136_CH_2_FREQ_MHZ:
        return True
    return BAND_6_GHZ_START_FREQ_MHZ <= frequency <= BAND_6_GHZ_END_FREQ_MHZ


def classify_frequency(frequency: int) -> Optional[Band]:
    """Get the band a frequency belongs to, or None if it is in no known band."""
    if is_24ghz(frequency):
        return Band.BAND_24_GHZ
    if is_5ghz(frequency):
        return Band.BAND_5_GHZ
    if is_6ghz(frequency):
        return Band.BAND_6_GHZ
    return None


def band_for_frequency(frequency: int) -> Band:
    """
    Get the band whose thresholds apply to a frequency.
    
    Unknown frequencies use the 5 GHz thresholds; this is logged but is not
    an error.
    """
    band = classify_frequency(frequency)
    if band is None:
        logger.error(
            f"Invalid frequency({frequency}), using 5G as default rssi array"
        )
        return Band.BAND_5_GHZ
    return band


class FrequencyWeightTable:
    """
    Sparse mapping from frequency (MHz) to a weight class.
    
    The table is replaced wholesale by set_weights(); entries are never
    merged. Values are expected to be FrequencyWeight members already, but
    lookups tolerate anything.
    """
    
    def __init__(self, weights: Optional[Mapping[int, Any]] = None):
        self._weights: Dict[int, Any] = dict(weights or {})
    
    def set_weights(self, weights: Mapping[int, Any]) -> None:
        """Replace the whole table."""
        self._weights = dict(weights)
    
    def get_weight(self, frequency: int) -> Optional[Any]:
        return self._weights.get(frequency)
    
    def get_score(self, frequency: int) -> int:
        """
        Get the score adjustment for a frequency.
        
        Returns the neutral score for absent frequencies and for stored
        values that are not a known weight class.
        """
        weights = self._weights
        if frequency not in weights:
            return FREQUENCY_WEIGHT_DEFAULT
        
        raw = weights[frequency]
        try:
            weight = FrequencyWeight(raw)
        except ValueError:
            # Entries are validated before insertion, so this is an internal fault
            logger.error(f"Invalid frequency weight type {raw!r} for {frequency} MHz")
            return FREQUENCY_WEIGHT_DEFAULT
        return WEIGHT_SCORES[weight]
    
    def to_dict(self) -> Dict[int, Any]:
        return dict(self._weights)
    
    def __len__(self) -> int:
        return len(self._weights)
    
    def __contains__(self, frequency: int) -> bool:
        return frequency in self._weights
