"""
Parameter models for wifiscore.

Defines the immutable value container holding every tunable scoring
threshold and bonus, plus the enumerations used around it.
"""

from enum import Enum
from typing import Dict, Tuple
from pydantic import BaseModel, Field


# Platform signal-strength range (dBm)
MIN_RSSI = -127
MAX_RSSI = 200

INT_MAX = 2**31 - 1

# Tier positions inside an RSSI threshold array
EXIT = 0
ENTRY = 1
SUFFICIENT = 2
GOOD = 3

# Traffic tiers inside the packet-rate array
IDLE_TRAFFIC = 0
ACTIVE_TRAFFIC = 1
HIGH_TRAFFIC = 2

MIN_HORIZON = -9
MAX_HORIZON = 60
MIN_NUD = 0
MAX_NUD = 10
MIN_EXPID = 0
MAX_EXPID = INT_MAX
MIN_MINUTES = 1
MAX_MINUTES = INT_MAX // (60 * 1000)

RssiArray = Tuple[int, int, int, int]
PpsArray = Tuple[int, int, int]


class Band(str, Enum):
    """Frequency bands with independent RSSI threshold arrays."""
    BAND_24_GHZ = "2.4ghz"
    BAND_5_GHZ = "5ghz"
    BAND_6_GHZ = "6ghz"


class FrequencyWeight(str, Enum):
    """Weight classes accepted by the per-frequency weight table."""
    LOW = "low"
    HIGH = "high"


# Keys recognized in override text
KEY_RSSI2 = "rssi2"
KEY_RSSI5 = "rssi5"
KEY_RSSI6 = "rssi6"
KEY_PPS = "pps"
KEY_HORIZON = "horizon"
KEY_NUD = "nud"
KEY_EXPID = "expid"

ARRAY_KEYS: Tuple[str, ...] = (KEY_RSSI2, KEY_RSSI5, KEY_RSSI6, KEY_PPS)
SCALAR_KEYS: Tuple[str, ...] = (KEY_HORIZON, KEY_NUD, KEY_EXPID)
OVERRIDE_KEYS: Tuple[str, ...] = ARRAY_KEYS + SCALAR_KEYS

BAND_TO_FIELD: Dict[Band, str] = {
    Band.BAND_24_GHZ: KEY_RSSI2,
    Band.BAND_5_GHZ: KEY_RSSI5,
    Band.BAND_6_GHZ: KEY_RSSI6,
}


class ScoringValues(BaseModel):
    """
    One complete, immutable set of scoring parameters.
    
    Instances are never modified once built; an update produces a new
    instance with model_copy(update=...).
    """
    
    rssi2: RssiArray = Field(
        default=(-83, -80, -73, -60),
        description="2.4 GHz RSSI thresholds: exit, entry, sufficient, good (dBm)"
    )
    rssi5: RssiArray = Field(
        default=(-80, -77, -70, -57),
        description="5 GHz RSSI thresholds: exit, entry, sufficient, good (dBm)"
    )
    rssi6: RssiArray = Field(
        default=(-80, -77, -70, -57),
        description="6 GHz RSSI thresholds: exit, entry, sufficient, good (dBm)"
    )
    pps: PpsArray = Field(
        default=(0, 1, 100),
        description="Packet rate guidelines: idle, active, high traffic (packets/sec)"
    )
    horizon: int = Field(
        default=15,
        description="Number of seconds for RSSI forecast"
    )
    nud: int = Field(
        default=8,
        description="0-10 aggressiveness of network unreachability detection requests"
    )
    expid: int = Field(
        default=0,
        description="Experiment identifier"
    )
    
    # Candidate scorer parameters
    throughput_bonus_numerator: int = 120
    throughput_bonus_denominator: int = 433
    throughput_bonus_numerator_after_800mbps: int = 1
    throughput_bonus_denominator_after_800mbps: int = 16
    enable_6ghz_beacon_rssi_boost: bool = True
    throughput_bonus_limit: int = 320
    saved_network_bonus: int = 500
    unmetered_network_bonus: int = 1000
    current_network_bonus_min: int = 16
    current_network_bonus_percent: int = 20
    secure_network_bonus: int = 40
    band_6ghz_bonus: int = 0
    scoring_bucket_step_size: int = 500
    last_unmetered_selection_minutes: int = Field(
        default=480,
        description="Minutes a recently selected unmetered network is strongly favored"
    )
    last_metered_selection_minutes: int = Field(
        default=120,
        description="Minutes a recently selected metered network is strongly favored"
    )
    estimate_rssi_error_margin: int = 5
    
    model_config = {"frozen": True, "extra": "forbid"}
    
    def get_rssi_for_band(self, band: Band) -> RssiArray:
        """Get the threshold array for a band."""
        return getattr(self, BAND_TO_FIELD[band])
    
    def overridable_dict(self) -> Dict[str, object]:
        """Values of the fields that override text can change."""
        return {key: getattr(self, key) for key in OVERRIDE_KEYS}
