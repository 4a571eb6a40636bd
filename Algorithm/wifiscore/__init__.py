"""
wifiscore - Runtime-tunable parameters for network quality scoring

Holds the thresholds and weighting coefficients read by a connection
scoring / selection algorithm, and replaces them atomically from
validated key=value override text.

Key Features:
- Per-band RSSI thresholds (exit, entry, sufficient, good)
- Packet-rate, forecast horizon and NUD tuning
- Throughput, security, recency and band bonuses
- Per-frequency weight overrides behind a capability flag
- Copy, validate, then swap: readers never see a partial update
"""

__version__ = "0.1.0"
__author__ = "wifiscore Team"

from wifiscore.config.params import (
    ScoringParams,
    ScoringValues,
    Band,
    FrequencyWeight,
)

__all__ = [
    "ScoringParams",
    "ScoringValues",
    "Band",
    "FrequencyWeight",
]
