"""
Scoring parameter store for wifiscore.

Holds the single active ScoringValues and replaces it atomically:
- Override text is parsed into a copy of the current values
- The copy is validated
- Only then is the active reference swapped

Readers never lock; they see either the old or the new values, never a mix.
"""

import logging
import threading
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from wifiscore.config.params.errors import ScoringParamsError, ValidationError
from wifiscore.config.params.defaults import (
    DefaultsProvider,
    load_band_defaults,
    load_default_values,
)
from wifiscore.config.params.frequency import (
    FrequencyWeightTable,
    FREQUENCY_WEIGHT_DEFAULT,
    band_for_frequency,
)
from wifiscore.config.params.models import (
    Band,
    ScoringValues,
    RssiArray,
    BAND_TO_FIELD,
    EXIT,
    ENTRY,
    SUFFICIENT,
    GOOD,
    ACTIVE_TRAFFIC,
    HIGH_TRAFFIC,
)
from wifiscore.config.params.parser import parse_override, render_values, sanitize
from wifiscore.config.params.validation import validate_values

logger = logging.getLogger(__name__)


# Threshold array that asks for a band's platform defaults
RSSI_RESET_ARRAY = (0, 0, 0, 0)


class ScoringParams:
    """
    Store for the parameters used when scoring networks.
    
    Keeping them in one place gives connected scoring and network selection
    a consistent view. Pass one instance to every component that needs it.
    """
    
    def __init__(
        self,
        provider: Optional[DefaultsProvider] = None,
        frequency_weights_supported: bool = False,
        values: Optional[ScoringValues] = None,
    ):
        """
        Initialize ScoringParams.
        
        Args:
            provider: Platform default source (compiled-in defaults if None)
            frequency_weights_supported: Whether the platform supports
                per-frequency weight scoring
            values: Explicit starting values; bypasses the provider
        """
        self._provider = provider
        self._frequency_weights_supported = frequency_weights_supported
        self._lock = threading.Lock()
        self._frequency_weights = FrequencyWeightTable()
        
        if values is None:
            values = load_default_values(provider)
        else:
            validate_values(values)
        self._values: ScoringValues = values
    
    # =========================================================================
    # Updates
    # =========================================================================
    
    def update(self, kv_list: Optional[str]) -> bool:
        """
        Update the parameters from override text.
        
        If any error is detected, no change is made.
        
        Args:
            kv_list: Comma-separated key=value list
        
        Returns:
            True for success (including empty input)
        """
        if kv_list is None or not kv_list.strip():
            return True
        
        try:
            self._commit(lambda current: parse_override(kv_list, current))
        except ScoringParamsError as e:
            logger.warning(f"Rejected scoring params update '{sanitize(kv_list)}': {e}")
            return False
        
        logger.info(f"Scoring params updated: {self.render_current()}")
        return True
    
    def set_rssi_thresholds(self, band: Union[Band, str], thresholds: Sequence[int]) -> bool:
        """
        Set the RSSI thresholds for one band.
        
        An all-zero array restores the band's platform defaults.
        
        Args:
            band: Band to change
            thresholds: exit, entry, sufficient, good (dBm)
        
        Returns:
            True if the thresholds were applied
        """
        try:
            band = Band(band)
            thresholds = tuple(int(value) for value in thresholds)
        except (ValueError, TypeError) as e:
            logger.warning(f"Rejected RSSI thresholds for band {band!r}: {e}")
            return False
        field = BAND_TO_FIELD[band]
        
        if len(thresholds) != len(RSSI_RESET_ARRAY):
            logger.warning(f"Rejected {field} thresholds {thresholds}: need 4 values")
            return False
        if thresholds == RSSI_RESET_ARRAY:
            thresholds = load_band_defaults(self._provider, band)
        
        try:
            self._commit(lambda current: current.model_copy(update={field: thresholds}))
        except ValidationError as e:
            logger.warning(f"Rejected {field} thresholds {thresholds}: {e}")
            return False
        return True
    
    def set_rssi2_thresholds(self, rssi2: Sequence[int]) -> bool:
        """Set the RSSI thresholds for 2.4 GHz."""
        return self.set_rssi_thresholds(Band.BAND_24_GHZ, rssi2)
    
    def set_rssi5_thresholds(self, rssi5: Sequence[int]) -> bool:
        """Set the RSSI thresholds for 5 GHz."""
        return self.set_rssi_thresholds(Band.BAND_5_GHZ, rssi5)
    
    def set_rssi6_thresholds(self, rssi6: Sequence[int]) -> bool:
        """Set the RSSI thresholds for 6 GHz."""
        return self.set_rssi_thresholds(Band.BAND_6_GHZ, rssi6)
    
    def _commit(self, derive: Callable[[ScoringValues], ScoringValues]) -> ScoringValues:
        """
        Derive, validate and install a new value set.
        
        The lock only covers the compare-and-swap of the reference. If
        another writer got in first, the candidate is derived again from
        the newer values.
        """
        while True:
            base = self._values
            candidate = derive(base)
            validate_values(candidate)
            with self._lock:
                if self._values is base:
                    self._values = candidate
                    return candidate
    
    # =========================================================================
    # Rendering
    # =========================================================================
    
    def render_current(self) -> str:
        """Render the overridable parameters as override text."""
        return render_values(self._values)
    
    def sanitize(self, params: Optional[str]) -> str:
        """Sanitize a string to make it safe for printing."""
        return sanitize(params)
    
    @property
    def values(self) -> ScoringValues:
        """The active parameter set."""
        return self._values
    
    def snapshot(self) -> ScoringValues:
        """Get the active parameter set for reading several fields consistently."""
        return self._values
    
    @property
    def frequency_weights_supported(self) -> bool:
        return self._frequency_weights_supported
    
    # =========================================================================
    # RSSI Thresholds
    # =========================================================================
    
    def get_rssi_array(self, frequency: int) -> RssiArray:
        """Get the RSSI thresholds array for the band of a frequency."""
        return self._values.get_rssi_for_band(band_for_frequency(frequency))
    
    def get_exit_rssi(self, frequency: int) -> int:
        """
        RSSI at which the connection is deemed unusable, in the absence of
        other indications.
        """
        return self.get_rssi_array(frequency)[EXIT]
    
    def get_entry_rssi(self, frequency: int) -> int:
        """Minimum scan RSSI for making a connection attempt."""
        return self.get_rssi_array(frequency)[ENTRY]
    
    def get_sufficient_rssi(self, frequency: int) -> int:
        """
        Connected RSSI good enough that there is no need to scan for
        alternatives.
        """
        return self.get_rssi_array(frequency)[SUFFICIENT]
    
    def get_good_rssi(self, frequency: int) -> int:
        """Connected RSSI that indicates a good connection."""
        return self.get_rssi_array(frequency)[GOOD]
    
    # =========================================================================
    # Frequency Weights
    # =========================================================================
    
    def set_frequency_weights(self, weights: Mapping[int, Any]) -> None:
        """Replace the frequency weights table."""
        self._frequency_weights.set_weights(weights)
    
    def get_frequency_score(self, frequency: int) -> int:
        """Get the frequency weight score for a frequency."""
        if not self._frequency_weights_supported:
            return FREQUENCY_WEIGHT_DEFAULT
        return self._frequency_weights.get_score(frequency)
    
    # =========================================================================
    # Scalar Accessors
    # =========================================================================
    
    def get_horizon_seconds(self) -> int:
        """Number of seconds to use for RSSI forecast."""
        return self._values.horizon
    
    def get_yippee_skippy_packets_per_second(self) -> int:
        """
        Packet rate acceptable for staying on the network no matter how bad
        the RSSI gets (packets per second).
        """
        return self._values.pps[HIGH_TRAFFIC]
    
    def get_active_traffic_packets_per_second(self) -> int:
        """Packet rate acceptable to skip scan or network selection."""
        return self._values.pps[ACTIVE_TRAFFIC]
    
    def get_nud_knob(self) -> int:
        """
        Number between 0 and 10 inclusive indicating how aggressive to be
        about asking for network unreachability detection (NUD).
        
        0 - no checks requested by the scorer
        1 - check when score becomes very low
            ...
        10 - check when score first breaches threshold, and again as it
             gets worse
        """
        return self._values.nud
    
    def get_estimate_rssi_error_margin(self) -> int:
        return self._values.estimate_rssi_error_margin
    
    def get_throughput_bonus_numerator(self) -> int:
        return self._values.throughput_bonus_numerator
    
    def get_throughput_bonus_denominator(self) -> int:
        return self._values.throughput_bonus_denominator
    
    def get_throughput_bonus_numerator_after_800mbps(self) -> int:
        return self._values.throughput_bonus_numerator_after_800mbps
    
    def get_throughput_bonus_denominator_after_800mbps(self) -> int:
        return self._values.throughput_bonus_denominator_after_800mbps
    
    def is_6ghz_beacon_rssi_boost_enabled(self) -> bool:
        """Feature flag for boosting 6 GHz RSSI based on channel width."""
        return self._values.enable_6ghz_beacon_rssi_boost
    
    def get_throughput_bonus_limit(self) -> int:
        """Maximum candidate score contribution of the throughput bonus."""
        return self._values.throughput_bonus_limit
    
    def get_saved_network_bonus(self) -> int:
        return self._values.saved_network_bonus
    
    def get_unmetered_network_bonus(self) -> int:
        return self._values.unmetered_network_bonus
    
    def get_current_network_bonus_min(self) -> int:
        return self._values.current_network_bonus_min
    
    def get_current_network_bonus_percent(self) -> int:
        """Percentage bonus applied to RSSI and throughput score of the current network."""
        return self._values.current_network_bonus_percent
    
    def get_secure_network_bonus(self) -> int:
        return self._values.secure_network_bonus
    
    def get_band_6ghz_bonus(self) -> int:
        return self._values.band_6ghz_bonus
    
    def get_scoring_bucket_step_size(self) -> int:
        """
        Expected amount of score to reach the next tier during candidate
        scoring. Should agree with the saved and unmetered network bonuses.
        """
        return self._values.scoring_bucket_step_size
    
    def get_last_unmetered_selection_minutes(self) -> int:
        """Minutes a recently selected unmetered network is strongly favored."""
        return self._values.last_unmetered_selection_minutes
    
    def get_last_metered_selection_minutes(self) -> int:
        """Minutes a recently selected metered network is strongly favored."""
        return self._values.last_metered_selection_minutes
    
    def get_experiment_identifier(self) -> int:
        """Identifier that may tag a set of experimental settings."""
        return self._values.expid
    
    def __str__(self) -> str:
        return self.render_current()


def create_scoring_params(
    settings: Optional[Any] = None,
    provider: Optional[DefaultsProvider] = None,
) -> ScoringParams:
    """
    Create a ScoringParams from application settings.
    
    Args:
        settings: Settings instance (global settings if None)
        provider: Platform default source
    
    Returns:
        Initialized ScoringParams with the start-up override applied
    """
    if settings is None:
        from wifiscore.config.settings import get_settings
        settings = get_settings()
    
    params = ScoringParams(
        provider=provider,
        frequency_weights_supported=settings.frequency_weights_supported,
    )
    if settings.score_params_override:
        if not params.update(settings.score_params_override):
            logger.warning("Start-up scoring params override rejected, keeping defaults")
    return params
