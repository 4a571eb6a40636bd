"""
Shared fixtures and configuration for wifiscore tests.
"""

import pytest


# =============================================================================
# Parameter Fixtures
# =============================================================================

@pytest.fixture
def default_values():
    """Compiled-in default ScoringValues."""
    from wifiscore.config.params.models import ScoringValues
    return ScoringValues()


@pytest.fixture
def scoring_params():
    """ScoringParams on compiled-in defaults, frequency weights unsupported."""
    from wifiscore.config.params import ScoringParams
    return ScoringParams()


@pytest.fixture
def weighted_params():
    """ScoringParams on a platform that supports frequency weights."""
    from wifiscore.config.params import ScoringParams
    return ScoringParams(frequency_weights_supported=True)


@pytest.fixture
def platform_defaults():
    """Platform resource values that differ from the compiled-in defaults."""
    return {
        "score_bad_rssi_threshold_24ghz": -85,
        "score_entry_rssi_threshold_24ghz": -82,
        "score_low_rssi_threshold_24ghz": -75,
        "score_good_rssi_threshold_24ghz": -62,
        "min_packet_per_second_active_traffic": 2,
        "min_packet_per_second_high_traffic": 150,
        "saved_network_bonus": 700,
        "last_selection_minutes": 300,
        "enable_6ghz_beacon_rssi_boost": False,
    }


@pytest.fixture
def platform_provider(platform_defaults):
    """MappingDefaultsProvider over platform_defaults."""
    from wifiscore.config.params.defaults import MappingDefaultsProvider
    return MappingDefaultsProvider(platform_defaults)


@pytest.fixture
def platform_params(platform_provider):
    """ScoringParams initialized from platform_provider."""
    from wifiscore.config.params import ScoringParams
    return ScoringParams(provider=platform_provider)


# =============================================================================
# Sentinel Fixtures
# =============================================================================

SENTINEL_A = "rssi2=-90:-85:-80:-70,rssi5=-88:-84:-78:-66,rssi6=-86:-82:-76:-64,pps=0:2:50,horizon=10,nud=2,expid=1"
SENTINEL_B = "rssi2=-70:-65:-60:-50,rssi5=-68:-64:-58:-46,rssi6=-66:-62:-56:-44,pps=1:20:500,horizon=30,nud=9,expid=2"


@pytest.fixture
def sentinel_overrides():
    """Two complete override texts whose every field differs."""
    return SENTINEL_A, SENTINEL_B
