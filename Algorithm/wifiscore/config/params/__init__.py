"""
Scoring Parameter Management for wifiscore.

Provides the validated, atomically-updated parameter store with:
- Immutable parameter sets (RSSI thresholds, packet rates, bonuses)
- Override text parsing (key=value,...) and rendering
- Range/ordering validation before activation
- Per-frequency weight overrides
- Injectable platform default sources
"""

from wifiscore.config.params.models import (
    ScoringValues,
    Band,
    FrequencyWeight,
)
from wifiscore.config.params.errors import (
    ScoringParamsError,
    GrammarError,
    ParseError,
    ValidationError,
)
from wifiscore.config.params.validation import validate_values, is_valid
from wifiscore.config.params.parser import (
    KeyValueListParser,
    check_grammar,
    parse_override,
    render_values,
    sanitize,
)
from wifiscore.config.params.frequency import (
    FrequencyWeightTable,
    band_for_frequency,
    classify_frequency,
)
from wifiscore.config.params.defaults import (
    DefaultsProvider,
    MappingDefaultsProvider,
    EnvironmentDefaultsProvider,
    load_default_values,
)
from wifiscore.config.params.manager import ScoringParams, create_scoring_params

__all__ = [
    # Models
    "ScoringValues",
    "Band",
    "FrequencyWeight",
    # Errors
    "ScoringParamsError",
    "GrammarError",
    "ParseError",
    "ValidationError",
    # Validation
    "validate_values",
    "is_valid",
    # Parsing
    "KeyValueListParser",
    "check_grammar",
    "parse_override",
    "render_values",
    "sanitize",
    # Frequencies
    "FrequencyWeightTable",
    "band_for_frequency",
    "classify_frequency",
    # Defaults
    "DefaultsProvider",
    "MappingDefaultsProvider",
    "EnvironmentDefaultsProvider",
    "load_default_values",
    # Store
    "ScoringParams",
    "create_scoring_params",
]
