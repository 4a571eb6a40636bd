"""
Override text parsing for scoring parameters.

Override text is a comma-separated list of key=value pairs, for example
``rssi5=-80:-77:-70:-57,horizon=20``. Parsing never touches the active
configuration: it returns a new ScoringValues derived from a base.
"""

import re
from typing import Dict, List, Optional

from wifiscore.config.params.errors import GrammarError, ParseError
from wifiscore.config.params.models import (
    ScoringValues,
    ARRAY_KEYS,
    SCALAR_KEYS,
    KEY_RSSI2,
    KEY_RSSI5,
    KEY_RSSI6,
    KEY_PPS,
    KEY_HORIZON,
    KEY_NUD,
    KEY_EXPID,
    INT_MAX,
)


COMMA_KEY_VAL_STAR = re.compile(r"^(,[A-Za-z_][A-Za-z0-9_]*=[0-9.:+-]+)*$")
UNPRINTABLE = re.compile(r"[^A-Za-z_0-9=,:.+-]")

MAX_SANITIZED_LENGTH = 100
SANITIZED_PREFIX_LENGTH = 98

INT_MIN = -INT_MAX - 1


class KeyValueListParser:
    """
    Splits ``key=value`` pairs separated by a delimiter into a lookup table.
    
    Later pairs win when a key repeats; callers that must reject repeated
    keys compare len(parser) against the number of pairs.
    """
    
    def __init__(self, delimiter: str = ","):
        self._delimiter = delimiter
        self._values: Dict[str, str] = {}
    
    def set_string(self, text: Optional[str]) -> None:
        """Replace the table with the pairs found in text."""
        self._values = {}
        if not text:
            return
        for pair in text.split(self._delimiter):
            key, sep, value = pair.partition("=")
            if not sep:
                continue
            self._values[key.strip()] = value.strip()
    
    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)
    
    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Get an integer value, or default if absent or malformed."""
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return parse_int(value)
        except ValueError:
            return default
    
    def get_int_array(
        self,
        key: str,
        default: Optional[List[int]] = None
    ) -> Optional[List[int]]:
        """Get a colon-separated integer list, or default if absent or malformed."""
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return [parse_int(item) for item in value.split(":")]
        except ValueError:
            return default
    
    def keys(self) -> List[str]:
        return list(self._values)
    
    def __len__(self) -> int:
        return len(self._values)
    
    def __contains__(self, key: str) -> bool:
        return key in self._values


def parse_int(text: str) -> int:
    """
    Parse a signed base-10 integer that fits in 32 bits.
    
    Raises:
        ValueError: If text is not a plain integer or is out of range
    """
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def check_grammar(text: str) -> None:
    """
    Check override text against the key=value grammar.
    
    Raises:
        GrammarError: If any character falls outside the grammar
    """
    if not COMMA_KEY_VAL_STAR.fullmatch("," + text):
        raise GrammarError("Override does not match key=value grammar", text=text)


def parse_override(text: str, base: ScoringValues) -> ScoringValues:
    """
    Apply override text on top of a base parameter set.
    
    Only recognized keys present in the text are changed; everything else
    keeps the base value. The result is not validated.
    
    Args:
        text: Override text (must be non-empty)
        base: Parameter set to derive from
    
    Returns:
        New ScoringValues instance
    
    Raises:
        GrammarError: Malformed text or repeated keys
        ParseError: A recognized key has a value of the wrong shape
    """
    check_grammar(text)
    
    parser = KeyValueListParser(",")
    parser.set_string(text)
    if len(parser) != len(text.split(",")):
        raise GrammarError("Override has duplicate keys", text=text)
    
    changes: Dict[str, object] = {}
    for key in ARRAY_KEYS:
        ints = _parse_int_array(parser, key, len(getattr(base, key)))
        if ints is not None:
            changes[key] = ints
    for key in SCALAR_KEYS:
        value = _parse_scalar(parser, key)
        if value is not None:
            changes[key] = value
    
    return base.model_copy(update=changes)


def _parse_int_array(
    parser: KeyValueListParser,
    key: str,
    length: int
) -> Optional[tuple]:
    raw = parser.get_string(key)
    if raw is None:
        return None
    ints = parser.get_int_array(key)
    if ints is None:
        raise ParseError(key, raw, "expected colon-separated integers")
    if len(ints) != length:
        raise ParseError(key, raw, f"expected {length} values, got {len(ints)}")
    return tuple(ints)


def _parse_scalar(parser: KeyValueListParser, key: str) -> Optional[int]:
    raw = parser.get_string(key)
    if raw is None:
        return None
    value = parser.get_int(key)
    if value is None:
        raise ParseError(key, raw, "expected an integer")
    return value


def render_values(values: ScoringValues) -> str:
    """
    Render the overridable fields as override text.
    
    The output parses back to the same overridable values.
    """
    parts = []
    for key in (KEY_RSSI2, KEY_RSSI5, KEY_RSSI6, KEY_PPS):
        parts.append(f"{key}=" + ":".join(str(v) for v in getattr(values, key)))
    for key in (KEY_HORIZON, KEY_NUD, KEY_EXPID):
        parts.append(f"{key}={getattr(values, key)}")
    return ",".join(parts)


def sanitize(text: Optional[str]) -> str:
    """
    Make untrusted text safe for logs and error messages.
    
    Characters outside the override alphabet become '?', and long input is
    cut to 98 characters followed by '...'. This is for display only and is
    not a grammar check.
    """
    if text is None:
        return ""
    printable = UNPRINTABLE.sub("?", text)
    if len(printable) > MAX_SANITIZED_LENGTH:
        printable = printable[:SANITIZED_PREFIX_LENGTH] + "..."
    return printable
