"""
Errors raised while turning override text into an active configuration.

None of these escape ScoringParams.update(); they are converted into a
boolean result there.
"""

from typing import Optional


class ScoringParamsError(Exception):
    """Base class for rejected parameter updates."""
    
    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message)


class GrammarError(ScoringParamsError):
    """Override text does not match the key=value grammar, or repeats a key."""


class ParseError(ScoringParamsError):
    """A recognized key's value has the wrong numeric shape."""
    
    def __init__(self, key: str, value: str, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"Bad value for {key}: {reason}", text=value)


class ValidationError(ScoringParamsError):
    """Parsed values violate an ordering or range invariant."""
    
    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {reason}")
