"""
Likelihood x severity risk scoring.

`score` is pure and total over the 1..5 rating scale; range checking and
defaulting of raw form values happen at intake through `parse_rating`.
"""
from __future__ import annotations

import re
from typing import Any

from ims.errors import ValidationFailure

MIN_RATING = 1
MAX_RATING = 5
# Unparsable likelihood/severity input falls back to the scale midpoint
DEFAULT_RATING = 3

RISK_BAND_HIGH = "high"
RISK_BAND_MEDIUM = "medium"
RISK_BAND_LOW = "low"

HIGH_RISK_THRESHOLD = 15
MEDIUM_RISK_THRESHOLD = 9

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def score(likelihood: int, severity: int) -> int:
    """Return the risk level for a likelihood/severity pair (1..25)."""
    return likelihood * severity


def risk_band(level: int) -> str:
    """Classify a risk level into the high/medium/low bands used by the registers."""
    if level >= HIGH_RISK_THRESHOLD:
        return RISK_BAND_HIGH
    if level >= MEDIUM_RISK_THRESHOLD:
        return RISK_BAND_MEDIUM
    return RISK_BAND_LOW


def parse_rating(value: Any, *, field: str = "rating", default: int = DEFAULT_RATING) -> int:
    """Parse a raw likelihood/severity value.

    Reads the leading integer the way the submitted forms do: "2.0", 2.7 and
    "4 (likely)" give 2, 2 and 4. Empty or unparsable values fall back to
    ``default``. A value that parses but lies outside 1..5 is rejected with
    ValidationFailure.
    """
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        parsed = value
    else:
        match = _LEADING_INT.match(str(value))
        if match is None:
            return default
        parsed = int(match.group(1))
    if parsed == 0:
        # A zero rating reads as "not provided" on the submitted forms
        return default
    if not MIN_RATING <= parsed <= MAX_RATING:
        raise ValidationFailure(f"{field} must be between {MIN_RATING} and {MAX_RATING}")
    return parsed
