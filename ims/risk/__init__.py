"""Risk scoring helpers shared by the risk registers."""

from .scoring import (
    DEFAULT_RATING,
    MAX_RATING,
    MIN_RATING,
    RISK_BAND_HIGH,
    RISK_BAND_LOW,
    RISK_BAND_MEDIUM,
    parse_rating,
    risk_band,
    score,
)

__all__ = [
    "DEFAULT_RATING",
    "MAX_RATING",
    "MIN_RATING",
    "RISK_BAND_HIGH",
    "RISK_BAND_LOW",
    "RISK_BAND_MEDIUM",
    "parse_rating",
    "risk_band",
    "score",
]
