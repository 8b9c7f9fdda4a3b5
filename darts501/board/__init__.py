"""
Board module - segment identifiers and scoring values.
"""
from .segments import (
    BULL,
    OUTER_BULL,
    Segment,
    parse_segment,
    value_of,
)

__all__ = [
    "BULL",
    "OUTER_BULL",
    "Segment",
    "parse_segment",
    "value_of",
]
