"""
Configuration constants for the bill structure parsers.

All thresholds and window sizes are centralized here for easy tuning.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configurable thresholds for reference extraction and complexity tiers."""

    # Action detection window around a code reference match
    ACTION_WINDOW_BEFORE: int = 20
    ACTION_WINDOW_AFTER: int = 100

    # Omnibus tier
    OMNIBUS_SECTION_THRESHOLD: int = 50

    # Complex tier
    COMPLEX_MIN_SECTIONS: int = 11
    COMPLEX_MIN_CODES: int = 3

    # Moderate tier
    MODERATE_MIN_SECTIONS: int = 4
    MODERATE_MAX_SECTIONS: int = 10
    MODERATE_MAX_CODES: int = 2

    # Simple tier
    SIMPLE_MAX_SECTIONS: int = 3
    SIMPLE_MAX_CODES: int = 1

    # A single "striking X and substituting Y" is an ordinary edit, not a global rename
    STRIKE_SUBSTITUTE_MIN_OCCURRENCES: int = 3


# Default configuration instance
DEFAULT_PARSER_CONFIG = ParserConfig()
