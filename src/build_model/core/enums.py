"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum, IntEnum


class ValidationLevel(IntEnum):
    """Compatibility tiers controlling how strictly a model is validated.

    Levels are totally ordered from the most lenient to the strictest
    behavior. ``STRICT`` always names the newest tier.
    """

    MINIMAL = 0
    MAVEN_2_0 = 20
    MAVEN_3_0 = 30
    MAVEN_3_1 = 31
    STRICT = 31


class ValidationMode(str, Enum):
    """Which view of the descriptor is being validated.

    Values are strings to ease serialization and CLI interchange.
    """

    RAW = "raw"
    EFFECTIVE = "effective"


__all__ = ["ValidationLevel", "ValidationMode"]
