"""
Domain value objects.
"""

from parrain.domain.value_objects.level import LEVEL_THRESHOLDS, Level, level_for

__all__ = [
    "Level",
    "LEVEL_THRESHOLDS",
    "level_for",
]
