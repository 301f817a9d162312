"""Core types, accuracy policy and configuration for DistSpell."""

from .accuracy import (
    ACCURACY_PROFILES,
    AccuracyProfile,
    accuracy_description,
    classify_distance,
    max_edit_distance,
)
from .config import Config, load_config
from .types import Accuracy, Match, SpellcheckStatus

__all__ = [
    "ACCURACY_PROFILES",
    "Accuracy",
    "AccuracyProfile",
    "Config",
    "Match",
    "SpellcheckStatus",
    "accuracy_description",
    "classify_distance",
    "load_config",
    "max_edit_distance",
]
