"""Accuracy policy: length-scaled edit distance thresholds.

A fixed threshold is unfair across word lengths (three edits is huge for a
two letter word and small for a twelve letter one), so the maximum distance
scales with the query length and is clamped to per-level bounds.
"""

from dataclasses import dataclass
import math

from distspell.core.types import Accuracy


@dataclass(frozen=True)
class AccuracyProfile:
    """Threshold parameters for one accuracy level."""

    scale: float
    min_distance: int
    max_distance: int
    description: str


ACCURACY_PROFILES: dict[Accuracy, AccuracyProfile] = {
    Accuracy.LOW: AccuracyProfile(0.45, 2, 5, "Low (Higher Recall, Lower Precision)"),
    Accuracy.MEDIUM: AccuracyProfile(0.35, 1, 3, "Medium (Balanced Recall and Precision)"),
    Accuracy.HIGH: AccuracyProfile(0.25, 0, 2, "High (Lower Recall, Higher Precision)"),
}


def _profile(accuracy: Accuracy) -> AccuracyProfile:
    if not isinstance(accuracy, Accuracy):
        raise TypeError(f"accuracy must be an Accuracy, got {type(accuracy)}")
    return ACCURACY_PROFILES[accuracy]


def max_edit_distance(accuracy: Accuracy, length: int) -> int:
    """Return the largest edit distance accepted for a query of this length.

    Args:
        accuracy: Accuracy level
        length: Length of the queried word

    Returns:
        clamp(ceil(length * scale), min_distance, max_distance)

    Raises:
        TypeError: If accuracy is not an Accuracy or length is not an int
        ValueError: If length is negative
    """
    profile = _profile(accuracy)
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, got {type(length)}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    scaled = math.ceil(length * profile.scale)
    return max(profile.min_distance, min(scaled, profile.max_distance))


def classify_distance(distance: int, length: int) -> Accuracy:
    """Return the strictest accuracy level whose threshold admits distance.

    Distances beyond even the medium threshold classify as LOW.
    """
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise TypeError(f"distance must be an int, got {type(distance)}")
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")
    if distance <= max_edit_distance(Accuracy.HIGH, length):
        return Accuracy.HIGH
    if distance <= max_edit_distance(Accuracy.MEDIUM, length):
        return Accuracy.MEDIUM
    return Accuracy.LOW


def accuracy_description(accuracy: Accuracy) -> str:
    """Return the display label for an accuracy level."""
    return _profile(accuracy).description
