"""Type definitions for DistSpell."""

from enum import Enum
from functools import total_ordering
from typing import NamedTuple


@total_ordering
class Accuracy(Enum):
    """Strictness tier for spell checking, ordered LOW < MEDIUM < HIGH."""

    LOW = "low"  # Higher recall, lower precision
    MEDIUM = "medium"
    HIGH = "high"  # Lower recall, higher precision

    @property
    def rank(self) -> int:
        """Position of this level in increasing order of strictness."""
        return _ACCURACY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Accuracy):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def parse(cls, value: "str | Accuracy") -> "Accuracy":
        """Look up an accuracy by value or member name, case-insensitively.

        Raises:
            ValueError: If value names no accuracy level
        """
        if isinstance(value, Accuracy):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        available = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown accuracy '{value}'. Available accuracies: {available}")


_ACCURACY_ORDER = (Accuracy.LOW, Accuracy.MEDIUM, Accuracy.HIGH)


class SpellcheckStatus(Enum):
    """Outcome of checking a single word."""

    CORRECT = "correct"  # Word is in the dictionary
    MISSPELLED = "misspelled"  # Not in the dictionary, candidates found
    UNKNOWN = "unknown"  # Not in the dictionary, no candidate within threshold


class Match(NamedTuple):
    """A dictionary word and its edit distance to the query."""

    word: str
    distance: int
