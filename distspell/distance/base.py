"""Base class for edit distance calculators."""

from abc import ABC, abstractmethod


class EditDistanceCalculator(ABC):
    """Abstract base class for Levenshtein distance strategies.

    Implementations are stateless: every call works on its own local buffers,
    so one instance can be shared freely, including across processes.
    """

    name: str = ""

    def edit_distance(self, source: str, target: str) -> int:
        """Return the minimum number of single-character insertions,
        deletions and substitutions that turn source into target.

        Raises:
            TypeError: If source or target is not a string
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be a string, got {type(source)}")
        if not isinstance(target, str):
            raise TypeError(f"target must be a string, got {type(target)}")
        return self._distance(source, target)

    @abstractmethod
    def _distance(self, source: str, target: str) -> int:
        """Compute the distance between two already validated strings."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a human readable label for this strategy."""

    def get_name(self) -> str:
        """Return the registry name of this calculator."""
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
