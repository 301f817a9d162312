"""Edit distance calculators for DistSpell."""

from .base import EditDistanceCalculator
from .full_matrix import IterativeFullMatrixCalculator
from .optimized_matrix import IterativeOptimizedMatrixCalculator
from .recursive import RecursiveCalculator

# Calculator registry, slowest first
_CALCULATORS: dict[str, type[EditDistanceCalculator]] = {
    RecursiveCalculator.name: RecursiveCalculator,
    IterativeFullMatrixCalculator.name: IterativeFullMatrixCalculator,
    IterativeOptimizedMatrixCalculator.name: IterativeOptimizedMatrixCalculator,
}


def get_calculator(name: str) -> EditDistanceCalculator:
    """Factory function to get an edit distance calculator instance.

    Args:
        name: Registry name ('recursive', 'full-matrix', 'optimized-matrix')

    Returns:
        Calculator instance

    Raises:
        ValueError: If the calculator name is unknown
    """
    key = name.lower()

    if key not in _CALCULATORS:
        available = ", ".join(_CALCULATORS.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available algorithms: {available}")

    return _CALCULATORS[key]()


def list_calculators() -> list[str]:
    """Return list of supported calculator names."""
    return list(_CALCULATORS.keys())


__all__ = [
    "EditDistanceCalculator",
    "IterativeFullMatrixCalculator",
    "IterativeOptimizedMatrixCalculator",
    "RecursiveCalculator",
    "get_calculator",
    "list_calculators",
]
