"""Plain recursive edit distance."""

from distspell.distance.base import EditDistanceCalculator


class RecursiveCalculator(EditDistanceCalculator):
    """Direct recursion without memoization.

    Runs in exponential time and only makes sense as a baseline for short
    inputs. Recursion only happens at mismatches, so long shared runs
    do not add depth.
    """

    name = "recursive"

    @property
    def description(self) -> str:
        return "Recursive (Slow)"

    def _distance(self, source: str, target: str) -> int:
        return _recurse(source, 0, target, 0)


def _recurse(source: str, i: int, target: str, j: int) -> int:
    """Edit distance between source[i:] and target[j:]."""
    # Matching characters cost nothing, so step past them without recursing.
    while i < len(source) and j < len(target) and source[i] == target[j]:
        i += 1
        j += 1

    if i == len(source):
        return len(target) - j
    if j == len(target):
        return len(source) - i

    insertion = _recurse(source, i, target, j + 1)
    deletion = _recurse(source, i + 1, target, j)
    substitution = _recurse(source, i + 1, target, j + 1)
    return 1 + min(insertion, deletion, substitution)
