"""Edit distance keeping only two rows of the matrix."""

from distspell.distance.base import EditDistanceCalculator
from distspell.distance.buffers import new_buffer
from distspell.utils.constants import Constants


class IterativeOptimizedMatrixCalculator(EditDistanceCalculator):
    """Two-row variant of the full matrix algorithm.

    Row i only depends on row i - 1 and on the cells of row i already filled
    from left to right, so O(len(target)) memory is enough.
    """

    name = "optimized-matrix"

    @property
    def description(self) -> str:
        return "Iterative Optimized Matrix (Fast)"

    def _distance(self, source: str, target: str) -> int:
        width = len(target) + 1
        previous = new_buffer(width, Constants.OPTIMIZED_ROW_LIST_LIMIT)
        current = new_buffer(width, Constants.OPTIMIZED_ROW_LIST_LIMIT)

        # Empty source prefix: insert every target character.
        for j in range(width):
            previous[j] = j

        for i, source_char in enumerate(source):
            current[0] = i + 1
            for j, target_char in enumerate(target):
                insertion = current[j] + 1
                deletion = previous[j + 1] + 1
                substitution = previous[j] + (0 if source_char == target_char else 1)
                current[j + 1] = min(insertion, deletion, substitution)
            # Only current is written next iteration; previous is read-only.
            previous, current = current, previous

        return previous[len(target)]
