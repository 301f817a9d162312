"""Edit distance over the full dynamic programming matrix."""

from distspell.distance.base import EditDistanceCalculator
from distspell.distance.buffers import new_buffer
from distspell.utils.constants import Constants


class IterativeFullMatrixCalculator(EditDistanceCalculator):
    """Fill the whole (len(source)+1) x (len(target)+1) cost table.

    The table is stored flat in row-major order: cell (i, j) lives at
    distances[i * columns + j] and holds the distance between the first i
    characters of source and the first j characters of target.
    """

    name = "full-matrix"

    @property
    def description(self) -> str:
        return "Iterative Full Matrix (Medium)"

    def _distance(self, source: str, target: str) -> int:
        rows = len(source) + 1
        columns = len(target) + 1
        distances = new_buffer(rows * columns, Constants.FULL_MATRIX_LIST_LIMIT)

        # First column: delete every source character.
        for i in range(1, rows):
            distances[i * columns] = i
        # First row: insert every target character.
        for j in range(1, columns):
            distances[j] = j

        for i in range(1, rows):
            row = i * columns
            previous_row = row - columns
            source_char = source[i - 1]
            for j in range(1, columns):
                insertion = distances[row + j - 1] + 1
                deletion = distances[previous_row + j] + 1
                substitution = distances[previous_row + j - 1] + (
                    0 if source_char == target[j - 1] else 1
                )
                distances[row + j] = min(insertion, deletion, substitution)

        return distances[rows * columns - 1]
