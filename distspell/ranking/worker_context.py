"""Worker context for parallel ranking without global state."""

from dataclasses import dataclass
import threading

from distspell.distance import EditDistanceCalculator


@dataclass(frozen=True)
class RankingContext:
    """Immutable context shared by every ranking worker.

    Attributes:
        query: Word being checked
        calculator: Edit distance calculator passed by the caller, pickled
            into each worker so subclasses keep their behavior
        max_distance: Largest distance kept as a match
    """

    query: str
    calculator: EditDistanceCalculator
    max_distance: int


# Thread-local storage for worker context
_worker_context = threading.local()


def init_ranking_worker(context: RankingContext) -> None:
    """Initialize worker process with context in thread-local storage."""
    _worker_context.value = context


def get_ranking_worker_context() -> RankingContext:
    """Get the current worker's context.

    Raises:
        RuntimeError: If called before init_ranking_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError(
            "Ranking worker context not initialized. Call init_ranking_worker first."
        ) from e
