"""Candidate ranking: score dictionary words against a query."""

from collections.abc import Collection, Iterable
from multiprocessing import Pool
import time
from typing import Any

from loguru import logger
from tqdm import tqdm

from distspell.core import Accuracy, Match, SpellcheckStatus, max_edit_distance
from distspell.distance import EditDistanceCalculator
from distspell.ranking.data_models import SpellcheckResult
from distspell.ranking.worker_context import (
    RankingContext,
    get_ranking_worker_context,
    init_ranking_worker,
)
from distspell.utils import Constants, chunk_evenly


def _sort_matches(matches: Iterable[Match]) -> list[Match]:
    """Order by ascending distance, then word."""
    return sorted(matches, key=lambda match: (match.distance, match.word))


def _score_words(
    query: str,
    words: Iterable[str],
    calculator: EditDistanceCalculator,
    max_distance: int,
) -> list[Match]:
    matches = []
    for word in words:
        distance = calculator.edit_distance(query, word)
        if distance <= max_distance:
            matches.append(Match(word, distance))
    return matches


def rank_chunk_worker(words: list[str]) -> list[Match]:
    """Worker function for multiprocessing: score one dictionary chunk."""
    context = get_ranking_worker_context()
    return _score_words(context.query, words, context.calculator, context.max_distance)


def _can_parallelize(dictionary: Collection[str]) -> bool:
    return len(dictionary) >= Constants.PARALLEL_MIN_WORDS


def _rank_multiprocessing(
    query: str,
    dictionary: Collection[str],
    calculator: EditDistanceCalculator,
    max_distance: int,
    jobs: int,
    verbose: bool,
) -> list[Match]:
    # Sorting before splitting keeps chunk contents independent of set order.
    chunks = chunk_evenly(sorted(dictionary), jobs * Constants.RANKING_CHUNKS_PER_WORKER)
    context = RankingContext(
        query=query,
        calculator=calculator,
        max_distance=max_distance,
    )

    if verbose:
        logger.info(f"  Using {jobs} parallel workers for {len(chunks)} chunks")

    matches: list[Match] = []
    with Pool(
        processes=jobs,
        initializer=init_ranking_worker,
        initargs=(context,),
    ) as pool:
        results = pool.imap_unordered(rank_chunk_worker, chunks)

        if verbose:
            results_wrapped_iter: Any = tqdm(
                results,
                total=len(chunks),
                desc="Ranking candidates",
                unit="chunk",
            )
        else:
            results_wrapped_iter = results

        for chunk_matches in results_wrapped_iter:
            matches.extend(chunk_matches)

    return matches


def rank_candidates(
    query: str,
    dictionary: Collection[str],
    calculator: EditDistanceCalculator,
    accuracy: Accuracy,
    jobs: int = 1,
    verbose: bool = False,
) -> list[Match]:
    """Return dictionary words within the accuracy threshold of query.

    Args:
        query: Word to look up (already case-folded by the caller)
        dictionary: Known words, read only
        calculator: Edit distance strategy
        accuracy: Accuracy level selecting the distance threshold
        jobs: Number of worker processes; 1 ranks in the calling process
        verbose: Whether to log progress

    Returns:
        Matches sorted by ascending distance, ties broken by word. The order
        does not depend on jobs.

    Raises:
        ValueError: If jobs is less than 1
    """
    if jobs < 1:
        raise ValueError(f"jobs must be >= 1, got {jobs}")

    max_distance = max_edit_distance(accuracy, len(query))
    logger.debug(
        f"Ranking '{query}' against {len(dictionary)} words "
        f"with {calculator.description}, max distance {max_distance}"
    )

    if jobs > 1 and _can_parallelize(dictionary):
        matches = _rank_multiprocessing(
            query, dictionary, calculator, max_distance, jobs, verbose
        )
    else:
        matches = _score_words(query, dictionary, calculator, max_distance)

    return _sort_matches(matches)


def check_word(
    query: str,
    dictionary: Collection[str],
    calculator: EditDistanceCalculator,
    accuracy: Accuracy,
    jobs: int = 1,
    verbose: bool = False,
) -> SpellcheckResult:
    """Classify query as correct, misspelled with candidates, or unknown.

    Exact dictionary members are reported as correct without ranking.
    """
    start_time = time.time()
    max_distance = max_edit_distance(accuracy, len(query))

    if query in dictionary:
        status = SpellcheckStatus.CORRECT
        matches: list[Match] = []
    else:
        matches = rank_candidates(query, dictionary, calculator, accuracy, jobs, verbose)
        status = SpellcheckStatus.MISSPELLED if matches else SpellcheckStatus.UNKNOWN

    elapsed_time = time.time() - start_time
    logger.debug(f"Checked '{query}': {status.value}, {len(matches)} matches")

    return SpellcheckResult(
        query=query,
        status=status,
        accuracy=accuracy,
        max_distance=max_distance,
        matches=matches,
        elapsed_time=elapsed_time,
    )
