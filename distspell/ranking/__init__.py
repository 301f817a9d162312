"""Candidate ranking for DistSpell."""

from distspell.ranking.data_models import SpellcheckResult
from distspell.ranking.ranker import check_word, rank_candidates

__all__ = ["SpellcheckResult", "check_word", "rank_candidates"]
