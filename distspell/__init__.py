"""DistSpell - edit distance spell checker.

Check words against a dictionary with interchangeable Levenshtein distance
algorithms and length-scaled accuracy thresholds.
"""

from distspell.core import Accuracy, Config, Match, SpellcheckStatus, load_config, max_edit_distance
from distspell.distance import EditDistanceCalculator, get_calculator, list_calculators
from distspell.ranking import SpellcheckResult, check_word, rank_candidates
from distspell.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Accuracy",
    "Config",
    "EditDistanceCalculator",
    "Match",
    "SpellcheckResult",
    "SpellcheckStatus",
    "check_word",
    "get_calculator",
    "list_calculators",
    "load_config",
    "max_edit_distance",
    "rank_candidates",
    "setup_logger",
]
