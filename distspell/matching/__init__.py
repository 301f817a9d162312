"""Pattern matching for DistSpell."""

from distspell.matching.pattern_matcher import PatternMatcher

__all__ = ["PatternMatcher"]
