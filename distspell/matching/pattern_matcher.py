"""Exact and wildcard word pattern matching for dictionary exclusions."""

from re import Pattern

from distspell.utils import compile_wildcard_regex


class PatternMatcher:
    """Matcher for exact words and wildcard patterns.

    Patterns containing '*' are treated as wildcards (e.g., '*ball', 'in*', '*teh*').
    All other patterns are treated as exact matches. Matching is case-insensitive
    because dictionary words are lowercase.
    """

    def __init__(self, patterns: set[str] | list[str]):
        self.exact_patterns: set[str] = set()
        self.wildcard_regexes: list[Pattern] = []

        for pattern in patterns:
            pattern = pattern.lower()
            if "*" in pattern:
                self.wildcard_regexes.append(compile_wildcard_regex(pattern))
            else:
                self.exact_patterns.add(pattern)

    def matches(self, text: str) -> bool:
        """Check if text matches any pattern (exact or wildcard)."""
        if text in self.exact_patterns:
            return True
        return any(regex.match(text) for regex in self.wildcard_regexes)

    def filter_set(self, items: set[str] | frozenset[str]) -> set[str]:
        """Return items that do NOT match any pattern."""
        return {item for item in items if not self.matches(item)}
