"""Plain-text rendering of spell check results."""

from distspell.core import SpellcheckStatus, classify_distance
from distspell.ranking import SpellcheckResult

MATCH_HEADER = "Possible Match"
DISTANCE_HEADER = "Edit Distance"
CONFIDENCE_HEADER = "Confidence"


def _format_matches(result: SpellcheckResult, max_results: int | None) -> list[str]:
    matches = result.matches[:max_results] if max_results else result.matches
    width = max([len(MATCH_HEADER)] + [len(match.word) for match in matches])

    header = f"{MATCH_HEADER.ljust(width)} | {DISTANCE_HEADER} | {CONFIDENCE_HEADER}"
    lines = ["", header, "-" * len(header)]
    for match in matches:
        tier = classify_distance(match.distance, len(result.query))
        lines.append(
            f"{match.word.ljust(width)} | {str(match.distance).ljust(len(DISTANCE_HEADER))} "
            f"| {tier.value}"
        )

    hidden = len(result.matches) - len(matches)
    if hidden > 0:
        lines.append(f"... and {hidden} more")
    return lines


def format_result(
    result: SpellcheckResult, max_results: int | None = None, word: str | None = None
) -> list[str]:
    """Render a spell check result as lines of text.

    Args:
        result: Result from check_word
        max_results: Maximum number of matches listed (None = all)
        word: Word as the user typed it (None = the checked query)
    """
    shown = result.query if word is None else word
    prefix = f"The word '{shown}'"

    if result.status is SpellcheckStatus.CORRECT:
        return [f"{prefix} is spelled correctly."]

    if result.status is SpellcheckStatus.UNKNOWN:
        lines = [f"{prefix} might be misspelled (no possible matches were found)."]
        if result.suggest_lower_accuracy:
            lines.append("Try selecting a lower accuracy to find more possible matches.")
        return lines

    lines = [f"{prefix} might be misspelled, the following possible matches were found."]
    lines.extend(_format_matches(result, max_results))
    return lines
