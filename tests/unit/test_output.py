"""Unit tests for result rendering.

Each test has exactly one assertion.
"""

from distspell.core import Accuracy, Match, SpellcheckStatus
from distspell.output import format_result
from distspell.ranking import SpellcheckResult


def _result(status: SpellcheckStatus, matches=None, accuracy=Accuracy.MEDIUM, query="kiten"):
    return SpellcheckResult(
        query=query,
        status=status,
        accuracy=accuracy,
        max_distance=2,
        matches=matches or [],
    )


class TestFormatResult:
    """Test rendering for each status."""

    def test_correct_word(self) -> None:
        """Correct words produce a single confirmation line."""
        lines = format_result(_result(SpellcheckStatus.CORRECT, query="kitten"))
        assert lines == ["The word 'kitten' is spelled correctly."]

    def test_unknown_word_suggests_lower_accuracy(self) -> None:
        """UNKNOWN above LOW accuracy adds a hint."""
        lines = format_result(_result(SpellcheckStatus.UNKNOWN, accuracy=Accuracy.HIGH))
        assert lines[-1] == "Try selecting a lower accuracy to find more possible matches."

    def test_unknown_word_at_low_accuracy_has_no_hint(self) -> None:
        """UNKNOWN at LOW accuracy renders only the message."""
        lines = format_result(_result(SpellcheckStatus.UNKNOWN, accuracy=Accuracy.LOW))
        assert len(lines) == 1

    def test_misspelled_word_lists_matches_in_order(self) -> None:
        """Match rows follow the ranked order."""
        matches = [Match("kitten", 1), Match("kite", 2)]
        lines = format_result(_result(SpellcheckStatus.MISSPELLED, matches))
        assert [line.split(" | ")[0].strip() for line in lines[4:]] == ["kitten", "kite"]

    def test_table_header_has_three_columns(self) -> None:
        """Header names the match, distance and confidence columns."""
        lines = format_result(_result(SpellcheckStatus.MISSPELLED, [Match("kitten", 1)]))
        assert lines[2] == "Possible Match | Edit Distance | Confidence"

    def test_rows_show_confidence_tier(self) -> None:
        """Distance 1 on a five letter query is HIGH confidence."""
        lines = format_result(_result(SpellcheckStatus.MISSPELLED, [Match("kitten", 1)]))
        assert lines[4].endswith("| high")

    def test_max_results_limits_rows(self) -> None:
        """Only max_results rows are listed, followed by a remainder line."""
        matches = [Match("kite", 2), Match("kites", 2), Match("kited", 2)]
        lines = format_result(_result(SpellcheckStatus.MISSPELLED, matches), max_results=1)
        assert lines[-1] == "... and 2 more"

    def test_shows_word_as_typed(self) -> None:
        """The display word replaces the folded query in the message."""
        lines = format_result(_result(SpellcheckStatus.CORRECT, query="kitten"), word="Kitten")
        assert lines == ["The word 'Kitten' is spelled correctly."]

    def test_confidence_uses_query_length_with_display_word(self) -> None:
        """The display word does not change the confidence column."""
        result = _result(SpellcheckStatus.MISSPELLED, [Match("kitten", 1)])
        lines = format_result(result, word="KITEN")
        assert lines[4].endswith("| high")
