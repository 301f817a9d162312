"""Unit tests for the accuracy policy.

Tests verify threshold computation and ordering. Each test has exactly one assertion.
"""

import pytest

from distspell.core import (
    Accuracy,
    accuracy_description,
    classify_distance,
    max_edit_distance,
)

LENGTHS = range(0, 30)


class TestAccuracyOrdering:
    """Test accuracy level ordering and parsing."""

    def test_low_is_less_than_medium(self) -> None:
        """LOW is more permissive than MEDIUM."""
        assert Accuracy.LOW < Accuracy.MEDIUM

    def test_medium_is_less_than_high(self) -> None:
        """MEDIUM is more permissive than HIGH."""
        assert Accuracy.MEDIUM < Accuracy.HIGH

    def test_sorting_orders_by_strictness(self) -> None:
        """Sorting the levels yields LOW, MEDIUM, HIGH."""
        assert sorted([Accuracy.HIGH, Accuracy.LOW, Accuracy.MEDIUM]) == [
            Accuracy.LOW,
            Accuracy.MEDIUM,
            Accuracy.HIGH,
        ]

    def test_parse_accepts_value_in_any_case(self) -> None:
        """'High' parses to HIGH."""
        assert Accuracy.parse("High") is Accuracy.HIGH

    def test_parse_passes_members_through(self) -> None:
        """Parsing a member returns it unchanged."""
        assert Accuracy.parse(Accuracy.LOW) is Accuracy.LOW

    def test_parse_rejects_unknown_name(self) -> None:
        """Unknown accuracy names raise ValueError."""
        with pytest.raises(ValueError, match="Available accuracies"):
            Accuracy.parse("extreme")

    def test_comparison_with_other_types_is_unsupported(self) -> None:
        """Comparing to an int raises TypeError."""
        with pytest.raises(TypeError):
            _ = Accuracy.LOW < 1  # type: ignore[operator]


class TestMaxEditDistance:
    """Test length-scaled thresholds."""

    @pytest.mark.parametrize(
        "accuracy,length,expected",
        [
            (Accuracy.MEDIUM, 6, 3),
            (Accuracy.HIGH, 3, 1),
            (Accuracy.HIGH, 0, 0),
            (Accuracy.HIGH, 4, 1),
            (Accuracy.HIGH, 5, 2),
            (Accuracy.HIGH, 40, 2),
            (Accuracy.MEDIUM, 0, 1),
            (Accuracy.MEDIUM, 3, 2),
            (Accuracy.MEDIUM, 12, 3),
            (Accuracy.LOW, 0, 2),
            (Accuracy.LOW, 5, 3),
            (Accuracy.LOW, 9, 5),
            (Accuracy.LOW, 100, 5),
        ],
    )
    def test_returns_clamped_scaled_threshold(
        self, accuracy: Accuracy, length: int, expected: int
    ) -> None:
        """Threshold is ceil(length * scale) clamped to the level's bounds."""
        assert max_edit_distance(accuracy, length) == expected

    @pytest.mark.parametrize("accuracy", list(Accuracy))
    def test_non_decreasing_in_length(self, accuracy: Accuracy) -> None:
        """Longer queries never get a smaller threshold."""
        thresholds = [max_edit_distance(accuracy, n) for n in LENGTHS]
        assert thresholds == sorted(thresholds)

    @pytest.mark.parametrize("length", LENGTHS)
    def test_low_admits_at_least_medium(self, length: int) -> None:
        """LOW threshold is at least the MEDIUM threshold."""
        assert max_edit_distance(Accuracy.LOW, length) >= max_edit_distance(
            Accuracy.MEDIUM, length
        )

    @pytest.mark.parametrize("length", LENGTHS)
    def test_medium_admits_at_least_high(self, length: int) -> None:
        """MEDIUM threshold is at least the HIGH threshold."""
        assert max_edit_distance(Accuracy.MEDIUM, length) >= max_edit_distance(
            Accuracy.HIGH, length
        )

    def test_negative_length_raises_value_error(self) -> None:
        """Negative length is a contract violation."""
        with pytest.raises(ValueError):
            max_edit_distance(Accuracy.MEDIUM, -1)

    def test_unknown_accuracy_raises_type_error(self) -> None:
        """A plain string is not an accuracy level."""
        with pytest.raises(TypeError):
            max_edit_distance("medium", 5)  # type: ignore[arg-type]

    def test_non_integer_length_raises_type_error(self) -> None:
        """Float lengths are rejected."""
        with pytest.raises(TypeError):
            max_edit_distance(Accuracy.MEDIUM, 5.0)  # type: ignore[arg-type]

    def test_boolean_length_raises_type_error(self) -> None:
        """Booleans are not lengths."""
        with pytest.raises(TypeError):
            max_edit_distance(Accuracy.MEDIUM, True)


class TestClassifyDistance:
    """Test classification of match distances into confidence tiers."""

    def test_zero_distance_is_high(self) -> None:
        """An exact match is always HIGH confidence."""
        assert classify_distance(0, 6) is Accuracy.HIGH

    def test_distance_within_high_threshold_is_high(self) -> None:
        """Distance 2 on an eight letter word is within HIGH's threshold of 2."""
        assert classify_distance(2, 8) is Accuracy.HIGH

    def test_distance_within_medium_threshold_is_medium(self) -> None:
        """Distance 3 on an eight letter word exceeds HIGH but fits MEDIUM."""
        assert classify_distance(3, 8) is Accuracy.MEDIUM

    def test_distance_beyond_medium_threshold_is_low(self) -> None:
        """Distance 4 on an eight letter word only fits LOW."""
        assert classify_distance(4, 8) is Accuracy.LOW

    def test_negative_distance_raises_value_error(self) -> None:
        """Distances are never negative."""
        with pytest.raises(ValueError):
            classify_distance(-1, 3)

    def test_non_integer_distance_raises_type_error(self) -> None:
        """Float distances are rejected."""
        with pytest.raises(TypeError):
            classify_distance(1.5, 8)  # type: ignore[arg-type]

    def test_boolean_distance_raises_type_error(self) -> None:
        """Booleans are not distances."""
        with pytest.raises(TypeError):
            classify_distance(False, 8)


class TestAccuracyDescription:
    """Test display labels."""

    def test_medium_description(self) -> None:
        """MEDIUM describes a balanced tradeoff."""
        assert accuracy_description(Accuracy.MEDIUM) == "Medium (Balanced Recall and Precision)"
