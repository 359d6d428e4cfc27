"""Tests for the weighted overall score and labels."""

import math

import pytest

from cover_lens.exceptions import ConfigurationError
from cover_lens.models.analysis import (
    ActionVerbAnalysis,
    KeywordAnalysis,
    PersonalisationAnalysis,
    ReadabilityAnalysis,
    ScoreTone,
    StructureAnalysis,
)
from cover_lens.scoring import (
    DIMENSION_WEIGHTS,
    calculate_overall_score,
    get_score_label,
    validate_weights,
)


def dimensions(structure=0, keywords=0, personalisation=0, action_verbs=0, readability=0):
    return (
        StructureAnalysis(
            score=structure,
            has_strong_opening=False,
            has_body_content=False,
            has_closing_cta=False,
            opening_feedback="",
            closing_feedback="",
        ),
        KeywordAnalysis(score=keywords),
        PersonalisationAnalysis(score=personalisation, company_mentions=0, role_mentions=0),
        ActionVerbAnalysis(score=action_verbs),
        ReadabilityAnalysis(
            score=readability,
            word_count=0,
            paragraph_count=0,
            sentence_count=0,
            is_optimal_length=False,
            length_feedback="",
        ),
    )


class TestDimensionWeights:
    """Tests for the weight table and its validation."""

    def test_weights_sum_to_one(self) -> None:
        """Test the built-in weights."""
        assert math.isclose(sum(DIMENSION_WEIGHTS.values()), 1.0)
        assert DIMENSION_WEIGHTS["keywords"] == 0.25

    def test_rejects_bad_sum(self) -> None:
        """Test that weights not summing to one are rejected."""
        weights = dict(DIMENSION_WEIGHTS, keywords=0.5)
        with pytest.raises(ConfigurationError, match="sum to 1.0"):
            validate_weights(weights)

    def test_rejects_non_positive(self) -> None:
        """Test that a zero weight is rejected."""
        weights = dict(DIMENSION_WEIGHTS, structure=0.0, keywords=0.45)
        with pytest.raises(ConfigurationError, match="positive"):
            validate_weights(weights)

    def test_rejects_missing_dimension(self) -> None:
        """Test that every dimension needs a weight."""
        weights = {k: v for k, v in DIMENSION_WEIGHTS.items() if k != "readability"}
        with pytest.raises(ConfigurationError, match="cover exactly"):
            validate_weights(weights)


class TestCalculateOverallScore:
    """Tests for calculate_overall_score."""

    def test_all_zero(self) -> None:
        """Test the minimum."""
        assert calculate_overall_score(*dimensions()) == 0.0

    def test_all_full(self) -> None:
        """Test the maximum is one and never above."""
        score = calculate_overall_score(*dimensions(100, 100, 100, 100, 100))
        assert score == pytest.approx(1.0)
        assert score <= 1.0

    def test_weighted_sum(self) -> None:
        """Test each dimension contributes its weight."""
        score = calculate_overall_score(*dimensions(keywords=100))
        assert score == pytest.approx(0.25)

        score = calculate_overall_score(*dimensions(50, 40, 60, 80, 20))
        assert score == pytest.approx(0.2 * 0.5 + 0.25 * 0.4 + 0.2 * 0.6 + 0.15 * 0.8 + 0.2 * 0.2)

    def test_higher_dimension_never_lowers_score(self) -> None:
        """Test monotonicity in each dimension."""
        base = calculate_overall_score(*dimensions(50, 50, 50, 50, 50))
        for field in DIMENSION_WEIGHTS:
            raised = calculate_overall_score(
                *dimensions(**dict(dict.fromkeys(DIMENSION_WEIGHTS, 50), **{field: 60}))
            )
            assert raised > base


class TestGetScoreLabel:
    """Tests for get_score_label."""

    @pytest.mark.parametrize(
        ("percentage", "label", "tone"),
        [
            (100, "Excellent", ScoreTone.SUCCESS),
            (80, "Excellent", ScoreTone.SUCCESS),
            (79, "Good", ScoreTone.INFO),
            (60, "Good", ScoreTone.INFO),
            (59, "Fair", ScoreTone.WARNING),
            (40, "Fair", ScoreTone.WARNING),
            (39, "Needs Improvement", ScoreTone.DANGER),
            (0, "Needs Improvement", ScoreTone.DANGER),
        ],
    )
    def test_bands(self, percentage: int, label: str, tone: ScoreTone) -> None:
        """Test label boundaries."""
        result = get_score_label(percentage)

        assert result.label == label
        assert result.tone is tone
