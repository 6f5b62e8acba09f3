"""
Tests for analysis records and rating tiers
"""

import math

import pytest
from pydantic import ValidationError

from food_models import (
    AnalysisRecord,
    BilingualList,
    Language,
    RatingTier,
    format_rating_value,
    format_score,
    rating_tier,
)
from tests.conftest import make_analysis, make_analysis_data


class TestRatingTier:

    @pytest.mark.parametrize("rating,expected", [
        (10.0, RatingTier.GOOD),
        (8.0, RatingTier.GOOD),
        (7.99, RatingTier.WARNING),
        (6.0, RatingTier.WARNING),
        (5.99, RatingTier.CRITICAL),
        (0.0, RatingTier.CRITICAL),
    ])
    def test_boundaries_are_inclusive(self, rating, expected):
        assert rating_tier(rating) is expected

    def test_out_of_range_values_are_classified_not_rejected(self):
        assert rating_tier(11.5) is RatingTier.GOOD
        assert rating_tier(-3.0) is RatingTier.CRITICAL

    def test_nan_is_critical(self):
        assert rating_tier(math.nan) is RatingTier.CRITICAL


class TestFormatScore:

    def test_whole_numbers_drop_the_decimal(self):
        assert format_score(9.0) == "9"
        assert format_score(10) == "10"

    def test_fractional_scores_keep_shortest_form(self):
        assert format_score(9.3) == "9.3"
        assert format_score(7.25) == "7.25"

    def test_non_finite(self):
        assert format_score(math.nan) == "NaN"
        assert format_score(math.inf) == "Infinity"
        assert format_score(-math.inf) == "-Infinity"

    @pytest.mark.parametrize("rating,text", [
        (0.0, "0"),
        (-0.0, "0"),
        (-3.5, "-3.5"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (2.5e22, "2.5e+22"),
    ])
    def test_extremes_print_like_browser_numbers(self, rating, text):
        assert format_score(rating) == text


class TestFormatRatingValue:

    @pytest.mark.parametrize("rating,text", [
        (9.0, "9.0"),
        (8.25, "8.3"),
        (8.35, "8.3"),
        (7.04, "7.0"),
        (-1.25, "-1.3"),
    ])
    def test_one_decimal_ties_up(self, rating, text):
        assert format_rating_value(rating) == text

    def test_non_finite(self):
        assert format_rating_value(math.nan) == "NaN"


class TestBilingualList:

    def test_selects_language(self):
        items = BilingualList(english=["a", "b"], arabic=["ب"])
        assert items.for_language(Language.EN) == ["a", "b"]
        assert items.for_language(Language.AR) == ["ب"]
        assert items.for_language("ar") == ["ب"]

    def test_missing_language_is_empty(self):
        assert BilingualList(english=None, arabic=["x"]).english == ()
        assert BilingualList().for_language(Language.EN) == []


class TestAnalysisRecord:

    def test_reads_wire_names(self, analysis):
        assert analysis.image_name == "dish.jpg"
        assert analysis.overall_rating == 7.4
        assert analysis.categories.portion_size == 6.0
        assert analysis.categories.color_balance == 5.9

    def test_categories_are_ordered_for_rendering(self, analysis):
        keys = [key for key, _ in analysis.categories.ordered()]
        assert keys == ["presentation", "freshness", "portion_size", "color_balance", "plating"]

    def test_null_lists_become_empty(self):
        record = make_analysis(strengths=None, improvements=None, recommendations=None)
        assert record.strengths.for_language(Language.EN) == []
        assert record.recommendations.for_language(Language.AR) == []

    def test_missing_category_is_rejected(self):
        data = make_analysis_data()
        del data["categories"]["plating"]
        with pytest.raises(ValidationError):
            AnalysisRecord.model_validate(data)

    def test_records_are_immutable(self, analysis):
        with pytest.raises(ValidationError):
            analysis.overall_rating = 1.0

    def test_to_wire_uses_camel_case(self, analysis):
        wire = analysis.to_wire()
        assert wire["overallRating"] == 7.4
        assert wire["categories"]["colorBalance"] == 5.9
        assert wire["strengths"]["english"][0] == "Fresh herbs"
        assert AnalysisRecord.model_validate(wire) == analysis
