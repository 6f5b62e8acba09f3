"""
Tests for the per-language report text tables
"""

from dataclasses import replace

import pytest

from food_models import Language, RatingTier
from report_text import (
    ARABIC,
    ENGLISH,
    HeaderText,
    InsightBlock,
    get_report_text,
)


def test_lookup_by_language():
    assert get_report_text(Language.EN) is ENGLISH
    assert get_report_text("ar") is ARABIC


def test_footer_format():
    assert ENGLISH.header.footer(2, 3) == "Page 2 of 3"
    assert ARABIC.header.footer(1, 4) == "صفحة 1 من 4"


def test_tier_labels():
    summary = ENGLISH.executive_summary
    assert summary.tier_label(RatingTier.GOOD).startswith("Excellent")
    assert summary.tier_label(RatingTier.WARNING).startswith("Good")
    assert summary.tier_label(RatingTier.CRITICAL).startswith("Needs Improvement")


@pytest.mark.parametrize("table", [ENGLISH, ARABIC])
def test_tables_have_fixed_section_shapes(table):
    assert len(table.executive_summary.impact_statements) == 3
    assert len(table.ceo_insights.blocks) == 5
    assert len(table.action_plan.phases) == 3
    assert all(len(phase.actions) == 4 for phase in table.action_plan.phases)
    for key in ("presentation", "freshness", "portion_size", "color_balance", "plating"):
        assert table.detailed_analysis.category_label(key)


def test_blank_entry_is_rejected():
    with pytest.raises(ValueError):
        HeaderText(title="REPORT", page=" ", of="of")
    with pytest.raises(ValueError):
        InsightBlock(heading="ROI", body="")


def test_blank_list_item_is_rejected():
    with pytest.raises(ValueError):
        replace(ENGLISH.executive_summary, impact_statements=("one", "", "three"))


def test_wrong_section_sizes_are_rejected():
    with pytest.raises(ValueError):
        replace(ENGLISH.executive_summary, impact_statements=("one", "two"))
    with pytest.raises(ValueError):
        replace(ENGLISH.ceo_insights, blocks=ENGLISH.ceo_insights.blocks[:4])
    with pytest.raises(ValueError):
        replace(ENGLISH.action_plan, phases=ENGLISH.action_plan.phases[:2])


def test_missing_section_is_rejected():
    with pytest.raises(ValueError):
        replace(ENGLISH, action_plan=None)
