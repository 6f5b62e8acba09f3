"""
Pytest Configuration and Shared Fixtures
"""

from typing import Any, Dict, List

import pytest

from document_writer import DocumentWriter, DrawOp
from example_reports import get_example_report
from food_models import AnalysisRecord


def make_analysis_data(**overrides) -> Dict[str, Any]:
    """Wire-format analysis with sensible defaults."""
    data = {
        "id": "analysis-test",
        "imageName": "dish.jpg",
        "imageUrl": "https://example.com/dish.jpg",
        "overallRating": 7.4,
        "analysisDate": "2025-01-27",
        "categories": {
            "presentation": 7.0,
            "freshness": 8.1,
            "portionSize": 6.0,
            "colorBalance": 5.9,
            "plating": 8.0,
        },
        "strengths": {
            "english": ["Fresh herbs", "Clean rim", "Good height"],
            "arabic": ["أعشاب طازجة", "حافة نظيفة", "ارتفاع جيد"],
        },
        "improvements": {
            "english": ["Sauce placement", "More color", "Bigger plate"],
            "arabic": ["وضع الصلصة", "ألوان أكثر", "طبق أكبر"],
        },
        "recommendations": {
            "english": ["Rec one", "Rec two", "Rec three", "Rec four", "Rec five", "Rec six"],
            "arabic": ["توصية ١", "توصية ٢", "توصية ٣", "توصية ٤", "توصية ٥"],
        },
    }
    data.update(overrides)
    return data


def make_analysis(**overrides) -> AnalysisRecord:
    return AnalysisRecord.model_validate(make_analysis_data(**overrides))


def ops_between(writer: DocumentWriter, start_text: str, end_text: str = None) -> List[DrawOp]:
    """Draw operations after the op with ``start_text`` and before ``end_text``."""
    texts = [op.text for op in writer.ops]
    start = texts.index(start_text) + 1
    end = texts.index(end_text, start) if end_text else len(texts)
    return writer.ops[start:end]


@pytest.fixture
def analysis() -> AnalysisRecord:
    return make_analysis()


@pytest.fixture
def fine_dining_analysis() -> AnalysisRecord:
    """Example analysis rated 9.3 with all categories at 9.0 or above."""
    return get_example_report("example-4")


@pytest.fixture
def writer() -> DocumentWriter:
    return DocumentWriter()
