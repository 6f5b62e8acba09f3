"""
Food Analysis Records
=====================
Shared data contract between the analysis sources (vision model, mock
generator, bundled examples) and the consumers (API responses, PDF reports).

Wire names follow the camelCase JSON the vision model is asked to return;
Python code uses the snake_case attribute names.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    EN = "en"
    AR = "ar"

    @property
    def list_key(self) -> str:
        """Key used by bilingual lists for this language."""
        return "english" if self is Language.EN else "arabic"


class RatingTier(Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


GOOD_THRESHOLD = 8.0
WARNING_THRESHOLD = 6.0


def rating_tier(rating: float) -> RatingTier:
    """Classify a rating; lower bounds are inclusive, anything else is critical."""
    if rating >= GOOD_THRESHOLD:
        return RatingTier.GOOD
    if rating >= WARNING_THRESHOLD:
        return RatingTier.WARNING
    return RatingTier.CRITICAL


def format_score(rating: float) -> str:
    """
    Render a rating for running text the way a browser prints a number:
    9.0 -> '9', 9.3 -> '9.3', 1e-7 -> '1e-7', 1e21 -> '1e+21'.
    """
    rating = float(rating)
    if math.isnan(rating):
        return "NaN"
    if math.isinf(rating):
        return "Infinity" if rating > 0 else "-Infinity"
    if rating == 0:
        return "0"

    sign = "-" if rating < 0 else ""
    shortest = Decimal(repr(abs(rating))).normalize().as_tuple()
    digits = "".join(str(d) for d in shortest.digits)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = k + shortest.exponent

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    exponent = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def format_rating_value(rating: float) -> str:
    """One decimal, ties rounded away from zero: 8.25 -> '8.3'."""
    rating = float(rating)
    if not math.isfinite(rating):
        return format_score(rating)
    return str(Decimal(rating).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class _RecordModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BilingualList(_RecordModel):
    """Parallel English/Arabic item lists; the two need not match in length."""
    english: Tuple[str, ...] = ()
    arabic: Tuple[str, ...] = ()

    @field_validator("english", "arabic", mode="before")
    @classmethod
    def _missing_is_empty(cls, value):
        return () if value is None else value

    def for_language(self, language: Language) -> List[str]:
        return list(self.english if Language(language) is Language.EN else self.arabic)


# Rendering order of the category rating boxes
CATEGORY_ORDER = ("presentation", "freshness", "portion_size", "color_balance", "plating")


class CategoryRatings(_RecordModel):
    presentation: float
    freshness: float
    portion_size: float = Field(alias="portionSize")
    color_balance: float = Field(alias="colorBalance")
    plating: float

    def ordered(self) -> List[Tuple[str, float]]:
        return [(key, getattr(self, key)) for key in CATEGORY_ORDER]


class AnalysisRecord(_RecordModel):
    """Immutable result of one food-image quality assessment."""
    id: str
    image_name: str = Field(alias="imageName")
    image_url: str = Field(default="", alias="imageUrl")
    overall_rating: float = Field(alias="overallRating")
    analysis_date: str = Field(default="", alias="analysisDate")
    categories: CategoryRatings
    strengths: BilingualList = BilingualList()
    improvements: BilingualList = BilingualList()
    recommendations: BilingualList = BilingualList()

    @field_validator("strengths", "improvements", "recommendations", mode="before")
    @classmethod
    def _missing_lists_are_empty(cls, value):
        return {} if value is None else value

    def to_wire(self) -> dict:
        """Serialize with the camelCase field names."""
        return self.model_dump(by_alias=True, mode="json")


class ReportRequest(_RecordModel):
    analysis: AnalysisRecord
    language: Language = Language.EN
    organization_name: Optional[str] = Field(default=None, alias="organizationName")
    report_date: str = Field(alias="reportDate")
