"""
Mock Analysis
=============
Randomized but realistically shaped analyses, used when no vision model is
configured or the model call fails.
"""

import random
import time
from datetime import date
from typing import Optional

from food_models import AnalysisRecord

# (low, high) per category
RATING_RANGES = {
    "presentation": (6.0, 9.0),
    "freshness": (7.0, 9.5),
    "portionSize": (6.5, 9.0),
    "colorBalance": (6.0, 9.0),
    "plating": (6.5, 9.0),
}

MOCK_RECOMMENDATIONS = {
    "english": [
        "Consider adding more colorful vegetables to enhance visual appeal and nutritional balance.",
        "The plating could benefit from more height variation to create visual interest.",
        "Try using garnishes that complement the main dish flavors, such as fresh herbs or edible flowers.",
        "The portion size appears optimal, but consider the plate size ratio for better presentation.",
        "Adding a sauce drizzle or dots around the plate could elevate the professional appearance."
    ],
    "arabic": [
        "فكر في إضافة المزيد من الخضروات الملونة لتعزيز الجاذبية البصرية والتوازن الغذائي.",
        "يمكن أن يستفيد التقديم من تنويع أكثر في الارتفاعات لخلق اهتمام بصري.",
        "جرب استخدام زينة تكمل نكهات الطبق الرئيسي، مثل الأعشاب الطازجة أو الزهور الصالحة للأكل.",
        "حجم الحصة يبدو مثالياً، لكن فكر في نسبة حجم الطبق للحصول على تقديم أفضل.",
        "إضافة رذاذ الصلصة أو النقاط حول الطبق يمكن أن يرفع من المظهر المهني."
    ]
}

MOCK_STRENGTHS = {
    "english": [
        "Excellent food freshness and quality ingredients visible",
        "Good portion control and balanced serving size",
        "Clean plate presentation with proper spacing",
        "Appealing color contrast between ingredients"
    ],
    "arabic": [
        "طازجة ممتازة للطعام ومكونات عالية الجودة مرئية",
        "تحكم جيد في الحصة وحجم التقديم متوازن",
        "تقديم نظيف للطبق مع مساحة مناسبة",
        "تباين ألوان جذاب بين المكونات"
    ]
}

MOCK_IMPROVEMENTS = {
    "english": [
        "Plating arrangement could be more artistic and creative",
        "Consider adding complementary side garnishes",
        "Temperature contrast elements could enhance the dish",
        "Sauce integration could be more elegant"
    ],
    "arabic": [
        "يمكن أن يكون ترتيب التقديم أكثر فنية وإبداعاً",
        "فكر في إضافة زينة جانبية متكاملة",
        "عناصر التباين في درجة الحرارة يمكن أن تعزز الطبق",
        "دمج الصلصة يمكن أن يكون أكثر أناقة"
    ]
}


def generate_mock_analysis(image_name: str, image_url: str = "",
                           rng: Optional[random.Random] = None) -> AnalysisRecord:
    """Build a mock analysis; overall rating is the mean of the raw category ratings."""
    rng = rng or random.Random()
    raw = {key: low + rng.random() * (high - low) for key, (low, high) in RATING_RANGES.items()}
    overall = sum(raw.values()) / len(raw)

    return AnalysisRecord.model_validate({
        "id": f"analysis-{int(time.time() * 1000)}",
        "imageName": image_name,
        "imageUrl": image_url,
        "overallRating": round(overall, 1),
        "analysisDate": date.today().isoformat(),
        "categories": {key: round(value, 1) for key, value in raw.items()},
        "recommendations": MOCK_RECOMMENDATIONS,
        "strengths": MOCK_STRENGTHS,
        "improvements": MOCK_IMPROVEMENTS,
    })
