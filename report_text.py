"""
Report Text Tables
==================
Per-language strings for every fixed piece of the PDF report.

Tables are built at import time and validated on construction, so a blank or
missing entry fails when the module loads rather than producing an empty line
in a customer's report.
"""

from dataclasses import dataclass, fields
from typing import Dict, Tuple

from food_models import Language, RatingTier


class _Validated:
    """Rejects blank strings and blank list items in any field."""

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            items = value if isinstance(value, tuple) else (value,)
            if not items:
                raise ValueError(f"{type(self).__name__}.{f.name} is empty")
            for item in items:
                if isinstance(item, _Validated):
                    continue
                if not isinstance(item, str) or not item.strip():
                    raise ValueError(f"{type(self).__name__}.{f.name} has a blank entry")


@dataclass(frozen=True)
class HeaderText(_Validated):
    title: str
    page: str
    of: str

    def footer(self, page_number: int, page_count: int) -> str:
        return f"{self.page} {page_number} {self.of} {page_count}"


@dataclass(frozen=True)
class ExecutiveSummaryText(_Validated):
    title: str
    overall_performance: str
    key_findings: str
    business_impact: str
    rating: str
    excellent: str
    good: str
    needs_improvement: str
    impact_statements: Tuple[str, ...]

    def __post_init__(self):
        super().__post_init__()
        if len(self.impact_statements) != 3:
            raise ValueError("Executive summary needs exactly 3 business impact statements")

    def tier_label(self, tier: RatingTier) -> str:
        return {
            RatingTier.GOOD: self.excellent,
            RatingTier.WARNING: self.good,
            RatingTier.CRITICAL: self.needs_improvement,
        }[tier]


@dataclass(frozen=True)
class DetailedAnalysisText(_Validated):
    title: str
    categories: str
    presentation: str
    freshness: str
    portion_size: str
    color_balance: str
    plating: str

    def category_label(self, key: str) -> str:
        return getattr(self, key)


@dataclass(frozen=True)
class ChefRecommendationsText(_Validated):
    title: str
    subtitle: str
    techniques: str
    ingredients: str


@dataclass(frozen=True)
class InsightBlock(_Validated):
    heading: str
    body: str


@dataclass(frozen=True)
class CeoInsightsText(_Validated):
    title: str
    # ROI, training, costs, timeline, KPIs
    blocks: Tuple[InsightBlock, ...]

    def __post_init__(self):
        super().__post_init__()
        if len(self.blocks) != 5:
            raise ValueError("CEO insights need exactly 5 blocks")


@dataclass(frozen=True)
class ActionList(_Validated):
    heading: str
    actions: Tuple[str, ...]


@dataclass(frozen=True)
class ActionPlanText(_Validated):
    title: str
    # immediate, short-term, long-term
    phases: Tuple[ActionList, ...]

    def __post_init__(self):
        super().__post_init__()
        if len(self.phases) != 3:
            raise ValueError("Action plan needs exactly 3 phases")


@dataclass(frozen=True)
class ReportText(_Validated):
    header: HeaderText
    executive_summary: ExecutiveSummaryText
    detailed_analysis: DetailedAnalysisText
    chef_recommendations: ChefRecommendationsText
    ceo_insights: CeoInsightsText
    action_plan: ActionPlanText

    def __post_init__(self):
        for f in fields(self):
            if not isinstance(getattr(self, f.name), _Validated):
                raise ValueError(f"ReportText.{f.name} is missing")


ENGLISH = ReportText(
    header=HeaderText(
        title="FOOD PRESENTATION ANALYSIS REPORT",
        page="Page",
        of="of",
    ),
    executive_summary=ExecutiveSummaryText(
        title="EXECUTIVE SUMMARY",
        overall_performance="Overall Performance",
        key_findings="Key Findings",
        business_impact="Business Impact",
        rating="Rating",
        excellent="Excellent - Exceeds industry standards",
        good="Good - Meets expectations with room for improvement",
        needs_improvement="Needs Improvement - Below industry standards",
        impact_statements=(
            "Current presentation quality may impact customer satisfaction and repeat business.",
            "Food presentation directly affects brand perception and social media shareability.",
            "Improving visual appeal can differentiate from competitors and justify premium pricing.",
        ),
    ),
    detailed_analysis=DetailedAnalysisText(
        title="DETAILED ANALYSIS",
        categories="Performance Categories",
        presentation="Presentation",
        freshness="Freshness",
        portion_size="Portion Size",
        color_balance="Color Balance",
        plating="Plating",
    ),
    chef_recommendations=ChefRecommendationsText(
        title="CHEF RECOMMENDATIONS",
        subtitle="Immediate Kitchen Improvements",
        techniques="Plating Techniques",
        ingredients="Ingredient Enhancements",
    ),
    ceo_insights=CeoInsightsText(
        title="CEO STRATEGIC INSIGHTS",
        blocks=(
            InsightBlock(
                "Return on Investment Analysis",
                "Improving food presentation can increase customer satisfaction by 15-25% "
                "and social media engagement by 40%.",
            ),
            InsightBlock(
                "Staff Training Requirements",
                "Kitchen staff require 2-4 hours of plating technique training. "
                "Estimated cost: $200-400 per chef.",
            ),
            InsightBlock(
                "Implementation Costs",
                "Initial investment in presentation tools and ingredients: $500-1,500. "
                "Monthly ongoing costs: $200-500.",
            ),
            InsightBlock(
                "Implementation Timeline",
                "Immediate improvements: 1-2 weeks. Full implementation: 4-6 weeks. "
                "ROI visible: 2-3 months.",
            ),
            InsightBlock(
                "Key Performance Indicators",
                "Track: Customer satisfaction scores, social media mentions, "
                "average order value, repeat customer rate.",
            ),
        ),
    ),
    action_plan=ActionPlanText(
        title="ACTION PLAN",
        phases=(
            ActionList("Immediate Actions (Week 1)", (
                "Train kitchen staff on basic plating techniques",
                "Audit current plate and garnish inventory",
                "Implement quality control checklist for food presentation",
                "Take reference photos of improved presentations",
            )),
            ActionList("Short-term Goals (Weeks 2-4)", (
                "Establish presentation standards for all menu items",
                "Source high-quality garnish ingredients",
                "Create presentation training materials",
                "Monitor customer feedback and social media mentions",
            )),
            ActionList("Long-term Strategy (Months 2-6)", (
                "Develop signature plating styles for the restaurant",
                "Regular presentation quality audits",
                "Advanced plating technique workshops",
                "Menu photography update for marketing materials",
            )),
        ),
    ),
)


ARABIC = ReportText(
    header=HeaderText(
        title="تقرير تحليل عرض الطعام",
        page="صفحة",
        of="من",
    ),
    executive_summary=ExecutiveSummaryText(
        title="الملخص التنفيذي",
        overall_performance="الأداء العام",
        key_findings="النتائج الرئيسية",
        business_impact="التأثير على الأعمال",
        rating="التقييم",
        excellent="ممتاز - يتجاوز معايير الصناعة",
        good="جيد - يلبي التوقعات مع مجال للتحسين",
        needs_improvement="يحتاج تحسين - أقل من معايير الصناعة",
        impact_statements=(
            "جودة العرض الحالية قد تؤثر على رضا العملاء وتكرار الأعمال.",
            "عرض الطعام يؤثر مباشرة على تصور العلامة التجارية وقابلية المشاركة على وسائل التواصل الاجتماعي.",
            "تحسين الجاذبية البصرية يمكن أن يميز عن المنافسين ويبرر التسعير المتميز.",
        ),
    ),
    detailed_analysis=DetailedAnalysisText(
        title="التحليل التفصيلي",
        categories="فئات الأداء",
        presentation="العرض",
        freshness="الطازجة",
        portion_size="حجم الحصة",
        color_balance="توازن الألوان",
        plating="التقديم",
    ),
    chef_recommendations=ChefRecommendationsText(
        title="توصيات الشيف",
        subtitle="تحسينات المطبخ الفورية",
        techniques="تقنيات التقديم",
        ingredients="تحسينات المكونات",
    ),
    ceo_insights=CeoInsightsText(
        title="رؤى الرئيس التنفيذي الاستراتيجية",
        blocks=(
            InsightBlock(
                "تحليل العائد على الاستثمار",
                "تحسين عرض الطعام يمكن أن يزيد رضا العملاء بنسبة 15-25% "
                "والمشاركة على وسائل التواصل الاجتماعي بنسبة 40%.",
            ),
            InsightBlock(
                "متطلبات تدريب الموظفين",
                "موظفو المطبخ يحتاجون 2-4 ساعات من تدريب تقنيات التقديم. "
                "التكلفة المقدرة: 200-400 دولار لكل شيف.",
            ),
            InsightBlock(
                "تكاليف التنفيذ",
                "الاستثمار الأولي في أدوات العرض والمكونات: 500-1,500 دولار. "
                "التكاليف الشهرية المستمرة: 200-500 دولار.",
            ),
            InsightBlock(
                "الجدول الزمني للتنفيذ",
                "التحسينات الفورية: 1-2 أسبوع. التنفيذ الكامل: 4-6 أسابيع. "
                "العائد على الاستثمار مرئي: 2-3 أشهر.",
            ),
            InsightBlock(
                "مؤشرات الأداء الرئيسية",
                "تتبع: درجات رضا العملاء، الإشارات على وسائل التواصل الاجتماعي، "
                "متوسط قيمة الطلب، معدل العملاء المتكررين.",
            ),
        ),
    ),
    action_plan=ActionPlanText(
        title="خطة العمل",
        phases=(
            ActionList("الإجراءات الفورية (الأسبوع الأول)", (
                "تدريب موظفي المطبخ على تقنيات التقديم الأساسية",
                "مراجعة مخزون الأطباق والزينة الحالي",
                "تنفيذ قائمة مراجعة مراقبة الجودة لعرض الطعام",
                "التقاط صور مرجعية للعروض المحسنة",
            )),
            ActionList("الأهداف قصيرة المدى (الأسابيع 2-4)", (
                "وضع معايير العرض لجميع عناصر القائمة",
                "الحصول على مكونات زينة عالية الجودة",
                "إنشاء مواد تدريبية للعرض",
                "مراقبة تعليقات العملاء والإشارات على وسائل التواصل الاجتماعي",
            )),
            ActionList("الاستراتيجية طويلة المدى (الشهور 2-6)", (
                "تطوير أساليب تقديم مميزة للمطعم",
                "عمليات تدقيق منتظمة لجودة العرض",
                "ورش عمل تقنيات التقديم المتقدمة",
                "تحديث تصوير القائمة للمواد التسويقية",
            )),
        ),
    ),
)


REPORT_TEXT: Dict[Language, ReportText] = {
    Language.EN: ENGLISH,
    Language.AR: ARABIC,
}


def get_report_text(language: Language) -> ReportText:
    return REPORT_TEXT[Language(language)]
