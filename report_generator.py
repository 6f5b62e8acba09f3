"""
Food Presentation Report Generator
==================================
Composes the bilingual PDF report for a food analysis.

Document structure:
- Header: title, restaurant name, report date (page 1)
- EXECUTIVE SUMMARY: overall rating and tier, key findings, business impact
- DETAILED ANALYSIS (new page): one rating box per category
- CHEF RECOMMENDATIONS: plating techniques and ingredient enhancements
- CEO STRATEGIC INSIGHTS (new page): ROI, training, costs, timeline, KPIs
- ACTION PLAN: immediate, short-term and long-term actions
- Footer: "Page X of N" on every page, stamped after all content is placed
"""

import logging
from typing import Optional

from document_writer import DocumentWriter
from food_models import (
    AnalysisRecord,
    Language,
    ReportRequest,
    format_score,
    rating_tier,
)
from report_text import ReportText, get_report_text


logger = logging.getLogger("food-analysis.report")

DEFAULT_ORGANIZATION_NAME = "Restaurant"

# Header layout (mm from the top of page 1)
HEADER_TITLE_Y = 30
HEADER_NAME_Y = 40
HEADER_DATE_Y = 50
CONTENT_START_Y = 70

# Key findings take at most this many items from each list
KEY_FINDINGS_PER_LIST = 2
PLATING_TECHNIQUES = slice(0, 3)
INGREDIENT_ENHANCEMENTS = slice(3, 5)


class FoodReportGenerator:
    """
    Generates the food presentation PDF report.

    Section builders receive the writer explicitly and read only the
    analysis record and the language's text table, so rendering the same
    request twice produces the same document content.
    """

    def __init__(self, language: Language = Language.EN):
        self.language = Language(language)
        self.text: ReportText = get_report_text(self.language)

    def render(self, request: ReportRequest) -> DocumentWriter:
        """Render a request into a finished writer (PDF bytes plus draw log)."""
        if request.language != self.language:
            return FoodReportGenerator(request.language).render(request)

        writer = DocumentWriter(language=self.language)
        analysis = request.analysis

        self._build_header(writer, request.organization_name, request.report_date)

        self._build_executive_summary(writer, analysis)
        writer.add_new_page()
        self._build_detailed_analysis(writer, analysis)
        self._build_chef_recommendations(writer, analysis)
        writer.add_new_page()
        self._build_ceo_insights(writer)
        self._build_action_plan(writer)

        writer.finish(self.text.header.footer)
        logger.debug(f"Rendered {analysis.id} ({self.language.value}): {writer.page_count} pages")
        return writer

    def generate_report(self, request: ReportRequest) -> bytes:
        """
        Generate a PDF report.

        Args:
            request: Analysis record, language, optional restaurant name and date

        Returns:
            PDF content as bytes
        """
        return self.render(request).pdf_bytes

    def _build_header(self, writer: DocumentWriter, organization_name: Optional[str],
                      report_date: str):
        """Build report header block on page 1."""
        writer.add_centered_text(self.text.header.title, HEADER_TITLE_Y, 24, bold=True)
        writer.add_centered_text(organization_name or DEFAULT_ORGANIZATION_NAME, HEADER_NAME_Y, 14)
        writer.add_centered_text(report_date, HEADER_DATE_Y, 14)
        writer.set_cursor(CONTENT_START_Y)

    def _build_executive_summary(self, writer: DocumentWriter, analysis: AnalysisRecord):
        """Build executive summary section."""
        text = self.text.executive_summary

        writer.add_title(text.title)
        writer.add_spacing(5)

        writer.add_subtitle(text.overall_performance)
        label = text.tier_label(rating_tier(analysis.overall_rating))
        writer.add_text(f"{text.rating}: {format_score(analysis.overall_rating)}/10 - {label}")
        writer.add_spacing(5)

        writer.add_subtitle(text.key_findings)
        strengths = analysis.strengths.for_language(self.language)
        improvements = analysis.improvements.for_language(self.language)
        for strength in strengths[:KEY_FINDINGS_PER_LIST]:
            writer.add_bullet_point(strength)
        for improvement in improvements[:KEY_FINDINGS_PER_LIST]:
            writer.add_bullet_point(improvement)
        writer.add_spacing(5)

        writer.add_subtitle(text.business_impact)
        for statement in text.impact_statements:
            writer.add_bullet_point(statement)
        writer.add_spacing(10)

    def _build_detailed_analysis(self, writer: DocumentWriter, analysis: AnalysisRecord):
        """Build category rating boxes."""
        text = self.text.detailed_analysis

        writer.add_title(text.title)
        writer.add_subtitle(text.categories)

        writer.add_rating_row(
            [(text.category_label(key), value) for key, value in analysis.categories.ordered()],
            box_width=30,
            spacing=35,
            advance=40,
        )

    def _build_chef_recommendations(self, writer: DocumentWriter, analysis: AnalysisRecord):
        """Build chef recommendations, split by position into two groups."""
        text = self.text.chef_recommendations

        writer.add_title(text.title)
        writer.add_subtitle(text.subtitle)

        recommendations = analysis.recommendations.for_language(self.language)

        writer.add_subtitle(text.techniques, 12)
        for recommendation in recommendations[PLATING_TECHNIQUES]:
            writer.add_bullet_point(recommendation)

        writer.add_subtitle(text.ingredients, 12)
        for recommendation in recommendations[INGREDIENT_ENHANCEMENTS]:
            writer.add_bullet_point(recommendation)

        writer.add_spacing(5)

    def _build_ceo_insights(self, writer: DocumentWriter):
        """Build CEO strategic insights (static guidance, not per-analysis)."""
        text = self.text.ceo_insights

        writer.add_title(text.title)
        last = len(text.blocks) - 1
        for index, block in enumerate(text.blocks):
            writer.add_subtitle(block.heading, 12)
            writer.add_text(block.body)
            writer.add_spacing(5 if index == last else 3)

    def _build_action_plan(self, writer: DocumentWriter):
        """Build three-phase action plan."""
        text = self.text.action_plan

        writer.add_title(text.title)
        last = len(text.phases) - 1
        for index, phase in enumerate(text.phases):
            writer.add_subtitle(phase.heading, 12)
            for action in phase.actions:
                writer.add_bullet_point(action)
            if index != last:
                writer.add_spacing(3)


# Convenience function for generating reports
def generate_analysis_report(
    analysis: AnalysisRecord,
    language: str = "en",
    organization_name: Optional[str] = None,
    report_date: str = ""
) -> bytes:
    """
    Generate a PDF report for a food analysis.

    Args:
        analysis: Analysis record to report on
        language: 'en' or 'ar'
        organization_name: Restaurant name for the header
        report_date: Display date for the header

    Returns:
        PDF bytes
    """
    lang = Language(language.lower())
    request = ReportRequest(
        analysis=analysis,
        language=lang,
        organization_name=organization_name,
        report_date=report_date,
    )
    return FoodReportGenerator(lang).generate_report(request)
