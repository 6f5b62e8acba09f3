"""
Report Export
=============
Turns an analysis into a named, downloadable PDF.

Each export renders from scratch with a fresh generator and writer; a failed
export leaves the analysis untouched and can simply be retried.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

from food_models import AnalysisRecord, Language, ReportRequest
from report_generator import FoodReportGenerator


logger = logging.getLogger("food-analysis.export")

DEFAULT_FILENAME_PREFIX = "restaurant"

_ARABIC_INDIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


class ReportExportError(Exception):
    """Raised when a report could not be rendered or saved."""


@dataclass(frozen=True)
class ExportedReport:
    filename: str
    content: bytes
    language: Language
    report_date: str
    page_count: int


def format_report_date(language: Language, today: Optional[date] = None) -> str:
    """Short locale date: 10/19/2026 for English, ١٩/١٠/٢٠٢٦ for Arabic."""
    today = today or date.today()
    if Language(language) is Language.AR:
        return f"{today.day}/{today.month}/{today.year}".translate(_ARABIC_INDIC_DIGITS)
    return f"{today.month}/{today.day}/{today.year}"


def build_report_filename(organization_name: Optional[str], timestamp_ms: int) -> str:
    return f"{organization_name or DEFAULT_FILENAME_PREFIX}-food-analysis-{timestamp_ms}.pdf"


def export_report(
    analysis: AnalysisRecord,
    language: Union[Language, str] = Language.EN,
    organization_name: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ExportedReport:
    """
    Render the full report for one analysis.

    Raises:
        ReportExportError: on any failure while building the document
    """
    now = now or datetime.now()
    try:
        lang = Language(language)
        request = ReportRequest(
            analysis=analysis,
            language=lang,
            organization_name=organization_name,
            report_date=format_report_date(lang, now.date()),
        )
        writer = FoodReportGenerator(lang).render(request)
    except Exception as e:
        logger.error(f"Report export failed for {analysis.id}: {e}")
        raise ReportExportError("Failed to generate report") from e

    exported = ExportedReport(
        filename=build_report_filename(organization_name, int(now.timestamp() * 1000)),
        content=writer.pdf_bytes,
        language=lang,
        report_date=request.report_date,
        page_count=writer.page_count,
    )
    logger.info(
        f"Exported {exported.filename} ({exported.page_count} pages, {len(exported.content)} bytes)"
    )
    return exported


def save_report(exported: ExportedReport, directory: Union[str, Path]) -> Path:
    """Write a finished report into ``directory``; nothing is left behind on failure."""
    target_dir = Path(directory)
    target = target_dir / exported.filename
    tmp_path = None
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, suffix=".part")
        with os.fdopen(fd, "wb") as f:
            f.write(exported.content)
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        logger.error(f"Saving {exported.filename} failed: {e}")
        raise ReportExportError("Failed to save report") from e

    logger.info(f"Saved report to {target}")
    return target


if __name__ == "__main__":
    import argparse

    import config
    from example_reports import EXAMPLE_REPORTS, get_example_report

    parser = argparse.ArgumentParser(description="Export food analysis PDF reports")
    parser.add_argument("examples", nargs="*", help="Example ids (default: all)")
    parser.add_argument("--language", choices=[lang.value for lang in Language], default="en")
    parser.add_argument("--name", dest="organization_name", default=None,
                        help="Restaurant name for the header and filename")
    parser.add_argument("--output-dir", default=config.REPORT_OUTPUT_DIR)
    args = parser.parse_args()

    config.setup_logging()
    analyses = [get_example_report(e) for e in args.examples] or EXAMPLE_REPORTS
    for analysis in analyses:
        exported = export_report(analysis, args.language, args.organization_name)
        path = save_report(exported, args.output_dir)
        print(f"Generated {path} ({len(exported.content)} bytes)")
