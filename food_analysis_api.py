#!/usr/bin/env python3
"""
FOOD PRESENTATION ANALYSIS API
==============================
AI food-photo quality assessment with bilingual PDF reports

Features:
- Upload a dish photo for vision-model analysis (mock fallback)
- 5 bundled example analyses
- Executive / chef / CEO report as PDF download (English or Arabic)

Endpoints:
    GET  /                              - API info and status
    GET  /api/examples                  - List example analyses
    GET  /api/examples/{id}             - Get one example analysis
    POST /api/analyze                   - Analyze an uploaded image
    GET  /api/analysis/{id}             - Get a completed analysis
    POST /api/report                    - PDF report for a posted analysis
    GET  /api/report/{id}               - PDF report for a stored analysis
"""

import logging
from typing import Dict, Optional
from urllib.parse import quote

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

import config
from example_reports import EXAMPLE_REPORTS, get_example_report
from food_models import AnalysisRecord, Language
from mock_analysis import generate_mock_analysis
from report_export import ExportedReport, ReportExportError, export_report
from vision_client import VisionAnalysisError, VisionClient, image_data_url, sanitize_error

# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

config.setup_logging()
logger = logging.getLogger("food-analysis.api")

API_VERSION = "1.0.0"

vision_client = VisionClient()

# In-memory cache for completed analyses (for report generation)
completed_analyses: Dict[str, AnalysisRecord] = {}

# ═══════════════════════════════════════════════════════════════════════════════
# PYDANTIC MODELS
# ═══════════════════════════════════════════════════════════════════════════════


class ReportCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    analysis: AnalysisRecord
    language: Language = Language.EN
    organization_name: Optional[str] = Field(default=None, alias="organizationName")


# ═══════════════════════════════════════════════════════════════════════════════
# FASTAPI APP
# ═══════════════════════════════════════════════════════════════════════════════

app = FastAPI(title="Food Presentation Analysis", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _content_disposition(filename: str) -> str:
    """Attachment header that survives non-ASCII restaurant names."""
    printable = "".join(ch for ch in filename if ch.isprintable())
    fallback = printable.encode("ascii", "replace").decode("ascii").replace('"', "'")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _pdf_response(exported: ExportedReport) -> Response:
    return Response(
        content=exported.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": _content_disposition(exported.filename),
            "X-Report-Language": exported.language.value,
            "X-Report-Pages": str(exported.page_count),
        }
    )


def _export(analysis: AnalysisRecord, language: Language,
            organization_name: Optional[str]) -> Response:
    try:
        exported = export_report(analysis, language, organization_name)
    except ReportExportError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _pdf_response(exported)


@app.get("/")
async def root():
    """API info and status."""
    return {
        "service": "Food Presentation Analysis",
        "version": API_VERSION,
        "ai_status": "configured" if vision_client.is_ready() else "mock",
        "model": vision_client.model,
        "examples": len(EXAMPLE_REPORTS),
        "languages": [lang.value for lang in Language],
    }


@app.get("/api/examples")
async def list_examples():
    """List bundled example analyses."""
    return [
        {
            "id": example.id,
            "imageName": example.image_name,
            "imageUrl": example.image_url,
            "overallRating": example.overall_rating,
        }
        for example in EXAMPLE_REPORTS
    ]


@app.get("/api/examples/{example_id}")
async def get_example(example_id: str):
    """Get full details of an example analysis."""
    try:
        return get_example_report(example_id).to_wire()
    except KeyError:
        raise HTTPException(status_code=404, detail="Example not found")


@app.post("/api/analyze")
async def analyze_image(file: UploadFile = File(...)):
    """
    Analyze an uploaded food photo.

    Uses the vision model when an API key is configured; otherwise, or when
    the model call fails, a mock analysis is returned instead.
    """
    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Upload must be an image")

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded image is empty")

    image_name = file.filename or "upload"
    image_url = image_data_url(content, content_type)
    source = "mock"
    error = None

    if vision_client.is_ready():
        try:
            analysis = await vision_client.analyze_food_image(image_url, image_name)
            source = "ai"
        except VisionAnalysisError as e:
            error = sanitize_error(str(e))
            logger.warning(f"Vision analysis failed, using mock analysis: {error}")
            analysis = generate_mock_analysis(image_name, image_url)
    else:
        analysis = generate_mock_analysis(image_name, image_url)

    completed_analyses[analysis.id] = analysis
    logger.info(f"Analyzed {image_name} ({source}): {analysis.overall_rating}/10")

    result = {"source": source, "analysis": analysis.to_wire()}
    if error:
        result["error"] = error
    return result


@app.get("/api/analysis/{analysis_id}")
async def get_analysis(analysis_id: str):
    """Get a completed analysis."""
    if analysis_id not in completed_analyses:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return completed_analyses[analysis_id].to_wire()


@app.post("/api/report")
async def create_report(report: ReportCreate):
    """
    Generate a PDF report for a posted analysis.

    Returns: PDF file download
    """
    return _export(report.analysis, report.language, report.organization_name)


@app.get("/api/report/{analysis_id}")
async def generate_report(
    analysis_id: str,
    language: Language = Query(Language.EN),
    organization_name: Optional[str] = Query(None),
):
    """
    Generate a PDF report for a completed analysis or a bundled example.

    Returns: PDF file download
    """
    analysis = completed_analyses.get(analysis_id)
    if analysis is None:
        try:
            analysis = get_example_report(analysis_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="Analysis not found")

    return _export(analysis, language, organization_name)


if __name__ == "__main__":
    import uvicorn
    print("\n" + "="*60)
    print("FOOD PRESENTATION ANALYSIS API")
    print("="*60)
    print(f"\nVision model: {'[OK] Configured' if vision_client.is_ready() else '[X] Set OPENAI_API_KEY (mock analysis in use)'}")
    print(f"\nStarting server on http://localhost:{config.API_PORT}")
    print("="*60 + "\n")
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
