"""
Vision Model Client
===================
Sends a food photograph to an OpenAI-compatible vision model and turns the
structured JSON reply into an AnalysisRecord.
"""

import base64
import json
import logging
import re
import time
from datetime import date
from typing import Any, Dict, Optional

import httpx

import config
from food_models import AnalysisRecord


logger = logging.getLogger("food-analysis.vision")

PLACEHOLDER_API_KEY = "your_openai_api_key_here"

CATEGORY_WIRE_KEYS = ("presentation", "freshness", "portionSize", "colorBalance", "plating")

ANALYSIS_PROMPT = """You are a professional food critic and restaurant consultant with expertise in culinary presentation, food quality assessment, and restaurant operations. Analyze this food image and provide a comprehensive evaluation.

Please provide your analysis in the following JSON format:

{
  "overallRating": [number between 1-10],
  "categories": {
    "presentation": [number between 1-10],
    "freshness": [number between 1-10],
    "portionSize": [number between 1-10],
    "colorBalance": [number between 1-10],
    "plating": [number between 1-10]
  },
  "strengths": {
    "english": [array of 3-5 specific strengths],
    "arabic": [array of 3-5 specific strengths in Arabic]
  },
  "improvements": {
    "english": [array of 3-5 specific areas for improvement],
    "arabic": [array of 3-5 specific areas for improvement in Arabic]
  },
  "recommendations": {
    "english": [array of 4-6 actionable recommendations for chefs],
    "arabic": [array of 4-6 actionable recommendations in Arabic]
  }
}

Focus on:
- Visual presentation and plating technique
- Color balance and contrast
- Portion size appropriateness
- Apparent freshness of ingredients
- Professional kitchen standards
- Actionable improvements for restaurant staff

Provide specific, constructive feedback that restaurant owners and chefs can implement immediately."""


class VisionAnalysisError(Exception):
    """Raised when an image could not be analyzed by the vision model."""


def sanitize_error(error_msg: str) -> str:
    """Remove any API keys or sensitive data from error messages."""
    patterns = [
        r'sk-[a-zA-Z0-9_-]{20,}',  # OpenAI keys
        r'Bearer [a-zA-Z0-9_-]{20,}',  # Bearer tokens
    ]
    result = str(error_msg)
    for pattern in patterns:
        result = re.sub(pattern, '[REDACTED]', result, flags=re.IGNORECASE)
    return result


def image_data_url(content: bytes, content_type: str) -> str:
    """Inline an uploaded image as a data URL the model can read."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


def parse_analysis_response(content: str, image_name: str, image_url: str) -> AnalysisRecord:
    """Extract the JSON object from a model reply and build the record."""
    match = re.search(r'\{[\s\S]*\}', content or "")
    if not match:
        raise VisionAnalysisError("Invalid response format from vision model")

    try:
        data: Dict[str, Any] = json.loads(match.group(0))
        ratings = {key: round(float(data["categories"][key]), 1) for key in CATEGORY_WIRE_KEYS}
        return AnalysisRecord.model_validate({
            "id": f"analysis-{int(time.time() * 1000)}",
            "imageName": image_name,
            "imageUrl": image_url,
            "overallRating": round(float(data["overallRating"]), 1),
            "analysisDate": date.today().isoformat(),
            "categories": ratings,
            "strengths": data.get("strengths"),
            "improvements": data.get("improvements"),
            "recommendations": data.get("recommendations"),
        })
    except (KeyError, TypeError, ValueError) as e:
        raise VisionAnalysisError(f"Unexpected analysis format: {e}") from e


class VisionClient:
    """OpenAI chat-completions client for food image analysis."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = config.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or config.OPENAI_MODEL
        self.base_url = (base_url or config.OPENAI_BASE_URL).rstrip("/")
        self.timeout = timeout or config.OPENAI_TIMEOUT
        self._transport = transport

    def is_ready(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    async def analyze_food_image(self, image_url: str, image_name: str) -> AnalysisRecord:
        """Analyze one image; raises VisionAnalysisError on any failure."""
        if not self.is_ready():
            raise VisionAnalysisError("OpenAI API key not configured")

        payload = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": ANALYSIS_PROMPT},
                        {"type": "image_url", "image_url": {"url": image_url, "detail": "high"}},
                    ],
                }
            ],
            "max_tokens": 2000,
            "temperature": 0.7,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json"
                    },
                    json=payload
                )
            except httpx.HTTPError as e:
                message = sanitize_error(str(e))
                logger.error(f"Vision request failed: {message}")
                raise VisionAnalysisError(f"Failed to analyze image: {message}") from e

        if resp.status_code != 200:
            logger.error(f"Vision API error: {resp.status_code}")
            raise VisionAnalysisError(f"Failed to analyze image: API error {resp.status_code}")

        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            content = None
        if not content:
            raise VisionAnalysisError("No response from vision model")

        return parse_analysis_response(content, image_name, image_url)
