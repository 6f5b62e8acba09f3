"""
Tests for the vision model client
"""

import json

import httpx
import pytest

from vision_client import (
    PLACEHOLDER_API_KEY,
    VisionAnalysisError,
    VisionClient,
    image_data_url,
    parse_analysis_response,
    sanitize_error,
)

MODEL_REPLY = {
    "overallRating": 8.76,
    "categories": {
        "presentation": 9.04,
        "freshness": 8.5,
        "portionSize": 7,
        "colorBalance": 8.25,
        "plating": 9,
    },
    "strengths": {"english": ["Glossy glaze"], "arabic": ["لمعان جميل"]},
    "improvements": {"english": ["Wipe the rim"], "arabic": ["امسح الحافة"]},
    "recommendations": {"english": ["Add microgreens"], "arabic": ["أضف خضروات صغيرة"]},
}


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def client_for(handler, api_key="sk-test"):
    return VisionClient(api_key=api_key, base_url="https://vision.test/v1",
                        transport=httpx.MockTransport(handler))


class TestParseResponse:

    def test_json_inside_prose(self):
        content = "Here is my analysis:\n" + json.dumps(MODEL_REPLY) + "\nEnjoy!"
        analysis = parse_analysis_response(content, "salmon.jpg", "https://x/salmon.jpg")

        assert analysis.id.startswith("analysis-")
        assert analysis.image_name == "salmon.jpg"
        assert analysis.overall_rating == 8.8
        assert analysis.categories.presentation == 9.0
        assert analysis.categories.color_balance == 8.2
        assert analysis.categories.portion_size == 7.0
        assert list(analysis.strengths.arabic) == ["لمعان جميل"]

    def test_missing_lists_are_empty(self):
        reply = {"overallRating": 7, "categories": MODEL_REPLY["categories"]}
        analysis = parse_analysis_response(json.dumps(reply), "a.jpg", "")
        assert analysis.recommendations.english == ()

    @pytest.mark.parametrize("content", [
        "I cannot rate this image.",
        "",
        '{"overallRating": 8}',
        '{"overallRating": "high", "categories": {}}',
        "{not json}",
    ])
    def test_malformed_replies(self, content):
        with pytest.raises(VisionAnalysisError):
            parse_analysis_response(content, "a.jpg", "")


def test_sanitize_error_redacts_keys():
    message = "401 for sk-abcdefghijklmnopqrstuvwxyz0123 with Bearer abcdefghijklmnopqrstuvwxyz"
    cleaned = sanitize_error(message)
    assert "sk-abc" not in cleaned
    assert "Bearer abc" not in cleaned
    assert cleaned.count("[REDACTED]") == 2


def test_image_data_url():
    assert image_data_url(b"\x89PNG", "image/png") == "data:image/png;base64,iVBORw=="


@pytest.mark.parametrize("key,ready", [
    ("sk-test", True),
    ("", False),
    (PLACEHOLDER_API_KEY, False),
])
def test_is_ready(key, ready):
    assert VisionClient(api_key=key).is_ready() is ready


class TestAnalyzeFoodImage:

    @pytest.mark.asyncio
    async def test_successful_analysis(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion(json.dumps(MODEL_REPLY)))

        client = client_for(handler)
        analysis = await client.analyze_food_image("data:image/png;base64,AA==", "dish.png")

        assert seen["url"] == "https://vision.test/v1/chat/completions"
        assert seen["auth"] == "Bearer sk-test"
        parts = seen["body"]["messages"][0]["content"]
        assert parts[1]["image_url"]["url"] == "data:image/png;base64,AA=="
        assert analysis.overall_rating == 8.8
        assert analysis.image_name == "dish.png"

    @pytest.mark.asyncio
    async def test_api_error_status(self):
        client = client_for(lambda request: httpx.Response(500, json={"error": "boom"}))
        with pytest.raises(VisionAnalysisError, match="API error 500"):
            await client.analyze_food_image("url", "dish.png")

    @pytest.mark.asyncio
    async def test_empty_reply(self):
        client = client_for(lambda request: httpx.Response(200, json={"choices": []}))
        with pytest.raises(VisionAnalysisError, match="No response"):
            await client.analyze_food_image("url", "dish.png")

    @pytest.mark.asyncio
    async def test_transport_error_is_sanitized(self):
        def handler(request):
            raise httpx.ConnectError("refused for sk-abcdefghijklmnopqrstuvwxyz", request=request)

        client = client_for(handler)
        with pytest.raises(VisionAnalysisError) as excinfo:
            await client.analyze_food_image("url", "dish.png")
        assert "sk-abc" not in str(excinfo.value)

    @pytest.mark.asyncio
    async def test_not_configured(self):
        def handler(request):
            raise AssertionError("no request expected")

        client = client_for(handler, api_key="")
        with pytest.raises(VisionAnalysisError, match="not configured"):
            await client.analyze_food_image("url", "dish.png")
