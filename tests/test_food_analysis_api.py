"""
Tests for the HTTP API
"""

import httpx
import pytest
from fastapi.testclient import TestClient

import food_analysis_api
import report_export
from vision_client import VisionClient

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(food_analysis_api, "vision_client", VisionClient(api_key=""))
    monkeypatch.setattr(food_analysis_api, "completed_analyses", {})
    return TestClient(food_analysis_api.app)


def test_root_reports_mock_mode(client):
    body = client.get("/").json()
    assert body["ai_status"] == "mock"
    assert body["examples"] == 5
    assert body["languages"] == ["en", "ar"]


class TestExamples:

    def test_list(self, client):
        examples = client.get("/api/examples").json()
        assert len(examples) == 5
        assert {"id", "imageName", "imageUrl", "overallRating"} <= set(examples[0])

    def test_detail(self, client):
        body = client.get("/api/examples/example-4").json()
        assert body["overallRating"] == 9.3
        assert body["categories"]["colorBalance"] == 9.8

    def test_unknown_example(self, client):
        assert client.get("/api/examples/example-99").status_code == 404


class TestAnalyze:

    def test_mock_analysis_without_api_key(self, client):
        resp = client.post("/api/analyze", files={"file": ("dish.png", PNG, "image/png")})
        assert resp.status_code == 200
        body = resp.json()
        assert body["source"] == "mock"
        assert "error" not in body

        analysis_id = body["analysis"]["id"]
        stored = client.get(f"/api/analysis/{analysis_id}").json()
        assert stored["imageName"] == "dish.png"
        assert stored["imageUrl"].startswith("data:image/png;base64,")

    def test_model_failure_falls_back_to_mock(self, client, monkeypatch):
        failing = VisionClient(
            api_key="sk-test",
            transport=httpx.MockTransport(lambda request: httpx.Response(503)),
        )
        monkeypatch.setattr(food_analysis_api, "vision_client", failing)

        body = client.post("/api/analyze", files={"file": ("dish.png", PNG, "image/png")}).json()
        assert body["source"] == "mock"
        assert "503" in body["error"]

    def test_rejects_non_image(self, client):
        resp = client.post("/api/analyze", files={"file": ("notes.txt", b"hello", "text/plain")})
        assert resp.status_code == 400

    def test_rejects_empty_upload(self, client):
        resp = client.post("/api/analyze", files={"file": ("dish.png", b"", "image/png")})
        assert resp.status_code == 400

    def test_unknown_analysis(self, client):
        assert client.get("/api/analysis/analysis-0").status_code == 404


class TestReports:

    def test_example_report_download(self, client):
        resp = client.get("/api/report/example-4", params={"organization_name": "Bistro X"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.headers["x-report-language"] == "en"
        assert int(resp.headers["x-report-pages"]) >= 3
        disposition = resp.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="Bistro X-food-analysis-')
        assert resp.content.startswith(b"%PDF")

    def test_arabic_name_survives_header(self, client):
        resp = client.get("/api/report/example-1",
                          params={"language": "ar", "organization_name": "مطعم"})
        assert resp.status_code == 200
        assert "filename*=UTF-8''%D9%85%D8%B7%D8%B9%D9%85-food-analysis-" in resp.headers["content-disposition"]

    def test_line_breaks_in_name_are_dropped_from_header(self, client):
        resp = client.get("/api/report/example-1",
                          params={"organization_name": "Bistro\r\nX"})
        assert resp.status_code == 200
        disposition = resp.headers["content-disposition"]
        assert "\r" not in disposition and "\n" not in disposition
        assert disposition.startswith('attachment; filename="BistroX-food-analysis-')
        assert "filename*=UTF-8''Bistro%0D%0AX-food-analysis-" in disposition

    def test_report_for_uploaded_analysis(self, client):
        body = client.post("/api/analyze", files={"file": ("dish.png", PNG, "image/png")}).json()
        resp = client.get(f"/api/report/{body['analysis']['id']}")
        assert resp.status_code == 200
        assert 'filename="restaurant-food-analysis-' in resp.headers["content-disposition"]

    def test_posted_analysis(self, client):
        analysis = client.get("/api/examples/example-5").json()
        resp = client.post("/api/report", json={
            "analysis": analysis,
            "language": "ar",
            "organizationName": "Bistro X",
        })
        assert resp.status_code == 200
        assert resp.headers["x-report-language"] == "ar"

    def test_unknown_analysis(self, client):
        assert client.get("/api/report/missing").status_code == 404

    def test_unsupported_language(self, client):
        assert client.get("/api/report/example-1", params={"language": "fr"}).status_code == 422

    def test_export_failure_is_500(self, client, monkeypatch):
        def fail(*args, **kwargs):
            raise report_export.ReportExportError("Failed to generate report")

        monkeypatch.setattr(food_analysis_api, "export_report", fail)
        resp = client.get("/api/report/example-1")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to generate report"
