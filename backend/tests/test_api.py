"""
API tests for the checklist, audit session, and export endpoints.
"""
import csv
import io

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from seo_checklist.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def audit(client):
    response = client.post("/api/v1/audit", json={"url": "https://example.com", "brand_type": "general"})
    assert response.status_code == 200
    return response.json()


class TestChecklistEndpoints:
    """Catalogue and rating lookups."""

    def test_health(self, client):
        assert client.get("/api/v1/health").json() == {"status": "ok"}
        assert "active_sessions" in client.get("/api/v1/health/detailed").json()

    def test_general_checklist(self, client):
        response = client.get("/api/v1/checklist")
        assert response.status_code == 200

        data = response.json()
        assert data["brand_type"] == "general"
        assert [c["id"] for c in data["categories"]] == [
            "authority", "on-page", "technical", "eeat", "social-search", "ai-search", "performance",
        ]
        first_check = data["categories"][0]["checks"][0]
        assert first_check["id"] == "dr-growth"
        assert first_check["importance"] == "critical"
        assert data["categories"][0]["weight"] == 20

    def test_brand_specific_categories_come_first(self, client):
        data = client.get("/api/v1/checklist", params={"brand_type": "local"}).json()
        assert [c["id"] for c in data["categories"]][:3] == ["local-gbp", "local-landing", "authority"]

    def test_unknown_brand_type_is_rejected(self, client):
        assert client.get("/api/v1/checklist", params={"brand_type": "saas"}).status_code == 422

    def test_rating(self, client):
        assert client.get("/api/v1/rating/80").json() == {
            "label": "Excellent",
            "color_role": "success",
            "background_role": "success-light",
        }
        assert client.get("/api/v1/rating/39").json()["label"] == "Poor"
        assert client.get("/api/v1/rating/101").status_code == 422


class TestAuditEndpoints:
    """Wizard state and scoring through the API."""

    def test_start_audit(self, audit):
        assert audit["url"] == "https://example.com"
        assert audit["current_step"] == 0
        assert audit["step_count"] == 7
        assert audit["current_category"] == "authority"
        assert audit["statuses"] == {}
        assert audit["scores"]["overall"] is None
        assert audit["scores"]["total_checks"] == 86

    def test_blank_url_is_rejected(self, client):
        assert client.post("/api/v1/audit", json={"url": "   "}).status_code == 400

    def test_unknown_audit(self, client):
        assert client.get("/api/v1/audit/does-not-exist").status_code == 404
        assert client.delete("/api/v1/audit/does-not-exist").status_code == 404

    def test_answer_checks(self, client, audit):
        base = f"/api/v1/audit/{audit['id']}"

        data = client.put(f"{base}/checks/dr-growth", json={"status": "pass", "note": " looks good "}).json()
        assert data["statuses"] == {"dr-growth": "pass"}
        assert data["notes"] == {"dr-growth": "looks good"}
        assert data["scores"]["overall"] == 100

        data = client.put(f"{base}/checks/spam-score", json={"status": "fail"}).json()
        # critical pass (4) / (4 + 2)
        assert data["scores"]["categories"][0]["score"] == 67
        assert data["scores"]["overall"] == 67
        assert data["scores"]["rating"]["label"] == "Good"
        assert data["scores"]["failed_by_priority"]["medium"] == 1

        data = client.put(f"{base}/checks/spam-score", json={"status": "unanswered"}).json()
        assert data["statuses"] == {"dr-growth": "pass"}
        assert data["scores"]["overall"] == 100

    def test_omitted_status_is_kept(self, client, audit):
        url = f"/api/v1/audit/{audit['id']}/checks/dr-growth"
        client.put(url, json={"status": "fail"})

        data = client.put(url, json={"note": "Checked in Ahrefs"}).json()
        assert data["statuses"] == {"dr-growth": "fail"}
        assert data["notes"] == {"dr-growth": "Checked in Ahrefs"}

        data = client.put(url, json={"link": ""}).json()
        assert data["statuses"] == {"dr-growth": "fail"}

        data = client.put(url, json={"status": None}).json()
        assert data["statuses"] == {}
        assert data["notes"] == {"dr-growth": "Checked in Ahrefs"}

    def test_empty_update_of_unknown_check(self, client, audit):
        response = client.put(f"/api/v1/audit/{audit['id']}/checks/not-a-check", json={})
        assert response.status_code == 404

    def test_check_outside_variant(self, client, audit):
        response = client.put(f"/api/v1/audit/{audit['id']}/checks/gbp-verified", json={"status": "pass"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Check gbp-verified is not part of this audit"}

        toggle = client.post(f"/api/v1/audit/{audit['id']}/checks/gbp-verified/toggle", json={"status": "pass"})
        assert toggle.status_code == 404

    def test_toggle(self, client, audit):
        url = f"/api/v1/audit/{audit['id']}/checks/dr-growth/toggle"

        assert client.post(url, json={"status": "fail"}).json()["statuses"] == {"dr-growth": "fail"}
        assert client.post(url, json={"status": "pass"}).json()["statuses"] == {"dr-growth": "pass"}
        assert client.post(url, json={"status": "pass"}).json()["statuses"] == {}

    def test_navigation(self, client, audit):
        base = f"/api/v1/audit/{audit['id']}"

        assert client.post(f"{base}/back").json()["current_step"] == 0
        for _ in range(10):
            data = client.post(f"{base}/next").json()
        assert data["current_step"] == 7
        assert data["is_results_screen"]
        assert data["current_category"] is None

        assert client.post(f"{base}/back").json()["current_category"] == "performance"

    def test_switch_brand_type(self, client, audit):
        base = f"/api/v1/audit/{audit['id']}"
        client.put(f"{base}/checks/dr-growth", json={"status": "pass"})

        data = client.patch(base, json={"brand_type": "ecommerce"}).json()
        assert data["brand_type"] == "ecommerce"
        assert data["step_count"] == 9
        assert data["current_category"] == "ecommerce-collection"
        assert data["statuses"] == {"dr-growth": "pass"}
        assert data["scores"]["overall"] == 100

    def test_results(self, client, audit):
        base = f"/api/v1/audit/{audit['id']}"
        client.put(f"{base}/checks/dr-growth", json={"status": "fail"})

        data = client.get(f"{base}/results").json()
        assert data["overall"] == 0
        assert data["rating"]["label"] == "Poor"
        assert data["answered"] == 1
        assert data["scoring_version"] == "1.0"

    def test_delete(self, client, audit):
        base = f"/api/v1/audit/{audit['id']}"
        assert client.delete(base).status_code == 204
        assert client.get(base).status_code == 404


class TestExportEndpoints:
    """File downloads."""

    def test_csv_export(self, client, audit):
        base = f"/api/v1/audit/{audit['id']}"
        client.put(f"{base}/checks/dr-growth", json={"status": "pass", "link": "https://ahrefs.com/report"})

        response = client.get(f"{base}/export/csv")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")

        disposition = response.headers["content-disposition"]
        assert disposition.startswith("attachment; filename=seo-audit-example-com-")
        assert disposition.endswith(".csv")

        parsed = list(csv.reader(io.StringIO(response.text)))
        assert parsed[0] == ["Category", "Priority", "Check Name", "Description", "Status", "Notes", "Link"]
        assert parsed[1][4] == "Pass"
        assert parsed[1][6] == "https://ahrefs.com/report"
        assert len(parsed) == 87

    def test_xlsx_export(self, client, audit):
        response = client.get(f"/api/v1/audit/{audit['id']}/export/xlsx")
        assert response.status_code == 200
        assert response.headers["content-disposition"].endswith(".xlsx")

        workbook = load_workbook(io.BytesIO(response.content))
        assert workbook.sheetnames == ["Summary", "Critical", "High", "Medium", "Low"]

    def test_pdf_export(self, client, audit):
        try:
            import weasyprint  # noqa: F401
        except (ImportError, OSError):
            pytest.skip("WeasyPrint or its native libraries are not installed")

        base = f"/api/v1/audit/{audit['id']}"
        client.put(f"{base}/checks/dr-growth", json={"status": "fail", "note": "Flat for 18 months"})

        response = client.get(f"{base}/export/pdf")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"].endswith(".pdf")
        assert response.content.startswith(b"%PDF")

    def test_unsupported_format(self, client, audit):
        assert client.get(f"/api/v1/audit/{audit['id']}/export/docx").status_code == 400


class TestAnalyzeEndpoint:
    """Input validation for the page analyzer."""

    def test_blank_url_is_rejected(self, client):
        assert client.post("/api/v1/analyze", json={"url": " "}).status_code == 400

    def test_missing_url_is_rejected(self, client):
        assert client.post("/api/v1/analyze", json={}).status_code == 422
