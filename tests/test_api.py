"""Tests for the HTTP adapter."""

import io

from PIL import Image

from tests.conftest import make_image


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestLayouts:
    def test_retrieve(self, client):
        response = client.post("/api/layouts/retrieve", json={"prompt": "weekly bullet journal for tasks"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["layouts"][0]["name"] == "Bullet Journal Weekly Spread"
        assert data["layouts"][0]["metadata"]["source"] == "RAG Database"
        assert len(data["suggestions"]) <= 3

    def test_blank_prompt(self, client):
        response = client.post("/api/layouts/retrieve", json={"prompt": "  "})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Prompt is required"}

    def test_unknown_category(self, client):
        response = client.post("/api/layouts/retrieve", json={"prompt": "notes", "category": "cooking"})
        assert response.status_code == 400

    def test_without_editable_elements(self, client):
        response = client.post("/api/layouts/retrieve", json={"prompt": "mood journal", "editable": False})
        assert all(l["editable_elements"] == [] for l in response.json()["layouts"])


class TestPatterns:
    def test_list(self, client):
        data = client.get("/api/patterns").json()
        assert data["count"] == 8

    def test_filter_by_category(self, client):
        data = client.get("/api/patterns", params={"category": "business"}).json()
        assert [p["id"] for p in data["patterns"]] == ["meeting-notes-template"]

    def test_unknown_category(self, client):
        assert client.get("/api/patterns", params={"category": "cooking"}).status_code == 400

    def test_stats(self, client):
        assert client.get("/api/patterns/stats").json()["stats"]["total_patterns"] == 8

    def test_get(self, client):
        data = client.get("/api/patterns/mind-map-template").json()
        assert data["pattern"]["category"] == "study"

    def test_missing(self, client):
        assert client.get("/api/patterns/nope").status_code == 404


class TestOverlays:
    def test_render(self, client):
        response = client.post(
            "/api/overlays/render",
            files={"file": ("page.png", make_image((120, 90)), "image/png")},
            data={"algorithm": "grid", "line_spacing": "wide", "overlay_opacity": "0.5"},
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert Image.open(io.BytesIO(response.content)).size == (120, 90)

    def test_unsupported_media(self, client):
        response = client.post(
            "/api/overlays/render",
            files={"file": ("page.pdf", b"%PDF-1.7", "application/pdf")},
            data={"algorithm": "ruled"},
        )
        assert response.status_code == 415
        assert response.json()["success"] is False

    def test_invalid_opacity(self, client):
        response = client.post(
            "/api/overlays/render",
            files={"file": ("page.png", make_image((20, 20)), "image/png")},
            data={"algorithm": "ruled", "overlay_opacity": "1.5"},
        )
        assert response.status_code == 422

    def test_upload_over_limit(self, client, monkeypatch):
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "100")
        monkeypatch.setattr("web.backend.api.overlays.UPLOAD_CHUNK_BYTES", 32)
        response = client.post(
            "/api/overlays/render",
            files={"file": ("page.png", b"\x89PNG" + b"\x00" * 500, "image/png")},
            data={"algorithm": "ruled"},
        )
        assert response.status_code == 413

    def test_render_runs_off_the_event_loop(self, client, monkeypatch):
        import asyncio

        from notebook_layouts.renderer import render

        calls = []

        def recording_render(source, spec):
            try:
                asyncio.get_running_loop()
                calls.append("event loop")
            except RuntimeError:
                calls.append("worker thread")
            return render(source, spec)

        monkeypatch.setattr("web.backend.api.overlays.render", recording_render)
        response = client.post(
            "/api/overlays/render",
            files={"file": ("page.png", make_image((20, 20)), "image/png")},
            data={"algorithm": "grid"},
        )
        assert response.status_code == 200
        assert calls == ["worker thread"]
