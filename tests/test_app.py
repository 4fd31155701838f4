"""Tests for the HTTP surface."""

from fastapi.testclient import TestClient

from pagepdf.app import build_app
from pagepdf.modules.render.schemas import RenderResult
from pagepdf.shared.errors import ChromiumPackError

from .fakes import PDF_BYTES


class TestRenderRoutes:

    def test_post_render(self, client, fake_renderer):
        resp = client.post("/render/pdf", json={"url": "https://example.com"})

        assert resp.status_code == 200
        assert resp.content == PDF_BYTES
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.headers["content-disposition"] == "attachment; filename=download.pdf"
        assert fake_renderer.calls[0].development_mode is False

    def test_post_render_with_options(self, client, fake_renderer):
        resp = client.post("/render/pdf", json={
            "url": "https://example.com",
            "filename": "report.pdf",
            "format": "Letter",
            "margin": {"top": "5px"},
        })

        assert resp.headers["content-disposition"] == "attachment; filename=report.pdf"
        options = fake_renderer.calls[0]
        assert options.format == "Letter"
        assert options.margin.model_dump() == {
            "top": "5px", "right": "10px", "bottom": "20px", "left": "10px",
        }

    def test_get_render(self, client, fake_renderer):
        resp = client.get("/render/pdf", params={
            "url": "https://example.com",
            "filename": "page.pdf",
            "format": "Legal",
            "print_background": "false",
            "margin_left": "1in",
        })

        assert resp.status_code == 200
        assert resp.headers["content-disposition"] == "attachment; filename=page.pdf"
        options = fake_renderer.calls[0]
        assert options.format == "Legal"
        assert options.print_background is False
        assert options.margin.left == "1in"
        assert options.margin.top == "20px"

    def test_render_failure(self, client, fake_renderer):
        fake_renderer.result = RenderResult(success=False, error="boom", stage="navigate")

        resp = client.post("/render/pdf", json={"url": "https://example.com"})

        assert resp.status_code == 500
        assert resp.json() == {"message": "Error generating PDF"}

    def test_unencodable_filename(self, client):
        resp = client.post("/render/pdf", json={"url": "https://example.com", "filename": "报告.pdf"})

        assert resp.status_code == 500
        assert resp.json() == {"message": "Error generating PDF"}

    def test_missing_url_is_rejected(self, client):
        assert client.post("/render/pdf", json={}).status_code == 422
        assert client.get("/render/pdf").status_code == 422


class TestApp:

    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
        assert resp.json()["environment"] == "production"

    def test_root(self, client):
        assert client.get("/").json()["service"] == "pagepdf"

    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "req_abc"})
        assert resp.headers["X-Request-ID"] == "req_abc"

        assert client.get("/health").headers["X-Request-ID"].startswith("req_")

    def test_error_handler(self, settings):
        app = build_app(settings)

        @app.get("/boom")
        async def boom():
            raise ChromiumPackError("pack missing", details={"pack_url": "x"})

        with TestClient(app) as c:
            resp = c.get("/boom", headers={"X-Request-ID": "req_err"})

        assert resp.status_code == 500
        assert resp.json() == {
            "error": {
                "code": "CHROMIUM_PACK_FAILED",
                "message": "pack missing",
                "details": {"pack_url": "x"},
            },
            "request_id": "req_err",
        }
