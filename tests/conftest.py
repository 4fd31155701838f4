"""
Shared fixtures.

Playwright is replaced with in-memory fakes so no test starts a browser or
touches the network.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from pagepdf.app import build_app
from pagepdf.config import Settings, init_settings, reset_settings
from pagepdf.modules.render.router import get_renderer

from .fakes import PDF_BYTES, FakeLauncher, FakePlaywrightManager, FakeRenderer


@pytest.fixture(autouse=True)
def fake_playwright():
    """Replace async_playwright in the render service."""
    with patch(
        "pagepdf.modules.render.service.async_playwright",
        side_effect=FakePlaywrightManager,
    ) as factory:
        yield factory


@pytest.fixture(autouse=True)
def _reset_settings():
    yield
    reset_settings()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Fresh settings for each test."""
    reset_settings()
    s = Settings(environment="production", chromium_dir=tmp_path / "chromium")
    init_settings(s)
    return s


@pytest.fixture
def page() -> MagicMock:
    page = MagicMock(name="page")
    page.goto = AsyncMock(return_value=None)
    page.pdf = AsyncMock(return_value=PDF_BYTES)
    return page


@pytest.fixture
def browser(page: MagicMock) -> MagicMock:
    browser = MagicMock(name="browser")
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock(return_value=None)
    return browser


@pytest.fixture
def launcher(browser: MagicMock) -> FakeLauncher:
    return FakeLauncher(browser)


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def client(settings: Settings, fake_renderer: FakeRenderer):
    """Test client with the renderer swapped for a fake."""
    app = build_app(settings)
    app.dependency_overrides[get_renderer] = lambda: fake_renderer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
