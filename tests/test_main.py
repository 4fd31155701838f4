"""Tests for the command line entrypoint."""

from unittest.mock import patch

from pagepdf.config import get_settings
from pagepdf.main import main, parse_args, resolve_settings


def test_flags_override_settings(settings):
    resolved = resolve_settings(
        parse_args(["--port", "9100", "--environment", "development"]), settings
    )

    assert resolved.port == 9100
    assert resolved.is_development is True
    assert resolved.host == settings.host
    assert settings.port == 8000


def test_no_flags_keeps_settings(settings):
    resolved = resolve_settings(parse_args([]), settings)

    assert resolved.model_dump() == settings.model_dump()


def test_main_runs_uvicorn(settings):
    with patch("pagepdf.main.uvicorn.run") as run:
        main(["--host", "0.0.0.0", "--log-level", "DEBUG"])

    (app,), kwargs = run.call_args
    assert kwargs == {"host": "0.0.0.0", "port": 8000, "log_level": "debug"}
    assert app.title == "pagepdf"
    assert get_settings().host == "0.0.0.0"
