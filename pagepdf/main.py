"""
Command line entrypoint.

    pagepdf --port 9000 --environment development

Flags override the PAGEPDF_* environment for this run only.
"""

import argparse
from typing import Sequence

import uvicorn

from pagepdf.app import build_app
from pagepdf.config import Settings, get_settings


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagepdf",
        description="Serve URL-to-PDF rendering over HTTP.",
    )
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Bind port")
    parser.add_argument(
        "--environment",
        help='Runtime environment; "development" uses the local Chromium',
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command line overrides on top of the environment settings."""
    base = base or get_settings()
    overrides = {
        field: value
        for field, value in (
            ("host", args.host),
            ("port", args.port),
            ("environment", args.environment),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    return base.model_copy(update=overrides)


def main(argv: Sequence[str] | None = None) -> None:
    """Run the pagepdf server."""
    settings = resolve_settings(parse_args(argv))
    app = build_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
