"""
Error hierarchy.

All errors carry a machine-readable code and the HTTP status the app
exception handler should answer with.
"""

from typing import Any


class PagePdfError(Exception):
    """Base error for the service."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(
        self,
        message: str,
        code: str | None = None,
        http_status: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class RenderError(PagePdfError):
    """A render failed at launch, navigation or export."""

    code = "RENDER_FAILED"

    def __init__(self, message: str, stage: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.stage = stage
        if stage:
            self.details.setdefault("stage", stage)


class ChromiumPackError(PagePdfError):
    """The minimal Chromium pack could not be fetched or unpacked."""

    code = "CHROMIUM_PACK_FAILED"


class DataFetchError(PagePdfError):
    """The upstream data source did not yield a usable URL."""

    code = "DATA_FETCH_FAILED"
