"""
Request adapter - turns a render into an HTTP download.

The adapter is the composition boundary: it reads the runtime environment
from settings, asks the caller for the page to render, and maps the render
outcome to a response. Error details are logged, never returned.
"""

from typing import Any, Awaitable, Callable, Mapping

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from pagepdf.config import get_settings
from pagepdf.shared.errors import DataFetchError, RenderError
from pagepdf.shared.logging import get_logger
from .schemas import RenderOptions, RequestData
from .service import PdfRenderer

logger = get_logger(__name__)

FetchData = Callable[[], Awaitable[RequestData | Mapping[str, Any]]]

ERROR_BODY = {"message": "Error generating PDF"}
OVERRIDABLE_OPTIONS = ("format", "margin", "print_background")


async def _fetch(fetch_data: FetchData) -> RequestData:
    try:
        data = await fetch_data()
        if isinstance(data, RequestData):
            return data
        return RequestData.model_validate(data)
    except Exception as e:
        raise DataFetchError(f"Could not obtain render target: {e}") from e


async def handle_render_request(
    request: Request | None,
    fetch_data: FetchData,
    options: Mapping[str, Any] | None = None,
    *,
    development_mode: bool | None = None,
    renderer: PdfRenderer | None = None,
) -> Response:
    """
    Render the page named by ``fetch_data`` and answer with a PDF attachment.

    Args:
        request: Inbound request; accepted but not inspected
        fetch_data: Async callable returning ``{url, filename?}``
        options: Optional format / margin / print_background overrides
        development_mode: Explicit launch strategy; derived from settings when None
        renderer: Renderer to use (default: a fresh PdfRenderer)

    Returns:
        200 with the PDF, or 500 with a fixed JSON message
    """
    try:
        data = await _fetch(fetch_data)

        if development_mode is None:
            development_mode = get_settings().is_development

        overrides = {k: v for k, v in (options or {}).items() if k in OVERRIDABLE_OPTIONS}
        render_options = RenderOptions(
            url=data.url,
            **overrides,
            development_mode=development_mode,
        )

        result = await (renderer or PdfRenderer()).generate_document(render_options)
        if not result.success or result.document is None:
            raise RenderError(result.error or "PDF generation failed", stage=result.stage)

        return Response(
            content=result.document,
            status_code=200,
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={data.filename}"},
        )

    except Exception as e:
        logger.error(f"PDF generation error: {e}")
        return JSONResponse(status_code=500, content=ERROR_BODY)
