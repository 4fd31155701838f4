"""Render module routes."""

from fastapi import APIRouter, Depends, Query, Request, Response

from .adapter import handle_render_request
from .schemas import PageFormat, PdfMargin, RenderPdfRequest, RequestData
from .service import PdfRenderer

router = APIRouter(prefix="/render", tags=["render"])


def get_renderer() -> PdfRenderer:
    """Dependency injection for the renderer."""
    return PdfRenderer()


@router.post("/pdf")
async def render_pdf(
    request: Request,
    body: RenderPdfRequest,
    renderer: PdfRenderer = Depends(get_renderer),
) -> Response:
    """
    Render a URL to PDF.

    Returns the PDF as an attachment, or 500 with a generic message.
    """
    async def fetch_data() -> RequestData:
        return RequestData(url=body.url, filename=body.filename)

    return await handle_render_request(
        request, fetch_data, body.render_overrides(), renderer=renderer
    )


@router.get("/pdf")
async def render_pdf_query(
    request: Request,
    url: str = Query(..., min_length=1),
    filename: str | None = None,
    format: PageFormat | None = None,
    print_background: bool | None = None,
    margin_top: str | None = None,
    margin_right: str | None = None,
    margin_bottom: str | None = None,
    margin_left: str | None = None,
    renderer: PdfRenderer = Depends(get_renderer),
) -> Response:
    """Render a URL to PDF from query parameters (for plain links)."""
    options: dict = {}
    if format is not None:
        options["format"] = format
    if print_background is not None:
        options["print_background"] = print_background
    if any(m is not None for m in (margin_top, margin_right, margin_bottom, margin_left)):
        options["margin"] = PdfMargin(
            top=margin_top, right=margin_right, bottom=margin_bottom, left=margin_left
        )

    async def fetch_data() -> RequestData:
        return RequestData(url=url, filename=filename)

    return await handle_render_request(request, fetch_data, options, renderer=renderer)
