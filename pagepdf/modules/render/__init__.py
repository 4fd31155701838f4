"""Render module - URL to PDF rendering using Playwright."""

from .adapter import handle_render_request
from .router import router
from .schemas import PdfMargin, RenderOptions, RenderPdfRequest, RenderResult, RequestData
from .service import PdfRenderer, generate_document, render_pdf

__all__ = [
    "router",
    "handle_render_request",
    "PdfRenderer",
    "generate_document",
    "render_pdf",
    "PdfMargin",
    "RenderOptions",
    "RenderPdfRequest",
    "RenderResult",
    "RequestData",
]
