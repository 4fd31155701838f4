"""Render service - URL to PDF using Playwright."""

import time
from typing import Callable

from playwright.async_api import async_playwright

from pagepdf.config import Settings, get_settings
from pagepdf.shared.errors import RenderError
from pagepdf.shared.logging import get_logger
from .launchers import BrowserLauncher, select_launcher
from .schemas import RenderOptions, RenderResult

logger = get_logger(__name__)

# Navigation completes once the page has had no network connections for 500ms
WAIT_UNTIL = "networkidle"


class PdfRenderer:
    """Renders one URL per call in a browser that lives only for that call."""

    def __init__(
        self,
        settings: Settings | None = None,
        launcher_factory: Callable[[bool], BrowserLauncher] | None = None,
    ):
        self.settings = settings or get_settings()
        self._launcher_factory = launcher_factory or self._default_launcher

    def _default_launcher(self, development_mode: bool) -> BrowserLauncher:
        return select_launcher(development_mode, self.settings)

    async def generate_document(self, options: RenderOptions) -> RenderResult:
        """
        Render ``options.url`` to PDF bytes.

        Failures are logged and returned as an unsuccessful result naming the
        stage (launch, navigate, export) that failed. The browser is closed on
        every path.

        Args:
            options: Fully resolved render options

        Returns:
            RenderResult with the document on success
        """
        launcher = self._launcher_factory(options.development_mode)
        started = time.monotonic()
        stage = "launch"

        logger.info(
            f"Rendering {options.url} with {launcher.name} browser "
            f"(format={options.format}, print_background={options.print_background})"
        )

        try:
            async with async_playwright() as p:
                browser = await launcher.launch(p)
                try:
                    page = await launcher.new_page(browser)

                    stage = "navigate"
                    await page.goto(options.url, wait_until=WAIT_UNTIL)

                    stage = "export"
                    document = await page.pdf(**options.pdf_arguments())
                finally:
                    await browser.close()
        except Exception as e:
            logger.exception(f"PDF generation failed during {stage} for {options.url}")
            return RenderResult(
                success=False,
                error=str(e) or type(e).__name__,
                stage=stage,
                duration_ms=_elapsed_ms(started),
            )

        logger.info(f"Generated PDF: {len(document)} bytes")
        return RenderResult(success=True, document=document, duration_ms=_elapsed_ms(started))


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


async def generate_document(options: RenderOptions, settings: Settings | None = None) -> RenderResult:
    """Render with a default-configured renderer."""
    return await PdfRenderer(settings).generate_document(options)


async def render_pdf(options: RenderOptions, settings: Settings | None = None) -> bytes:
    """
    Render and return the PDF bytes.

    Raises:
        RenderError: the render failed; ``stage`` names where
    """
    result = await generate_document(options, settings)
    if not result.success or result.document is None:
        raise RenderError(result.error or "PDF generation failed", stage=result.stage)
    return result.document
