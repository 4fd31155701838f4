"""
Browser launch strategies.

``LocalChromiumLauncher`` drives the Chromium that ships with Playwright and is
meant for development machines. ``MinimalChromiumLauncher`` drives the
reduced Chromium from :mod:`chromium_pack` for serverless sandboxes.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

from playwright.async_api import Browser, Page, Playwright

from pagepdf.config import Settings, get_settings
from pagepdf.shared.logging import get_logger
from .chromium_pack import ChromiumPack

logger = get_logger(__name__)


LOCAL_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Flags published with the minimal Chromium build
MINIMAL_ARGS = [
    "--allow-pre-commit-input",
    "--disable-background-networking",
    "--disable-background-timer-throttling",
    "--disable-backgrounding-occluded-windows",
    "--disable-breakpad",
    "--disable-client-side-phishing-detection",
    "--disable-component-extensions-with-background-pages",
    "--disable-component-update",
    "--disable-default-apps",
    "--disable-dev-shm-usage",
    "--disable-extensions",
    "--disable-hang-monitor",
    "--disable-ipc-flooding-protection",
    "--disable-popup-blocking",
    "--disable-prompt-on-repost",
    "--disable-renderer-backgrounding",
    "--disable-sync",
    "--enable-automation",
    "--export-tagged-pdf",
    "--force-color-profile=srgb",
    "--metrics-recording-only",
    "--no-first-run",
    "--password-store=basic",
    "--use-mock-keychain",
    "--disable-domain-reliability",
    "--disable-print-preview",
    "--disable-speech-api",
    "--disk-cache-size=33554432",
    "--mute-audio",
    "--no-default-browser-check",
    "--no-pings",
    "--single-process",
    "--font-render-hinting=none",
    "--disable-features=Translate,BackForwardCache,AcceptCHFrame,MediaRouter,OptimizationHints",
    "--enable-features=SharedArrayBuffer",
    "--hide-scrollbars",
    "--ignore-gpu-blocklist",
    "--in-process-gpu",
    "--window-size=1920,1080",
    "--use-gl=angle",
    "--use-angle=swiftshader",
    "--allow-running-insecure-content",
    "--disable-setuid-sandbox",
    "--disable-site-isolation-trials",
    "--disable-web-security",
    "--no-sandbox",
    "--no-zygote",
]

MINIMAL_VIEWPORT: dict[str, Any] = {
    "viewport": {"width": 1920, "height": 1080},
    "device_scale_factor": 1,
    "is_mobile": False,
    "has_touch": False,
}


class BrowserLauncher(ABC):
    """Launches one headless browser for one render."""

    name: str = "browser"

    @abstractmethod
    async def launch(self, playwright: Playwright) -> Browser:
        """Start a headless browser owned by the caller."""

    async def new_page(self, browser: Browser) -> Page:
        return await browser.new_page()


class LocalChromiumLauncher(BrowserLauncher):
    """Playwright's bundled Chromium with the sandbox disabled."""

    name = "local"

    async def launch(self, playwright: Playwright) -> Browser:
        logger.info("Launching local Chromium")
        return await playwright.chromium.launch(headless=True, args=list(LOCAL_ARGS))


class MinimalChromiumLauncher(BrowserLauncher):
    """Minimal Chromium resolved from a remote pack."""

    name = "minimal"

    def __init__(self, pack: ChromiumPack):
        self.pack = pack

    async def launch(self, playwright: Playwright) -> Browser:
        executable = await asyncio.to_thread(self.pack.executable_path)
        logger.info(f"Launching minimal Chromium from {executable}")
        return await playwright.chromium.launch(
            executable_path=str(executable),
            args=list(MINIMAL_ARGS),
            headless=True,
            env=self.pack.launch_env(),
        )

    async def new_page(self, browser: Browser) -> Page:
        return await browser.new_page(**MINIMAL_VIEWPORT)


def select_launcher(development_mode: bool, settings: Settings | None = None) -> BrowserLauncher:
    """Pick the launch strategy. Only ``development_mode`` decides."""
    if development_mode:
        return LocalChromiumLauncher()

    settings = settings or get_settings()
    pack = ChromiumPack(
        pack_url=settings.chromium_pack_url,
        target_dir=settings.chromium_dir,
        timeout=settings.chromium_download_timeout,
    )
    return MinimalChromiumLauncher(pack)
