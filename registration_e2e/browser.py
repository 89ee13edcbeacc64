"""Chrome session lifecycle built on Playwright's sync API."""

import logging
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from registration_e2e.config import Settings, get_settings

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns one Playwright driver, browser, context and page.

    Usage:
        session = BrowserSession(settings)
        page = session.start()
        try:
            ...
        finally:
            session.close()
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def page(self) -> Page:
        """Get the current page, raising if not started."""
        if self._page is None:
            raise RuntimeError("Browser not started. Call start() first.")
        return self._page

    @property
    def is_open(self) -> bool:
        """Whether a page is currently open."""
        return self._page is not None

    def start(self) -> Page:
        """Launch a maximized Chrome window and open a blank page."""
        channel = self.settings.browser_channel or None
        logger.info(
            f"Launching browser (channel={channel or 'chromium'}, "
            f"headless={self.settings.headless})"
        )

        self._playwright = sync_playwright().start()
        self._browser = self._playwright.chromium.launch(
            channel=channel,
            headless=self.settings.headless,
            slow_mo=self.settings.slow_mo,
            args=["--start-maximized"],
        )
        self._context = self._browser.new_context(no_viewport=True)
        self._page = self._context.new_page()

        logger.info("Browser launched and maximized.")
        return self._page

    def close(self) -> None:
        """Release everything start() acquired. Safe to call more than once.

        Each release runs even if an earlier one raised, so a crashed page
        or context still lets the browser and driver shut down.
        """
        if self._browser:
            logger.info("Closing browser.")

        with ExitStack() as stack:
            # Callbacks unwind last-in first-out: page, context, browser, driver
            if self._playwright:
                stack.callback(self._playwright.stop)
            if self._browser:
                stack.callback(self._browser.close)
            if self._context:
                stack.callback(self._context.close)
            if self._page:
                stack.callback(self._page.close)

            self._page = None
            self._context = None
            self._browser = None
            self._playwright = None


@contextmanager
def browser_session(settings: Settings | None = None) -> Iterator[Page]:
    """Yield a fresh page; the browser is closed on every exit path."""
    session = BrowserSession(settings)
    try:
        yield session.start()
    finally:
        session.close()
