"""Registration scenario: generate, fill, submit, wait, inspect.

The wait after submitting races two terminal URLs: the account overview
(registered) and the registration form itself (rejected and re-rendered).
Either one ends the wait, so the wait only says the page has settled; the
verdict comes from inspecting the page afterwards. A wait timeout is
logged and the page is inspected anyway.
"""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from registration_e2e.config import Settings, get_settings
from registration_e2e.data_generator import DataGenerator
from registration_e2e.models import RegistrationOutcome, ScenarioState, UserRecord
from registration_e2e.pages import RegistrationPage

logger = logging.getLogger(__name__)

SUCCESS_URL_MARKER = "overview.htm"
REGISTER_URL_MARKER = "register.htm"
SUCCESS_PHRASE = "Your account was created successfully"
FAILURE_MESSAGE = "Registration should succeed with valid data."

T = TypeVar("T")

RULE = "━" * 45


def page_settled(url: str) -> bool:
    """True once the URL shows either the overview or the registration form."""
    return SUCCESS_URL_MARKER in url or REGISTER_URL_MARKER in url


def is_registration_successful(page_content: str, url: str) -> bool:
    """Either the confirmation phrase or the overview URL counts as success."""
    return SUCCESS_PHRASE in page_content or SUCCESS_URL_MARKER in url


class RegistrationScenario:
    """Runs one registration attempt against an open page.

    Usage:
        scenario = RegistrationScenario(page)
        outcome = scenario.run()
        assert_registration_succeeded(outcome)

    The page is borrowed; opening and closing the browser belongs to the
    caller (see browser.browser_session and the pytest fixture).
    """

    def __init__(
        self,
        page: Page,
        settings: Settings | None = None,
        generator: DataGenerator | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.page = page
        self.settings = settings or get_settings()
        self.generator = generator or DataGenerator(locale=self.settings.faker_locale)
        self.registration_page = RegistrationPage(
            page, locator_timeout_ms=self.settings.locator_timeout_ms
        )
        self._sleep = sleep
        self.state = ScenarioState.STARTED

    def _transition(self, state: ScenarioState) -> None:
        logger.debug(f"Scenario state: {self.state.value} -> {state.value}")
        self.state = state

    def run(self, record: UserRecord | None = None) -> RegistrationOutcome:
        """Register ``record`` (or a freshly generated one) and report the outcome."""
        start = time.time()
        self.state = ScenarioState.STARTED
        logger.info("===== Registration scenario started =====")

        if record is None:
            record = self.generator.generate()
        self._log_generated_data(record)

        self.page.goto(self.settings.registration_url)
        logger.info(f"Navigated to registration page: {self.settings.registration_url}")

        logger.info("Filling registration form...")
        fields_filled = self.registration_page.fill(record)
        self._transition(ScenarioState.FORM_FILLED)
        logger.info(f"Registration form filled ({len(fields_filled)} fields)")

        logger.info("Clicking Register button...")
        self.registration_page.submit()
        self._transition(ScenarioState.SUBMITTED)

        timed_out = self.wait_until_settled()

        outcome = self.inspect(record, fields_filled, timed_out, time.time() - start)
        self._log_outcome(outcome)
        logger.info("===== Registration scenario finished =====")
        return outcome

    def wait_until_settled(self) -> bool:
        """Wait for either terminal URL, then pause for late rendering.

        Returns:
            True if the URL wait timed out
        """
        self._transition(ScenarioState.SETTLING)
        timed_out = False
        try:
            self.page.wait_for_url(page_settled, timeout=self.settings.wait_timeout_ms)
        except PlaywrightTimeoutError as e:
            timed_out = True
            logger.warning(f"Timeout waiting for page to load: {e}")

        self._sleep(self.settings.settle_delay_seconds)
        return timed_out

    def inspect(
        self,
        record: UserRecord,
        fields_filled: dict[str, str],
        timed_out: bool,
        duration_seconds: float = 0,
    ) -> RegistrationOutcome:
        """Decide success from the page as it is now.

        A page that is still navigating cannot hand over its content; the
        body then counts as empty and the URL alone decides.
        """
        current_url = self.page.url
        content = self._read_page(self.page.content, "page content", "")
        success = is_registration_successful(content, current_url)
        self._transition(ScenarioState.INSPECTED)

        page_title = self._read_page(self.page.title, "page title", "")
        errors = []
        if not success:
            errors = self._read_page(
                self.registration_page.validation_errors, "validation errors", []
            )

        self._transition(ScenarioState.PASSED if success else ScenarioState.FAILED)
        return RegistrationOutcome(
            username=record.username,
            success=success,
            timed_out=timed_out,
            current_url=current_url,
            page_title=page_title,
            fields_filled=fields_filled,
            validation_errors=errors,
            duration_seconds=duration_seconds,
        )

    def _read_page(self, read: Callable[[], T], what: str, default: T) -> T:
        try:
            return read()
        except PlaywrightError as e:
            logger.warning(f"Could not read {what} while the page is changing: {e}")
            return default

    def _log_generated_data(self, record: UserRecord) -> None:
        logger.info("Generated test data:")
        logger.info(RULE)
        for label, value in record.as_report_rows():
            logger.info(f"{label:<14}: {value}")
        logger.info(RULE)

    def _log_outcome(self, outcome: RegistrationOutcome) -> None:
        logger.info("Registration result:")
        logger.info(RULE)
        logger.info(f"Fields filled : {len(outcome.fields_filled)}")
        if outcome.timed_out:
            logger.info("Settle wait  : timed out, inspected current page")
        if outcome.success:
            logger.info("✅ Registration completed successfully!")
            logger.info(f"✅ User '{outcome.username}' has been registered.")
        else:
            logger.info("❌ Registration failed!")
            logger.info(f"Current URL: {outcome.current_url}")
            logger.info(f"Page Title: {outcome.page_title}")
            for error in outcome.validation_errors:
                logger.info(f"  - {error}")
        logger.info(f"Duration: {outcome.duration_seconds:.1f}s")
        logger.info(RULE)


def assert_registration_succeeded(outcome: RegistrationOutcome) -> None:
    """Fail with the standard message unless the registration succeeded."""
    if not outcome.success:
        raise AssertionError(FAILURE_MESSAGE)
