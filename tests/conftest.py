"""Pytest configuration and fixtures."""

import logging
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from registration_e2e.config import Settings, get_settings
from registration_e2e.logging_config import LOGGER_NAME
from registration_e2e.models import UserRecord


class FakeLocator:
    """Stands in for a Playwright Locator bound to one or more inputs."""

    def __init__(self, selector: str, count: int = 1):
        self.selector = selector
        self._count = count
        self.value = ""
        self.clicked = False
        self.first = self

    def wait_for(self, state: str = "visible", timeout: float | None = None) -> None:
        if self._count == 0:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for {self.selector}"
            )

    def count(self) -> int:
        return self._count

    def fill(self, value: str) -> None:
        self.value = value

    def input_value(self) -> str:
        return self.value

    def click(self) -> None:
        self.clicked = True

    def all_inner_texts(self) -> list[str]:
        return [self.value] if self.value else []


class FakeForm:
    """Registry of FakeLocators keyed by selector."""

    def __init__(self, counts: dict[str, int] | None = None):
        self.counts = counts or {}
        self.locators: dict[str, FakeLocator] = {}

    def locator(self, selector: str) -> FakeLocator:
        if selector not in self.locators:
            self.locators[selector] = FakeLocator(selector, self.counts.get(selector, 1))
        return self.locators[selector]


@pytest.fixture
def settings():
    """Default settings, unaffected by the environment."""
    get_settings.cache_clear()
    return Settings(_env_file=None)


@pytest.fixture
def make_form():
    """Build a FakeForm, optionally with per-selector match counts."""
    return FakeForm


@pytest.fixture
def fake_form(make_form):
    return make_form()


@pytest.fixture
def stub_page(fake_form):
    """A Playwright Page stub whose form controls are FakeLocators."""

    def _create_page(
        url: str = "https://parabank.parasoft.com/parabank/register.htm",
        content: str = "<html><body></body></html>",
        title: str = "ParaBank | Register for Free Online Account Access",
    ) -> MagicMock:
        page = MagicMock(spec=Page)
        page.url = url
        page.content.return_value = content
        page.title.return_value = title
        page.locator.side_effect = fake_form.locator
        return page

    return _create_page


@pytest.fixture
def jane_doe():
    """The record used in the documented end-to-end scenarios."""
    return UserRecord(
        first_name="Jane",
        last_name="Doe",
        address="123 Main St",
        city="Springfield",
        state="Illinois",
        zip_code="62701",
        phone="217-555-0142",
        ssn="123-45-6789",
        username="janedoe",
        password="Passw0rd1",
    )


@pytest.fixture
def propagating_logs():
    """Let caplog see package logs, which normally stop at the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    previous = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = previous
