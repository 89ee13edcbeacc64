"""Fixtures for live runs against the ParaBank site."""

import pytest

from registration_e2e.browser import browser_session
from registration_e2e.config import get_settings
from registration_e2e.logging_config import configure_logging


@pytest.fixture
def live_settings():
    settings = get_settings()
    configure_logging(settings.log_level)
    return settings


@pytest.fixture
def browser_page(live_settings):
    """A page in a fresh Chrome window, closed after the test whatever happens."""
    with browser_session(live_settings) as page:
        yield page
