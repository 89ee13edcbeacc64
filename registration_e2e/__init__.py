"""End-to-end check of the ParaBank registration form.

This package provides:
- DataGenerator: Faker-backed synthetic users
- RegistrationPage: page object for the registration form
- RegistrationScenario: generate, fill, submit, wait and verify
- BrowserSession / browser_session: Chrome lifecycle via Playwright
"""

from registration_e2e.browser import BrowserSession, browser_session
from registration_e2e.data_generator import DataGenerator, generate_user_record
from registration_e2e.exceptions import ElementNotFoundError, RegistrationE2EError
from registration_e2e.models import RegistrationOutcome, ScenarioState, UserRecord
from registration_e2e.pages import RegistrationPage
from registration_e2e.scenario import RegistrationScenario, assert_registration_succeeded

__all__ = [
    # Data
    "UserRecord",
    "RegistrationOutcome",
    "ScenarioState",
    "DataGenerator",
    "generate_user_record",
    # Browser
    "BrowserSession",
    "browser_session",
    "RegistrationPage",
    # Scenario
    "RegistrationScenario",
    "assert_registration_succeeded",
    # Errors
    "RegistrationE2EError",
    "ElementNotFoundError",
]
