"""Page object for the ParaBank registration form."""

import logging

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from registration_e2e.exceptions import ElementNotFoundError
from registration_e2e.models import UserRecord

logger = logging.getLogger(__name__)


class RegistrationPage:
    """Knows the registration form's locators and how to fill and submit it.

    All selectors live here so a markup change on the site touches only
    this class. Every locator must resolve to exactly one element;
    anything else raises ElementNotFoundError and is left to fail the run.
    """

    # UserRecord attribute -> form control
    field_selectors: dict[str, str] = {
        "first_name": "[id='customer.firstName']",
        "last_name": "[id='customer.lastName']",
        "address": "[id='customer.address.street']",
        "city": "[id='customer.address.city']",
        "state": "[id='customer.address.state']",
        "zip_code": "[id='customer.address.zipCode']",
        "phone": "[id='customer.phoneNumber']",
        "ssn": "[id='customer.ssn']",
        "username": "[id='customer.username']",
        "password": "[id='customer.password']",
    }
    confirm_password_selector = "[id='repeatedPassword']"
    register_button_selector = "input[value='Register']"
    validation_error_selector = "span.error"

    def __init__(self, page: Page, locator_timeout_ms: int = 5000) -> None:
        self.page = page
        self.locator_timeout_ms = locator_timeout_ms

    def _resolve(self, selector: str) -> Locator:
        """Return the locator for ``selector`` once it matches exactly one element."""
        locator = self.page.locator(selector)
        try:
            locator.first.wait_for(state="attached", timeout=self.locator_timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector, 0) from e

        count = locator.count()
        if count != 1:
            raise ElementNotFoundError(selector, count)
        return locator

    def fill(self, record: UserRecord) -> dict[str, str]:
        """Type every record field into its control.

        The confirmation control gets the record's password as well, since
        the form only accepts matching passwords.

        Returns:
            Mapping of selector to the value typed into it
        """
        filled: dict[str, str] = {}

        for attr, selector in self.field_selectors.items():
            value = getattr(record, attr)
            self._resolve(selector).fill(value)
            filled[selector] = value
            logger.debug(f"Filled {attr}: {selector}")

        self._resolve(self.confirm_password_selector).fill(record.password)
        filled[self.confirm_password_selector] = record.password

        return filled

    def submit(self) -> None:
        """Click the Register button."""
        self._resolve(self.register_button_selector).click()

    def read_values(self) -> dict[str, str]:
        """Current values of all mapped controls, keyed by record attribute."""
        values = {
            attr: self._resolve(selector).input_value()
            for attr, selector in self.field_selectors.items()
        }
        values["confirm_password"] = self._resolve(
            self.confirm_password_selector
        ).input_value()
        return values

    def validation_errors(self) -> list[str]:
        """Inline validation messages currently shown next to the form."""
        texts = self.page.locator(self.validation_error_selector).all_inner_texts()
        return [text.strip() for text in texts if text.strip()]
