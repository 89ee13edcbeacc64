"""Exceptions raised by the registration end-to-end check."""


class RegistrationE2EError(Exception):
    """Base exception for registration automation errors."""

    pass


class ElementNotFoundError(RegistrationE2EError):
    """Raised when a locator does not resolve to exactly one element."""

    def __init__(self, selector: str, count: int):
        self.selector = selector
        self.count = count
        super().__init__(
            f"Expected exactly one element for {selector!r}, found {count}"
        )
