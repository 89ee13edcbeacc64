"""Page objects for the ParaBank site."""

from registration_e2e.pages.registration_page import RegistrationPage

__all__ = ["RegistrationPage"]
