"""Data models for the registration scenario."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """One synthetic identity, as typed into the registration form.

    Built once per run by the data generator and never mutated.
    """

    model_config = ConfigDict(frozen=True, str_min_length=1)

    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: str
    ssn: str
    username: str
    password: str

    def as_report_rows(self) -> list[tuple[str, str]]:
        """Label/value pairs in form order for console reports."""
        return [
            ("First Name", self.first_name),
            ("Last Name", self.last_name),
            ("Address", self.address),
            ("City", self.city),
            ("State", self.state),
            ("Zip Code", self.zip_code),
            ("Phone", self.phone),
            ("SSN", self.ssn),
            ("Username", self.username),
            ("Password", self.password),
        ]


class ScenarioState(str, Enum):
    """Progress of a registration scenario."""

    STARTED = "started"
    FORM_FILLED = "form_filled"
    SUBMITTED = "submitted"
    SETTLING = "settling"
    INSPECTED = "inspected"
    PASSED = "passed"
    FAILED = "failed"


class RegistrationOutcome(BaseModel):
    """Result of one registration attempt."""

    model_config = ConfigDict(frozen=True)

    username: str
    success: bool
    timed_out: bool = False
    current_url: str
    page_title: str
    fields_filled: dict[str, str] = Field(default_factory=dict)
    validation_errors: list[str] = Field(default_factory=list)
    duration_seconds: float = 0
