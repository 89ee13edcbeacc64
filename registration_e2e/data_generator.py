"""Synthetic user data for registration runs."""

from faker import Faker

from registration_e2e.models import UserRecord

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 12


class DataGenerator:
    """Produces realistic, randomized UserRecords with Faker.

    Usage:
        generator = DataGenerator()
        record = generator.generate()

    Passing ``seed`` seeds this generator only, which makes a run
    reproducible without touching Faker's shared random state.
    """

    def __init__(self, locale: str = "en_US", seed: int | None = None) -> None:
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)

    def generate(self) -> UserRecord:
        """Generate a fully populated record."""
        fake = self._faker
        password_length = fake.random_int(PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH)

        return UserRecord(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            address=fake.street_address(),
            city=fake.city(),
            state=fake.state(),
            zip_code=fake.zipcode(),
            phone=fake.phone_number(),
            ssn=fake.ssn(),
            username=fake.user_name(),
            password=fake.password(length=password_length),
        )


def generate_user_record(locale: str = "en_US") -> UserRecord:
    """Generate a single record with a fresh generator."""
    return DataGenerator(locale=locale).generate()
