"""Mock generator — turns a ParsedInterface into JSON-compatible mock values.

All randomness flows from one injected ``random.Random``. The Faker instance
used for realistic strings is seeded from it, so a fixed seed reproduces the
same records.
"""

import logging
import random
from datetime import timezone
from typing import Any

from faker import Faker

from interface_mock.generator.options import GeneratorOptions
from interface_mock.parser.base import ParsedInterface, TypeInfo

logger = logging.getLogger(__name__)

MIN_NUMBER = 1
MAX_NUMBER = 1000
MAX_TEXT_WORDS = 5


class MockGenerator:
    """Generates mock records that conform to a parsed interface."""

    def __init__(self, options: GeneratorOptions | None = None, rng: random.Random | None = None):
        self.options = options or GeneratorOptions()
        self.rng = rng or random.Random()
        self.faker = Faker(self.options.locale)
        self.faker.seed_instance(self.rng.getrandbits(64))

    def generate_one(self, parsed: ParsedInterface) -> dict[str, Any]:
        """Generate a single record; an interface without fields yields ``{}``."""
        return self._generate_object(parsed.properties)

    def generate_many(self, parsed: ParsedInterface, count: int) -> list[dict[str, Any]]:
        """Generate ``count`` independent records."""
        logger.debug("Generating %d %s records", count, parsed.name)
        return [self.generate_one(parsed) for _ in range(count)]

    def generate_value(self, type_info: TypeInfo) -> Any:
        if type_info.is_array:
            size = self.rng.randint(1, self.options.array_size)
            return [self._generate_element(type_info) for _ in range(size)]
        return self._generate_element(type_info)

    def generate_base_value(self, type_info: TypeInfo) -> str | int | bool:
        """Generate a scalar for ``string``, ``number``, ``boolean`` or ``date``."""
        if type_info.kind == "number":
            return self.rng.randint(MIN_NUMBER, MAX_NUMBER)
        if type_info.kind == "boolean":
            return self.rng.random() < 0.5
        if type_info.kind == "date":
            moment = self.faker.date_time_between(start_date="-1y", end_date="now", tzinfo=timezone.utc)
            return moment.isoformat()
        return self._generate_string(type_info.string_format)

    def _generate_element(self, type_info: TypeInfo) -> Any:
        if type_info.kind == "object":
            return self._generate_object(type_info.properties or {})
        return self.generate_base_value(type_info)

    def _generate_object(self, properties: dict[str, TypeInfo]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for prop_name, type_info in properties.items():
            if type_info.is_optional and self.rng.random() < self.options.optional_probability:
                continue
            result[prop_name] = self.generate_value(type_info)
        return result

    def _generate_string(self, string_format: str | None) -> str:
        fake = self.faker
        if string_format == "email":
            return fake.email()
        if string_format == "url":
            return fake.url()
        if string_format == "phone":
            return fake.phone_number()
        if string_format == "name":
            return fake.name()
        if string_format == "address":
            return fake.street_address()
        if string_format == "company":
            return fake.company()
        if string_format == "uuid":
            return fake.uuid4()
        words = self.rng.randint(1, MAX_TEXT_WORDS)
        return fake.sentence(nb_words=words, variable_nb_words=False)


def generate_mock_data(
    parsed: ParsedInterface,
    count: int | None = None,
    options: GeneratorOptions | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any] | list[dict[str, Any]]:
    """Generate mock data for ``parsed``.

    Returns a bare object when ``count`` is omitted or at most 1, and a list
    of ``count`` objects otherwise.
    """
    generator = MockGenerator(options=options, rng=rng)
    if count is not None and count > 1:
        return generator.generate_many(parsed, count)
    return generator.generate_one(parsed)
