"""interface-mock configuration.

Typed settings for the project registry and the mock generator. Values can
come from defaults, a YAML file, or ``INTERFACE_MOCK_*`` environment
variables.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from interface_mock.generator.options import GeneratorOptions


class MockConfig(BaseModel):
    """Settings for serving mock endpoints."""

    base_url: str = Field(default="http://localhost:3000")
    default_expiration_hours: float = Field(default=24, gt=0)
    max_projects: int = Field(default=50, ge=1, description="Maximum number of active projects")
    max_count: int = Field(default=100, ge=1, description="Largest record count a request may ask for")
    generator: GeneratorOptions = Field(default_factory=GeneratorOptions)

    @classmethod
    def load(cls, path: Path) -> "MockConfig":
        """Load and validate a YAML configuration file.

        An empty file yields the defaults.
        """
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data or {})

    @classmethod
    def from_env(cls) -> "MockConfig":
        """Build a config from environment variables.

        Recognised variables (all optional):
            INTERFACE_MOCK_BASE_URL, INTERFACE_MOCK_EXPIRATION_HOURS,
            INTERFACE_MOCK_MAX_PROJECTS, INTERFACE_MOCK_MAX_COUNT,
            INTERFACE_MOCK_ARRAY_SIZE, INTERFACE_MOCK_LOCALE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("INTERFACE_MOCK_BASE_URL"):
            kwargs["base_url"] = os.environ["INTERFACE_MOCK_BASE_URL"]
        if os.environ.get("INTERFACE_MOCK_EXPIRATION_HOURS"):
            kwargs["default_expiration_hours"] = float(os.environ["INTERFACE_MOCK_EXPIRATION_HOURS"])
        if os.environ.get("INTERFACE_MOCK_MAX_PROJECTS"):
            kwargs["max_projects"] = int(os.environ["INTERFACE_MOCK_MAX_PROJECTS"])
        if os.environ.get("INTERFACE_MOCK_MAX_COUNT"):
            kwargs["max_count"] = int(os.environ["INTERFACE_MOCK_MAX_COUNT"])

        generator_kwargs: dict[str, Any] = {}
        if os.environ.get("INTERFACE_MOCK_ARRAY_SIZE"):
            generator_kwargs["array_size"] = int(os.environ["INTERFACE_MOCK_ARRAY_SIZE"])
        if os.environ.get("INTERFACE_MOCK_LOCALE"):
            generator_kwargs["locale"] = os.environ["INTERFACE_MOCK_LOCALE"]

        return cls(generator=GeneratorOptions(**generator_kwargs), **kwargs)
