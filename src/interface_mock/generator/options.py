"""Tuning knobs for mock data generation."""

from pydantic import BaseModel, Field


class GeneratorOptions(BaseModel):
    """Options shared by every value a MockGenerator produces."""

    array_size: int = Field(default=3, ge=1, description="Upper bound on generated array length")
    optional_probability: float = Field(
        default=0.3, ge=0.0, le=1.0, description="Chance that an optional field is omitted"
    )
    locale: str = Field(default="en_US", description="Faker locale for realistic strings")
