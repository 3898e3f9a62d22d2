"""Runtime settings for generator instances."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_LOCALE = "en_US"


class FakerSettings(BaseModel):
    """Settings a host uses when creating generator instances.

    A seed of 0 means every instance draws from an entropy-seeded,
    non-reproducible source.
    """

    seed: int = Field(default=0, description="Random seed, 0 for non-reproducible output")
    locale: str = Field(default=DEFAULT_LOCALE, description="Faker locale for generated values")

    @field_validator("locale")
    @classmethod
    def _locale_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("locale must not be empty")
        return value
