"""Library configuration via Pydantic Settings.

Values here are defaults only; every ``Geocoder`` instance may override them
through its constructor.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Round-trip budget shared by geocode and reverse geocode
    timeout_seconds: float = Field(
        default=8.0,
        gt=0,
        validation_alias="GEOCODER_TIMEOUT_SECONDS",
    )

    # Trim "[...]" around single-object payloads before decoding
    strip_array_wrapper: bool = Field(
        default=True,
        validation_alias="GEOCODER_STRIP_ARRAY_WRAPPER",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
