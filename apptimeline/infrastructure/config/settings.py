from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "AppTimeline"
    app_version: str = "1.0.0"
    debug: bool = False

    # Wire encoding
    wire_format: str = "json"  # Options: "json", "xml"
    xml_pretty_print: bool = False

    # Aggregation
    derive_start_time_from_events: bool = True  # Fall back to earliest event timestamp

    @model_validator(mode="after")
    def validate_wire_format(self) -> "Settings":
        """Validate the default wire format"""
        self.wire_format = self.wire_format.lower()
        if self.wire_format not in ("json", "xml"):
            raise ValueError(
                f"Invalid wire_format '{self.wire_format}'. Must be one of: 'json', 'xml'"
            )
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="APPTIMELINE_",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
