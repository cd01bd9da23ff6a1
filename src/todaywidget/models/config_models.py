"""Configuration models for the today widget."""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DisplayConfig(BaseModel):
    """Display configuration."""

    model_config = ConfigDict(validate_assignment=True)

    timezone: str | None = Field(
        default=None, description="IANA timezone for due times (None = system local)"
    )
    output: str = Field(default="pretty")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Reject timezone names the tz database does not know."""
        if v is None or not v.strip():
            return None
        try:
            ZoneInfo(v.strip())
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v.strip()

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str) -> str:
        if v not in ("pretty", "json", "yaml"):
            raise ValueError(f"Unsupported output format '{v}'")
        return v


class StoreConfig(BaseModel):
    """Shared task store configuration."""

    path: str | None = Field(default=None, description="Path to the tasks JSON file")


class AppConfig(BaseModel):
    """Main today widget configuration."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
