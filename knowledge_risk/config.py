"""
Configuration management using pydantic-settings.
All settings loaded from environment variables (12-factor app).
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="json", description="Log format (json|console)")

    # Graph layout
    layout_center_x: float = Field(default=50.0, description="Layout center x")
    layout_center_y: float = Field(default=50.0, description="Layout center y")
    layout_person_radius: float = Field(
        default=38.0, gt=0.0, description="Outer ring radius for people"
    )
    layout_module_radius: float = Field(
        default=18.0, gt=0.0, description="Inner ring radius for modules"
    )

    # Development
    dev_mode: bool = Field(default=True, description="Development mode")
    testing: bool = Field(default=False, description="Testing mode")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only json and console renderers exist."""
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_layout_radii(self) -> "Settings":
        """People ring must enclose the module ring."""
        if self.layout_person_radius <= self.layout_module_radius:
            raise ValueError(
                "layout_person_radius must be greater than layout_module_radius"
            )
        return self

    @property
    def layout_center(self) -> tuple[float, float]:
        return (self.layout_center_x, self.layout_center_y)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure singleton behavior.
    """
    return Settings()
