"""
Centralized configuration management using Pydantic Settings.

Configuration is loaded from environment variables with sensible defaults.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .protocols import DuplicateLabelPolicy


class LightConfig(BaseSettings):
    """Intensity bounds applied to newly created lights."""

    model_config = SettingsConfigDict(env_prefix="HOMEPANEL_LIGHT_")

    min_intensity: int = Field(default=0, description="Lowest intensity a light can reach")
    max_intensity: int = Field(default=100, description="Highest intensity a light can reach")

    @model_validator(mode="after")
    def _check_bounds(self) -> "LightConfig":
        if self.min_intensity >= self.max_intensity:
            raise ValueError(
                f"min_intensity ({self.min_intensity}) must be below "
                f"max_intensity ({self.max_intensity})"
            )
        return self


class PanelConfig(BaseSettings):
    """Button panel configuration."""

    model_config = SettingsConfigDict(env_prefix="HOMEPANEL_PANEL_")

    duplicate_label_policy: DuplicateLabelPolicy = Field(
        default=DuplicateLabelPolicy.REJECT,
        description="'reject' raises on a reused label, 'replace' rebinds it and moves it last",
    )


class DemoConfig(BaseSettings):
    """Demonstration sequence configuration."""

    model_config = SettingsConfigDict(env_prefix="HOMEPANEL_DEMO_")

    step: int = Field(default=20, description="Intensity step bound to the demo buttons")


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="HOMEPANEL_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    light: LightConfig = Field(default_factory=LightConfig)
    panel: PanelConfig = Field(default_factory=PanelConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)


# Singleton settings instance
settings = Settings()
