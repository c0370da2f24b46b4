"""
Band, progression and matcher tuning loaded from the environment.

Every tunable threshold lives here with its type, default and validation.
The core services never read the environment themselves; build their frozen
config objects here and inject them.

Usage:
    from backend.settings import get_settings

    settings = get_settings()
    catalog = BandCatalog(settings.band_config())
    engine = WeightProgressionEngine(lift_logs, exercises, settings.progression_config())
"""

from functools import lru_cache
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.models.band import DEFAULT_BAND_COLORS, BandConfig, BandSpec
from domain.models.progression import DEFAULT_INCREMENT, LOOKBACK_WEEKS, ProgressionConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Bands
    # -------------------------------------------------------------------------
    band_colors: Dict[str, BandSpec] = Field(
        default_factory=lambda: dict(DEFAULT_BAND_COLORS),
        description='JSON map of colour -> {"resistance": n, "order": n}',
    )
    band_max_reps_before_change: int = Field(
        default=15,
        ge=1,
        description="Rep count that triggers a move to the next band",
    )
    band_default_reps_on_change: int = Field(
        default=8,
        ge=1,
        description="Reps suggested right after a band change",
    )

    # -------------------------------------------------------------------------
    # Weight Progression
    # -------------------------------------------------------------------------
    lookback_weeks: int = Field(
        default=LOOKBACK_WEEKS,
        ge=1,
        description="Weeks of history considered for weight suggestions",
    )
    default_increment: float = Field(
        default=DEFAULT_INCREMENT,
        gt=0,
        description="Weight added when progressing",
    )
    weight_resolution: float = Field(
        default=5.0,
        gt=0,
        description="Linear progression rounds working weights to this step",
    )
    double_progression_min_reps: int = Field(
        default=8,
        ge=1,
        description="Reps to restart at after a double-progression weight increase",
    )
    double_progression_max_reps: int = Field(
        default=12,
        ge=1,
        description="Reps at which double progression adds weight",
    )
    bodyweight_increment: float = Field(
        default=5.0,
        gt=0,
        description="Extra weight added when a bodyweight exercise rolls over",
    )

    # -------------------------------------------------------------------------
    # Exercise Name Matching
    # -------------------------------------------------------------------------
    match_min_partial_length: int = Field(
        default=3,
        ge=1,
        description="Minimum query length for starts-with and partial matches",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("band_colors")
    @classmethod
    def validate_band_colors(cls, v: Dict[str, BandSpec]) -> Dict[str, BandSpec]:
        """Require at least one band."""
        if not v:
            raise ValueError("band_colors must define at least one band")
        return v

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    # -------------------------------------------------------------------------
    # Service Configuration
    # -------------------------------------------------------------------------
    def band_config(self) -> BandConfig:
        """Frozen band configuration for BandCatalog."""
        return BandConfig(
            colors=self.band_colors,
            max_reps_before_band_change=self.band_max_reps_before_change,
            default_reps_on_band_change=self.band_default_reps_on_change,
        )

    def progression_config(self) -> ProgressionConfig:
        """Frozen thresholds for the weight progression models."""
        return ProgressionConfig(
            lookback_weeks=self.lookback_weeks,
            default_increment=self.default_increment,
            weight_resolution=self.weight_resolution,
            min_reps=self.double_progression_min_reps,
            max_reps=self.double_progression_max_reps,
            bodyweight_increment=self.bodyweight_increment,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide Settings, read from the environment once.

    Tests that change environment variables call get_settings.cache_clear().
    """
    return Settings()
