"""
Centralized settings management using pydantic-settings.

All environment variables that tune an outfit generation run are defined here.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Generator settings loaded from environment variables.

    Optional environment variables:
        - TARGET_OUTFITS: Number of new outfits aimed for (default: 250)
        - QUOTA_REFINED / QUOTA_CROSSOVER / QUOTA_ADVENTURER: Capsule shares
        - MIN_COMBO_SCORE: Score floor for generated candidates (default: 1.2)
        - WARDROBE_PATH / OUTFITS_PATH: Default input/output documents
        - LOG_LEVEL, JSON_LOGS: Logging output
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    # ==========================================================================
    # Paths
    # ==========================================================================
    wardrobe_path: Path = Field(
        default=Path("./src/data/wardrobe.json"),
        description="Wardrobe catalog document",
    )
    outfits_path: Path = Field(
        default=Path("./src/data/outfits.json"),
        description="Outfit corpus document (read and rewritten in place)",
    )

    @field_validator("wardrobe_path", "outfits_path", mode="before")
    @classmethod
    def parse_path(cls, v):
        if isinstance(v, str):
            return Path(v)
        return v

    # ==========================================================================
    # Generation targets
    # ==========================================================================
    target_outfits: int = Field(
        default=250,
        description="Number of new outfits the selector aims for",
    )
    min_combo_score: float = Field(
        default=1.2,
        description="Candidates scoring below this are discarded",
    )

    @field_validator("target_outfits")
    @classmethod
    def check_target(cls, v: int) -> int:
        if v < 0:
            raise ValueError("target_outfits must be non-negative")
        return v

    # ==========================================================================
    # Capsule quotas (fractions of target_outfits, enforced in pass 1)
    # ==========================================================================
    quota_refined: float = Field(default=0.40, description="Refined share")
    quota_crossover: float = Field(default=0.35, description="Crossover share")
    quota_adventurer: float = Field(default=0.25, description="Adventurer share")

    @field_validator("quota_refined", "quota_crossover", "quota_adventurer")
    @classmethod
    def check_quota(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("capsule quota must be between 0 and 1")
        return v

    @property
    def capsule_quotas(self) -> Dict[str, float]:
        return {
            "Refined": self.quota_refined,
            "Crossover": self.quota_crossover,
            "Adventurer": self.quota_adventurer,
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and .env file.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    # Try to find .env file in project root
    env_file = Path(__file__).parent.parent.parent / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.

    Args:
        **overrides: Setting values to override

    Returns:
        Settings: A new settings instance with overrides applied
    """
    return Settings(_env_file=None, **overrides)
