"""
Package Configuration

Uses Pydantic Settings for type-safe configuration.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Package root: workout_gpx/
PACKAGE_ROOT = Path(__file__).parent
# Bundled sample tracks: workout_gpx/samples/
SAMPLES_DIR = PACKAGE_ROOT / "samples"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Package settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Units ===
    use_metric_system: bool = Field(
        default=True,
        description="Show distances in km (True) or miles (False)"
    )

    # === Export ===
    gpx_creator: str = Field(
        default="WorkoutGPX",
        description="Value of the creator attribute in generated GPX files"
    )
    export_dir: Optional[Path] = Field(
        default=None,
        description="Default directory for exported GPX files"
    )

    # === Samples ===
    samples_dir: Path = Field(
        default=SAMPLES_DIR,
        description="Directory with bundled sample GPX tracks"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case, reject unknown level names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


def configure_logging(config: Optional[Settings] = None) -> None:
    """Set up root logging to stdout using the configured level."""
    config = config or settings
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


# Global settings instance
settings = Settings()
