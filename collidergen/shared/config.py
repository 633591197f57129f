"""
Configuration management for collidergen.

Loads settings from collidergen.yaml and environment variables.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from collidergen.shared.models import (
    Connectivity,
    CoordinateMode,
    ExecutionMode,
    HeightfieldSide,
    ShapeKind,
)


class GenerationConfig(BaseModel):
    """Collider generation options."""

    shape_kinds: list[ShapeKind] = Field(
        default_factory=lambda: [ShapeKind.POLYLINE],
        min_length=1,
    )
    decimation_tolerance: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Max distance of a dropped polyline vertex from its neighbours' line",
    )
    execution_mode: ExecutionMode = ExecutionMode.SEQUENTIAL
    max_workers: Optional[int] = Field(default=None, ge=1)
    connectivity: Connectivity = Connectivity.EIGHT
    coordinate_mode: CoordinateMode = CoordinateMode.TRANSLATED
    heightfield_side: HeightfieldSide = HeightfieldSide.TOP
    max_hull_vertices: Optional[int] = Field(
        default=None,
        ge=3,
        description="Vertex budget for convex polyline colliders",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """
    Main settings class for collidergen.

    Values from the YAML config file are passed in explicitly; anything the
    file leaves out is read from ``COLLIDERGEN_*`` environment variables,
    then from the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLIDERGEN_",
        env_nested_delimiter="__",
    )

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def is_parallel(self) -> bool:
        """Check if regions are processed on a worker pool."""
        return self.generation.execution_mode == ExecutionMode.PARALLEL


def load_config_file(config_path: Optional[Path] = None) -> dict[str, Any]:
    """
    Load collidergen options from YAML.

    Looks for config files in order and reads only the first one found:
    1. Provided path
    2. config/collidergen.local.yaml (user's local overrides)
    3. config/collidergen.yaml (shipped defaults, all commented out)

    An empty or fully commented file yields an empty dict, which leaves
    every option to the environment and the model defaults.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Raw ``generation`` / ``logging`` sections as parsed
    """
    project_root = Path(__file__).parent.parent.parent
    config_dir = project_root / "config"

    config_files = [
        config_path,
        config_dir / "collidergen.local.yaml",
        config_dir / "collidergen.yaml",
    ]

    for cfg_file in config_files:
        if cfg_file and cfg_file.exists():
            with open(cfg_file) as f:
                return yaml.safe_load(f) or {}

    return {}


@lru_cache()
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get collidergen settings, cached per config path.

    YAML values are passed to ``Settings`` as init arguments, so a key set
    in the file wins over its ``COLLIDERGEN_*`` environment variable. Keys
    the file leaves out still come from the environment.

    Args:
        config_path: Optional path to config file

    Returns:
        Settings instance shared by every handler built without explicit settings
    """
    config_data = load_config_file(Path(config_path) if config_path else None)
    return Settings(**config_data)


def reload_settings(config_path: Optional[str] = None) -> Settings:
    """
    Drop every cached Settings and build a fresh one.

    Needed after editing the YAML file or the environment, since handlers
    created without explicit settings otherwise keep the cached values.
    """
    get_settings.cache_clear()
    return get_settings(config_path)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the logging section of the settings to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.logging.level.upper(),
        format=settings.logging.format,
    )
