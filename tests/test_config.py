"""Tests for settings loading."""

import logging

import pytest
from pydantic import ValidationError

from collidergen.shared.config import (
    GenerationConfig,
    LoggingConfig,
    Settings,
    configure_logging,
    get_settings,
    load_config_file,
    reload_settings,
)
from collidergen.shared.models import (
    Connectivity,
    CoordinateMode,
    ExecutionMode,
    HeightfieldSide,
    ShapeKind,
)


def test_defaults():
    """Test default generation options."""
    config = GenerationConfig()

    assert config.shape_kinds == [ShapeKind.POLYLINE]
    assert config.decimation_tolerance is None
    assert config.execution_mode == ExecutionMode.SEQUENTIAL
    assert config.connectivity == Connectivity.EIGHT
    assert config.coordinate_mode == CoordinateMode.TRANSLATED
    assert config.heightfield_side == HeightfieldSide.TOP
    assert config.max_hull_vertices is None


def test_invalid_values_rejected():
    """Test validation of option ranges."""
    with pytest.raises(ValidationError):
        GenerationConfig(shape_kinds=[])
    with pytest.raises(ValidationError):
        GenerationConfig(decimation_tolerance=-0.5)
    with pytest.raises(ValidationError):
        GenerationConfig(max_hull_vertices=2)
    with pytest.raises(ValidationError):
        GenerationConfig(shape_kinds=["sphere"])


def test_environment_overrides(monkeypatch):
    """Test nested environment variables."""
    monkeypatch.setenv("COLLIDERGEN_GENERATION__EXECUTION_MODE", "parallel")
    monkeypatch.setenv("COLLIDERGEN_LOGGING__LEVEL", "DEBUG")

    settings = Settings()

    assert settings.is_parallel
    assert settings.logging.level == "DEBUG"


def test_yaml_config_file(tmp_path):
    """Test loading settings from an explicit YAML file."""
    path = tmp_path / "collidergen.yaml"
    path.write_text(
        "generation:\n"
        "  shape_kinds: [heightfield, convex_hull]\n"
        "  connectivity: 4\n"
        "  coordinate_mode: raw\n"
    )

    assert load_config_file(path)["generation"]["connectivity"] == 4

    try:
        settings = reload_settings(str(path))
        assert settings.generation.shape_kinds == [
            ShapeKind.HEIGHTFIELD,
            ShapeKind.CONVEX_HULL,
        ]
        assert settings.generation.connectivity == Connectivity.FOUR
        assert settings.generation.coordinate_mode == CoordinateMode.RAW
        assert get_settings(str(path)) is settings
    finally:
        get_settings.cache_clear()


def test_configure_logging_applies_level(monkeypatch):
    """Test that the logging section reaches logging.basicConfig."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(Settings(logging=LoggingConfig(level="debug")))

    assert calls == [{"level": "DEBUG", "format": LoggingConfig().format}]


def test_yaml_values_beat_environment(tmp_path, monkeypatch):
    """Test that file values win while unset keys still come from the environment."""
    path = tmp_path / "collidergen.yaml"
    path.write_text("generation:\n  connectivity: 4\n")
    monkeypatch.setenv("COLLIDERGEN_GENERATION__CONNECTIVITY", "8")
    monkeypatch.setenv("COLLIDERGEN_GENERATION__EXECUTION_MODE", "parallel")

    try:
        settings = reload_settings(str(path))
        assert settings.generation.connectivity == Connectivity.FOUR
        assert settings.is_parallel
    finally:
        get_settings.cache_clear()
