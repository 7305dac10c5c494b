from __future__ import annotations

import pytest

from cubecore.config import ENV_LOG_LEVEL, ENV_SIZE, CubeConfig


def test_defaults_when_environment_is_empty() -> None:
    assert CubeConfig.from_env({}) == CubeConfig(size=3, log_level="WARNING")


def test_values_are_read_from_environment() -> None:
    config = CubeConfig.from_env({ENV_SIZE: " 5 ", ENV_LOG_LEVEL: "debug"})
    assert config.size == 5
    assert config.log_level == "DEBUG"


def test_invalid_size_names_the_variable() -> None:
    with pytest.raises(ValueError, match=ENV_SIZE):
        CubeConfig.from_env({ENV_SIZE: "three"})
    with pytest.raises(ValueError, match=ENV_SIZE):
        CubeConfig.from_env({ENV_SIZE: "0"})


def test_invalid_log_level_names_the_variable() -> None:
    with pytest.raises(ValueError, match=ENV_LOG_LEVEL):
        CubeConfig.from_env({ENV_LOG_LEVEL: "LOUD"})


def test_direct_construction_is_validated() -> None:
    with pytest.raises(ValueError):
        CubeConfig(size=0)
    with pytest.raises(ValueError):
        CubeConfig(log_level="verbose")
