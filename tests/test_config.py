"""Tests for Config defaults and environment overrides."""

from pathlib import Path

import pytest

from heroengine.config import CATEGORIES, DEFAULT_CONFIG, Config, config_from_env


def test_defaults() -> None:
    assert DEFAULT_CONFIG.categories == CATEGORIES
    assert (DEFAULT_CONFIG.stat_min, DEFAULT_CONFIG.stat_max) == (0, 100)
    assert DEFAULT_CONFIG.port == 3000
    assert DEFAULT_CONFIG.data_path.name == "superheroes.json"


def test_empty_env_returns_base() -> None:
    assert config_from_env({}) is DEFAULT_CONFIG


def test_env_overrides() -> None:
    cfg = config_from_env(
        {
            "HEROENGINE_DATA": "/tmp/heroes.json",
            "HEROENGINE_HOST": "0.0.0.0",
            "PORT": "8080",
            "HEROENGINE_LOG_LEVEL": "debug",
        }
    )
    assert cfg.data_path == Path("/tmp/heroes.json")
    assert cfg.host == "0.0.0.0"
    assert cfg.port == 8080
    assert cfg.log_level == "DEBUG"


def test_test_port_wins_over_port() -> None:
    assert config_from_env({"TEST_PORT": "3002", "PORT": "8080"}).port == 3002


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_bad_port(port) -> None:
    with pytest.raises(ValueError):
        config_from_env({"PORT": port})


def test_base_is_respected() -> None:
    base = Config(port=9000)
    assert config_from_env({"HEROENGINE_HOST": "h"}, base=base).port == 9000
