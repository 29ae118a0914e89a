"""Unit tests for LoggerConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

from litelog import DEFAULT_MAX_FILE_SIZE, ConfigurationError, LoggerConfig


def test_defaults() -> None:
    config = LoggerConfig()
    assert config.log_dir is None
    assert config.max_file_size == DEFAULT_MAX_FILE_SIZE == 10_485_760
    assert config.create_dir is False
    assert config.track_client_origin is False


def test_string_directory_is_normalised() -> None:
    assert LoggerConfig(log_dir="/var/log/app").log_dir == Path("/var/log/app")
    assert LoggerConfig(log_dir="").log_dir is None


@pytest.mark.parametrize("size", [0, -1, True, "100"])
def test_invalid_max_file_size(size) -> None:
    with pytest.raises(ConfigurationError):
        LoggerConfig(max_file_size=size)


def test_from_env_reads_prefixed_values(tmp_path: Path) -> None:
    config = LoggerConfig.from_env(
        {
            "LITELOG_DIR": str(tmp_path),
            "LITELOG_MAX_FILE_SIZE": "2048",
            "LITELOG_CREATE_DIR": "yes",
            "LITELOG_TRACK_CLIENT_ORIGIN": "0",
        }
    )
    assert config.log_dir == tmp_path
    assert config.max_file_size == 2048
    assert config.create_dir is True
    assert config.track_client_origin is False


def test_from_env_empty_environment_gives_defaults() -> None:
    assert LoggerConfig.from_env({}) == LoggerConfig()


def test_from_env_custom_prefix(tmp_path: Path) -> None:
    config = LoggerConfig.from_env({"APP_LOG_DIR": str(tmp_path)}, prefix="APP_LOG_")
    assert config.log_dir == tmp_path


@pytest.mark.parametrize(
    "environ",
    [
        {"LITELOG_MAX_FILE_SIZE": "ten"},
        {"LITELOG_MAX_FILE_SIZE": "0"},
        {"LITELOG_CREATE_DIR": "maybe"},
    ],
)
def test_from_env_rejects_invalid_values(environ) -> None:
    with pytest.raises(ConfigurationError):
        LoggerConfig.from_env(environ)


def test_with_overrides_ignores_none(tmp_path: Path) -> None:
    base = LoggerConfig(log_dir=tmp_path, max_file_size=100)
    updated = base.with_overrides(max_file_size=None, create_dir=True)
    assert updated.max_file_size == 100
    assert updated.create_dir is True
    assert base.create_dir is False
