# tests/test_config.py

from __future__ import annotations

import pytest

from name_validator import config as config_module
from name_validator.config import NVConfig, get_config, load_config, reset_config


@pytest.fixture
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults_when_sections_missing():
    cfg = NVConfig({})
    assert cfg.chunk_size == config_module.DEFAULT_CHUNK_SIZE
    assert cfg.workers == 1
    assert cfg.debug is False


def test_repo_config_is_loaded(fresh_config):
    cfg = get_config()
    assert cfg.chunk_size == 100
    assert cfg.logging.get("file") == "name_validator.log"


def test_env_override(tmp_path, monkeypatch, fresh_config):
    path = tmp_path / "custom.yml"
    path.write_text("batch:\n  chunk_size: 7\n  workers: 3\ndebug: true\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))

    cfg = load_config()
    assert cfg.chunk_size == 7
    assert cfg.workers == 3
    assert cfg.debug is True


def test_env_override_missing_file(tmp_path, monkeypatch, fresh_config):
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(tmp_path / "missing.yml"))
    with pytest.raises(FileNotFoundError):
        load_config()

