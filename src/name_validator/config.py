import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "name_validator.yml"
CONFIG_ENV_VAR = "NAME_VALIDATOR_CONFIG"

DEFAULT_CHUNK_SIZE = 100
DEFAULT_WORKERS = 1


class NVConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.batch = data.get("batch", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def chunk_size(self) -> int:
        return int(self.batch.get("chunk_size", DEFAULT_CHUNK_SIZE))

    @property
    def workers(self) -> int:
        return int(self.batch.get("workers", DEFAULT_WORKERS))


def _resolve_config_path() -> tuple[Path, bool]:
    """Return (path, explicit) where explicit means the user pointed at it."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override), True
    return CONFIG_PATH, False


def load_config() -> 'NVConfig':
    path, explicit = _resolve_config_path()
    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed without the repo's config/ directory: run on defaults.
        return NVConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return NVConfig(data)


_config_cache = None


def get_config() -> 'NVConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
