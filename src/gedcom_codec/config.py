import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_codec.yml"
CONFIG_ENV_VAR = "GEDCOM_CODEC_CONFIG"


class GPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.export = data.get("export", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'GPConfig':
    path = Path(path) if path is not None else config_path()

    # An installed copy without the project tree runs on defaults.
    if not path.exists():
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
