"""Load the user config file and env configuration."""
from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from jobhunter.log import get_logger
from jobhunter.models import ConfigError, UserConfig

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
DATA_DIR: Path = ROOT_DIR / "data"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def config_path() -> Path:
    override = get_env("JOBHUNTER_CONFIG")
    return Path(override) if override else CONFIG_DIR / "jobhunter.yaml"


def applications_log_path() -> Path:
    override = get_env("JOBHUNTER_LOG_PATH")
    return Path(override) if override else DATA_DIR / "applications.json"


def load_user_config(path: Path | None = None) -> UserConfig:
    """Read the YAML user config; a missing or unreadable file means no filters."""
    path = path or config_path()
    if not path.exists():
        log.debug("No user config at %s — all filters off", path)
        return UserConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Could not read user config %s: %s", path, exc)
        return UserConfig()

    try:
        return UserConfig.from_dict(data)
    except ConfigError as exc:
        log.warning("Ignoring invalid user config %s: %s", path, exc)
        return UserConfig()
