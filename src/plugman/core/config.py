"""Configuration: env, paths, telemetry host."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

VERSION = "0.1.0"
DEFAULT_HOST = "plugman.dev"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Config:
    global_dir: Path = field(default_factory=lambda: Path.home() / ".plugman")
    host: str = DEFAULT_HOST
    user_agent: str = f"plugman/{VERSION}"
    telemetry_timeout: float = 5.0
    telemetry_background: bool = False
    git_timeout: float = 120
    verbose: bool = False

    @property
    def plugins_dir(self) -> Path:
        return self.global_dir / "plugins"

    @property
    def settings_path(self) -> Path:
        return self.global_dir / "settings.json"


def _apply_settings(config: Config, path: Path) -> None:
    """Apply a single settings.json file to config."""
    if not path.exists():
        return
    data = json.loads(path.read_text())
    if "host" in data:
        config.host = data["host"]
    if "userAgent" in data:
        config.user_agent = data["userAgent"]
    if "telemetryTimeout" in data:
        config.telemetry_timeout = float(data["telemetryTimeout"])
    if "telemetryBackground" in data:
        config.telemetry_background = bool(data["telemetryBackground"])
    if "gitTimeout" in data:
        config.git_timeout = float(data["gitTimeout"])


def load_config(verbose: bool = False) -> Config:
    """Load config with priority: CLI args > env > .env > settings.json > defaults."""
    load_dotenv()

    config = Config()
    config.verbose = verbose

    if home := os.getenv("PLUGMAN_HOME"):
        config.global_dir = Path(home).expanduser()

    _apply_settings(config, config.settings_path)

    if host := os.getenv("PLUGMAN_HOST"):
        config.host = host
    if timeout := os.getenv("PLUGMAN_TELEMETRY_TIMEOUT"):
        config.telemetry_timeout = float(timeout)
    if background := os.getenv("PLUGMAN_TELEMETRY_BACKGROUND"):
        config.telemetry_background = background.strip().lower() in _TRUTHY

    return config
