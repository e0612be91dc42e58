"""Configuration: env, settings.json, prompt and history paths."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_PROMPT = "> "


@dataclass
class Config:
    prompt: str = DEFAULT_PROMPT
    global_dir: Path = field(default_factory=lambda: Path.home() / ".declcli")
    history_file: Path | None = None  # None = global_dir/history
    verbose: bool = False
    log_file: Path | None = None

    @property
    def history_path(self) -> Path:
        if self.history_file is not None:
            return self.history_file
        return self.global_dir / "history"


def _apply_settings(config: Config, path: Path) -> None:
    """Apply a single settings.json file to config."""
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"invalid settings file {path}: expected a JSON object")

    if "prompt" in data:
        if not isinstance(data["prompt"], str):
            raise ConfigError(f"invalid settings file {path}: 'prompt' must be a string")
        config.prompt = data["prompt"]
    if data.get("historyFile"):
        config.history_file = Path(data["historyFile"]).expanduser()
    if data.get("logFile"):
        config.log_file = Path(data["logFile"]).expanduser()


def load_config(
    prompt: str | None = None,
    verbose: bool = False,
    global_dir: Path | None = None,
) -> Config:
    """Load config with priority: CLI args > env > .env > settings.json > defaults."""
    load_dotenv()

    config = Config() if global_dir is None else Config(global_dir=global_dir)
    config.verbose = verbose

    _apply_settings(config, config.global_dir / "settings.json")

    if env_prompt := os.getenv("DECLCLI_PROMPT"):
        config.prompt = env_prompt
    if env_history := os.getenv("DECLCLI_HISTORY"):
        config.history_file = Path(env_history).expanduser()
    if env_log := os.getenv("DECLCLI_LOG_FILE"):
        config.log_file = Path(env_log).expanduser()

    if prompt is not None:
        config.prompt = prompt

    return config
