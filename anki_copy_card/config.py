from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os

import yaml
from dotenv import dotenv_values


DEFAULT_TAGS = ["Immersion", "from::KanKenDeck"]


@dataclass
class Settings:
    ankiconnect_url: str = "http://localhost:8765"
    request_timeout: float = 10.0
    deck_name: str = "Immersion"
    model_name: str = "Immersion"
    tags: list[str] = field(default_factory=lambda: list(DEFAULT_TAGS))
    poll_interval_ms: int = 100
    log_level: str = "INFO"
    window_title: str = "Anki Copy Card"


def load_settings(config_path: str = "config.yaml") -> Settings:
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"
    config_file = Path(config_path)
    if not config_file.exists():
        config_file = project_root / config_path
    raw_env = dotenv_values(env_path) if env_path.exists() else {}
    env = {str(k).lstrip("\ufeff"): (v or "") for k, v in raw_env.items()}

    def get_env(name: str, default: str = "") -> str:
        # Process environment overrides .env file.
        v = os.getenv(name)
        if v is not None and v != "":
            return v.strip()
        return str(env.get(name, default)).replace("\ufeff", "").strip()

    cfg = {}
    if config_file.exists():
        with open(config_file, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}

    defaults = Settings()
    tags = cfg.get("tags", defaults.tags)
    if isinstance(tags, str):
        tags = [tags]

    return Settings(
        ankiconnect_url=get_env("ANKICONNECT_URL", defaults.ankiconnect_url),
        request_timeout=float(cfg.get("request_timeout", defaults.request_timeout)),
        deck_name=str(cfg.get("deck_name", defaults.deck_name)),
        model_name=str(cfg.get("model_name", defaults.model_name)),
        tags=[str(t) for t in tags],
        poll_interval_ms=int(cfg.get("poll_interval_ms", defaults.poll_interval_ms)),
        log_level=get_env("LOG_LEVEL", str(cfg.get("log_level", defaults.log_level))).upper(),
        window_title=str(cfg.get("window_title", defaults.window_title)),
    )
