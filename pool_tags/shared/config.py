from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


DEFAULT_ENDPOINTS_FILE = Path(__file__).with_name("endpoints.json")


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_request_timeout_seconds: float
    endpoints_file: Path
    log_level: str


def get_settings() -> Settings:
    endpoints_file = _env("TAGS_ENDPOINTS_FILE", "")
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        endpoints_file=Path(endpoints_file) if endpoints_file else DEFAULT_ENDPOINTS_FILE,
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
