"""
Configuration helpers for the Pals & Elements backend.

Routers and services read a Settings object instead of fetching os.environ
directly, so tests can point the stores at temporary files.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_DIR = ROOT_DIR / "data"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    pals_file: Path
    elements_file: Path
    host: str
    port: int
    log_level: str
    json_indent: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    data_dir = _path(os.getenv("PALS_DATA_DIR"), DEFAULT_DATA_DIR)
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=data_dir,
        pals_file=_path(os.getenv("PALS_FILE"), data_dir / "pals.json"),
        elements_file=_path(os.getenv("ELEMENTS_FILE"), data_dir / "elements.json"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "3001"), 3001),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        json_indent=_int(os.getenv("JSON_INDENT", "4"), 4),
    )
