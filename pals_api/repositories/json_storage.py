"""
JSON-file persistence adapter.

Each store owns one JsonDocument: the whole file is read into memory once and
rewritten in full on every mutation. No partial writes or appends.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable
import json
import logging

from pals_api.core.errors import PersistenceError

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


class JsonDocument:
    """One addressable JSON document on disk."""

    def __init__(self, path: Path | str, default_factory: Callable[[], dict] = dict, indent: int = 4) -> None:
        self.path = Path(path)
        self.default_factory = default_factory
        self.indent = indent

    def load(self) -> dict:
        if self.path.exists():
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f, parse_constant=_reject_constant)
        logger.info("No document at %s, starting empty", self.path)
        return self.default_factory()

    def save(self, data: dict) -> None:
        try:
            text = json.dumps(data, ensure_ascii=False, indent=self.indent, allow_nan=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            raise PersistenceError(str(exc)) from exc


def empty_pals() -> dict:
    return {"pals": []}


def pal_defaults(doc: dict) -> dict:
    doc.setdefault("pals", [])
    return doc
