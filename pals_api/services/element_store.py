"""Element use cases: a name -> url mapping."""

from __future__ import annotations

import logging
from typing import Optional

from pals_api.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    missing_fields,
)
from pals_api.repositories.json_storage import JsonDocument

logger = logging.getLogger(__name__)


class ElementStore:
    """In-memory element mapping mirrored to a flat JSON object.

    Lookups by get() ignore case; create/update/delete match the exact key,
    so "Fire" and "fire" may coexist.
    """

    def __init__(self, document: JsonDocument, data: Optional[dict] = None) -> None:
        self.document = document
        self._elements = data if data is not None else {}

    @classmethod
    def load(cls, document: JsonDocument) -> "ElementStore":
        store = cls(document, document.load())
        logger.info("Loaded %d elements from %s", len(store._elements), document.path)
        return store

    def _persist(self) -> None:
        self.document.save(self._elements)

    def list(self) -> dict:
        return self._elements

    def get(self, name: str) -> dict:
        wanted = name.casefold()
        for key, url in self._elements.items():
            if key.casefold() == wanted:
                return {"name": key, "url": url}
        raise NotFoundError.element(name)

    def create(self, name: Optional[str], url: Optional[str]) -> dict:
        missing = missing_fields({"name": name, "url": url}, ("name", "url"))
        if missing:
            raise ValidationError(missing)
        name = str(name)
        if name in self._elements:
            raise ConflictError(name)
        self._elements[name] = url
        self._persist()
        logger.info("Created element %s", name)
        return {"name": name, "url": url}

    def update(self, name: str, url: Optional[str]) -> dict:
        if not url:
            raise ValidationError(["url"])
        if name not in self._elements:
            raise NotFoundError.element(name)
        self._elements[name] = url
        self._persist()
        logger.info("Updated element %s", name)
        return {"name": name, "url": url}

    def delete(self, name: str) -> dict:
        if name not in self._elements:
            raise NotFoundError.element(name)
        url = self._elements.pop(name)
        self._persist()
        logger.info("Deleted element %s", name)
        return {"name": name, "url": url}
