"""Pal use cases: ordered records with sequential identifiers."""

from __future__ import annotations

import logging
from typing import Optional

from pals_api.core.errors import (
    NotFoundError,
    PersistenceError,
    ValidationError,
    missing_fields,
)
from pals_api.domain.pal_ids import next_pal_id
from pals_api.repositories.json_storage import JsonDocument, empty_pals, pal_defaults

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "elements")


class PalStore:
    """In-memory pal collection mirrored to a `{"pals": [...]}` document.

    Every mutation rewrites the whole document before returning. There is no
    locking: the store assumes a single writer.
    """

    def __init__(self, document: JsonDocument, data: Optional[dict] = None) -> None:
        self.document = document
        self._data = pal_defaults(data if data is not None else empty_pals())

    @classmethod
    def load(cls, document: JsonDocument) -> "PalStore":
        store = cls(document, document.load())
        logger.info("Loaded %d pals from %s", len(store.pals), document.path)
        return store

    @property
    def pals(self) -> list[dict]:
        return self._data["pals"]

    def _index_of(self, pal_id: str) -> int:
        for index, pal in enumerate(self.pals):
            if pal.get("id") == pal_id:
                return index
        raise NotFoundError.pal(pal_id)

    def _persist(self) -> None:
        self.document.save(self._data)

    def list(self) -> dict:
        return self._data

    def get(self, pal_id: str) -> dict:
        return self.pals[self._index_of(pal_id)]

    def create(self, record: dict) -> dict:
        missing = missing_fields(record, REQUIRED_FIELDS)
        if missing:
            raise ValidationError(missing)
        last_id = self.pals[-1].get("id") if self.pals else None
        try:
            new_id = next_pal_id(last_id)
        except ValueError as exc:
            raise PersistenceError(str(exc)) from exc
        pal = dict(record)
        pal["id"] = new_id
        self.pals.append(pal)
        self._persist()
        logger.info("Created pal %s (%s)", new_id, pal.get("name"))
        return pal

    def update(self, pal_id: str, partial: dict) -> dict:
        index = self._index_of(pal_id)
        merged = {**self.pals[index], **partial, "id": pal_id}
        self.pals[index] = merged
        self._persist()
        logger.info("Updated pal %s", pal_id)
        return merged

    def delete(self, pal_id: str) -> dict:
        index = self._index_of(pal_id)
        removed = self.pals.pop(index)
        self._persist()
        logger.info("Deleted pal %s", pal_id)
        return removed
