"""Error taxonomy raised by the stores and rendered by the routers."""

from __future__ import annotations

from typing import Iterable


class StoreError(Exception):
    def __init__(self, message: str, code: str = "internal", status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(StoreError):
    """Raised when required input fields are missing or empty."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        label = "Missing required fields" if len(self.missing) > 1 else "Missing required field"
        super().__init__(label, "validation", 400)

    def to_body(self) -> dict:
        return {"error": self.message, "required": list(self.missing)}


class NotFoundError(StoreError):
    """Raised when no record matches the requested key."""

    def __init__(self, kind: str, key: str, detail: str):
        super().__init__(f"{kind} not found", "not_found", 404)
        self.kind = kind
        self.key = key
        self.detail = detail

    @classmethod
    def pal(cls, pal_id: str) -> "NotFoundError":
        return cls("Pal", pal_id, f"No pal found with ID: {pal_id}")

    @classmethod
    def element(cls, name: str) -> "NotFoundError":
        return cls("Element", name, f"No element found with name: {name}")

    def to_body(self) -> dict:
        return {"error": self.message, "message": self.detail}


class ConflictError(StoreError):
    """Raised when an element is created under an exact key already in use."""

    def __init__(self, name: str):
        super().__init__("Element already exists", "conflict", 409)
        self.name = name

    def to_body(self) -> dict:
        return {"error": self.message, "message": f"Element '{self.name}' already exists"}


class PersistenceError(StoreError):
    """Raised when a document cannot be written (message kept verbatim)."""

    def __init__(self, message: str):
        super().__init__(message, "internal", 500)


def missing_fields(payload: dict, required: Iterable[str]) -> list[str]:
    """Return the required fields that are absent or empty in payload, in order."""
    return [field for field in required if not payload.get(field)]
