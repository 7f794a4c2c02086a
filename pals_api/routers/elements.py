from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from pals_api.core.errors import StoreError
from pals_api.core.utils import ensure_finite, error_response, internal_error_response
from pals_api.services.element_store import ElementStore

router = APIRouter(prefix="/api/elements", tags=["elements"])
logger = logging.getLogger(__name__)


def _get_element_store(request: Request) -> ElementStore:
    store = getattr(getattr(request.app, "state", None), "element_store", None)
    if store is None:
        raise RuntimeError("ElementStore nao configurado")
    return store


@router.get("")
async def list_elements(request: Request):
    store = _get_element_store(request)
    try:
        return store.list()
    except Exception as exc:
        logger.exception("Unexpected failure listing elements")
        return internal_error_response(exc)


@router.get("/{name}")
async def get_element(name: str, request: Request):
    store = _get_element_store(request)
    try:
        return store.get(name)
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure reading element %s", name)
        return internal_error_response(exc)


@router.post("")
async def create_element(
    request: Request,
    payload: Optional[dict[str, Any]] = Body(None, examples=[{"name": "Fire", "url": "https://example.com/fire.png"}]),
):
    store = _get_element_store(request)
    try:
        payload = ensure_finite(payload or {})
        element = store.create(payload.get("name"), payload.get("url"))
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure creating element")
        return internal_error_response(exc)
    return JSONResponse({"message": "Element created successfully", "element": element}, status_code=201)


@router.put("/{name}")
async def update_element(
    name: str,
    request: Request,
    payload: Optional[dict[str, Any]] = Body(None, examples=[{"url": "https://example.com/fire.png"}]),
):
    store = _get_element_store(request)
    try:
        payload = ensure_finite(payload or {})
        element = store.update(name, payload.get("url"))
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure updating element %s", name)
        return internal_error_response(exc)
    return {"message": "Element updated successfully", "element": element}


@router.delete("/{name}")
async def delete_element(name: str, request: Request):
    store = _get_element_store(request)
    try:
        element = store.delete(name)
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure deleting element %s", name)
        return internal_error_response(exc)
    return {"message": "Element deleted successfully", "element": element}
