from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from pals_api.core.errors import StoreError
from pals_api.core.utils import ensure_finite, error_response, internal_error_response
from pals_api.services.pal_store import PalStore

router = APIRouter(prefix="/api/pals", tags=["pals"])
logger = logging.getLogger(__name__)

PAL_EXAMPLE = {"name": "Bob", "elements": ["Fire"]}


def _get_pal_store(request: Request) -> PalStore:
    store = getattr(getattr(request.app, "state", None), "pal_store", None)
    if store is None:
        raise RuntimeError("PalStore nao configurado")
    return store


@router.get("")
async def list_pals(request: Request):
    store = _get_pal_store(request)
    try:
        return store.list()
    except Exception as exc:
        logger.exception("Unexpected failure listing pals")
        return internal_error_response(exc)


@router.get("/{pal_id}")
async def get_pal(pal_id: str, request: Request):
    store = _get_pal_store(request)
    try:
        pal = store.get(pal_id)
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure reading pal %s", pal_id)
        return internal_error_response(exc)
    return {"pal": pal}


@router.post("")
async def create_pal(
    request: Request,
    payload: Optional[dict[str, Any]] = Body(None, examples=[PAL_EXAMPLE]),
):
    store = _get_pal_store(request)
    try:
        pal = store.create(ensure_finite(payload or {}))
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure creating pal")
        return internal_error_response(exc)
    return JSONResponse({"message": "Pal created successfully", "pal": pal}, status_code=201)


@router.put("/{pal_id}")
async def update_pal(
    pal_id: str,
    request: Request,
    payload: Optional[dict[str, Any]] = Body(None, examples=[{"elements": ["Fire", "Dark"]}]),
):
    store = _get_pal_store(request)
    try:
        pal = store.update(pal_id, ensure_finite(payload or {}))
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure updating pal %s", pal_id)
        return internal_error_response(exc)
    return {"message": "Pal updated successfully", "pal": pal}


@router.delete("/{pal_id}")
async def delete_pal(pal_id: str, request: Request):
    store = _get_pal_store(request)
    try:
        pal = store.delete(pal_id)
    except StoreError as exc:
        return error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected failure deleting pal %s", pal_id)
        return internal_error_response(exc)
    return {"message": "Pal deleted successfully", "pal": pal}
