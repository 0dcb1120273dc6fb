"""
Hotel API endpoints.

Every response is an envelope: {RespCode, RespMessage, Result}, with
RespCode mirrored in the HTTP status.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.db import Database, get_db

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


def envelope(code: int, result: Any) -> JSONResponse:
    body = {
        "RespCode": code,
        "RespMessage": "success" if code < 400 else "error",
        "Result": result,
    }
    return JSONResponse(status_code=code, content=jsonable_encoder(body))


async def _respond(operation: str, call: Awaitable[Any]) -> JSONResponse:
    try:
        result = await call
    except service.InvalidHotelIdError as exc:
        return envelope(400, str(exc))
    except Exception as exc:
        logger.exception("hotel_request_failed operation=%s", operation)
        return envelope(500, str(exc))
    return envelope(200, result)


@router.post("/api/create/hotel")
async def create_hotel(
    request: schemas.CreateHotelRequest,
    db: Database = Depends(get_db),
) -> JSONResponse:
    return await _respond("create", service.create_hotel(db, request))


@router.get("/api/listhotel")
async def list_hotels(db: Database = Depends(get_db)) -> JSONResponse:
    return await _respond("list", service.list_hotels(db))


@router.get("/api/listhotel/{hotel_id}")
async def get_hotel(hotel_id: str, db: Database = Depends(get_db)) -> JSONResponse:
    """
    Rows with this id. The whole segment must be an integer: "12abc" and
    "1.5" are rejected with 400 rather than read as 12 or 1.
    """
    return await _respond("get", service.list_hotels(db, hotel_id))


@router.post("/api/search/hotel")
async def search_hotels(
    request: schemas.SearchHotelRequest,
    db: Database = Depends(get_db),
) -> JSONResponse:
    return await _respond("search", service.search_hotels(db, request))


@router.get("/api/dashboard/hotel")
async def dashboard(db: Database = Depends(get_db)) -> JSONResponse:
    return await _respond("dashboard", service.dashboard(db))
