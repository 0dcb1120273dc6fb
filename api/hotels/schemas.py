"""
Pydantic schemas for hotel endpoints.

Fields are optional: the `hotels` table constraints decide what is storable.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class CreateHotelRequest(BaseModel):
    name: str | None = None
    price: Decimal | None = None


class SearchHotelRequest(BaseModel):
    date: str | None = None
