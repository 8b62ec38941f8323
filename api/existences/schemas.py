"""
Existence (stock batch) schemas.

An existence records units received against an invoice detail line for one
stock item. Only the running stock, expiry and batch number change afterwards.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from core.schemas import EntityModel, RequestModel

BatchNumber = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class Existence(EntityModel):
    invoice_detail_id: UUID
    stock_item_id: UUID
    stock_item_name: str | None = None
    units_purchased: float
    cost_per_unit: float
    total_cost: float
    expiry_date: date | None = None
    batch_number: str | None = None
    current_stock: float


class ExistenceCreate(RequestModel):
    invoice_detail_id: UUID
    stock_item_id: UUID
    units_purchased: float = Field(gt=0)
    cost_per_unit: float = Field(ge=0)
    expiry_date: date | None = None
    batch_number: BatchNumber | None = None


class ExistenceUpdate(RequestModel):
    current_stock: float | None = Field(default=None, ge=0)
    expiry_date: date | None = None
    batch_number: BatchNumber | None = None
