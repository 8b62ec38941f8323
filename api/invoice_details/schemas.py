"""
Invoice detail (purchase invoice line) schemas.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from core.schemas import EntityModel, NonEmptyStr, RequestModel

UnitOfMeasure = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
BatchNumber = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class InvoiceDetail(EntityModel):
    invoice_id: UUID
    stock_item_id: UUID | None = None
    stock_item_name: str | None = None
    description: str
    quantity: float
    unit_of_measure: str
    items_per_unit: float | None = None
    unit_price: float
    total_price: float
    expiry_date: date | None = None
    batch_number: str | None = None


class InvoiceDetailCreate(RequestModel):
    invoice_id: UUID
    stock_item_id: UUID | None = None
    description: NonEmptyStr
    quantity: float = Field(gt=0)
    unit_of_measure: UnitOfMeasure
    items_per_unit: float | None = Field(default=None, gt=0)
    unit_price: float = Field(ge=0)
    expiry_date: date | None = None
    batch_number: BatchNumber | None = None


class InvoiceDetailUpdate(RequestModel):
    # The owning invoice is fixed at creation.
    stock_item_id: UUID | None = None
    description: NonEmptyStr | None = None
    quantity: float | None = Field(default=None, gt=0)
    unit_of_measure: UnitOfMeasure | None = None
    items_per_unit: float | None = Field(default=None, gt=0)
    unit_price: float | None = Field(default=None, ge=0)
    expiry_date: date | None = None
    batch_number: BatchNumber | None = None
