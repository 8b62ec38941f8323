"""
Stock variant schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from core.schemas import EntityModel, NonEmptyStr, RequestModel


class StockVariant(EntityModel):
    name: str
    stock_sub_category_id: UUID
    invoice_id: UUID | None = None
    unit: str
    number_of_units: float
    is_active: bool


class StockVariantCreate(RequestModel):
    name: NonEmptyStr
    stock_sub_category_id: UUID
    invoice_id: UUID | None = None
    unit: NonEmptyStr
    number_of_units: float = Field(default=0, ge=0)
    is_active: bool | None = None


class StockVariantUpdate(RequestModel):
    name: NonEmptyStr | None = None
    unit: NonEmptyStr | None = None
    number_of_units: float | None = Field(default=None, ge=0)
    is_active: bool | None = None
