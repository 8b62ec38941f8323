"""
Stock sub-category schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel


class StockSubCategory(EntityModel):
    name: str
    description: str | None = None
    stock_category_id: UUID
    display_order: int
    is_active: bool


class StockSubCategoryCreate(RequestModel):
    name: NonEmptyStr
    description: OptionalText | None = None
    stock_category_id: UUID
    display_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class StockSubCategoryUpdate(RequestModel):
    # The parent category is fixed at creation.
    name: NonEmptyStr | None = None
    description: OptionalText | None = None
    display_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
