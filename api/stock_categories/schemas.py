"""
Stock category schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel


class StockCategory(EntityModel):
    name: str
    description: str | None = None
    display_order: int
    is_active: bool


class StockCategoryCreate(RequestModel):
    name: NonEmptyStr
    description: OptionalText | None = None
    display_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class StockCategoryUpdate(RequestModel):
    name: NonEmptyStr | None = None
    description: OptionalText | None = None
    display_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
