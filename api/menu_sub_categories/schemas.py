"""
Menu sub-category schemas.

A sub-category groups menu variants inside a category and says where they are
prepared (`kitchen` or `bar`).
"""

from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import Field

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel

ItemType = Literal["kitchen", "bar"]


class MenuSubCategory(EntityModel):
    name: str
    description: str | None = None
    category_id: UUID
    category_name: str | None = None
    item_type: str
    display_order: int
    is_active: bool


class MenuSubCategoryCreate(RequestModel):
    name: NonEmptyStr
    description: OptionalText | None = None
    category_id: UUID
    item_type: ItemType
    display_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class MenuSubCategoryUpdate(RequestModel):
    name: NonEmptyStr | None = None
    description: OptionalText | None = None
    category_id: UUID | None = None
    item_type: ItemType | None = None
    display_order: int | None = Field(default=None, ge=0)
    is_active: bool | None = None
