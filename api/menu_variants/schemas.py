"""
Menu variant schemas. A variant is the orderable item with its price.
"""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel

ImageUrl = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=2000)]


class MenuVariant(EntityModel):
    name: str
    description: str | None = None
    sub_category_id: UUID
    sub_category_name: str | None = None
    item_type: str | None = None
    price: float
    happy_hour_price: float | None = None
    image_url: str | None = None
    is_available: bool
    preparation_time: int | None = None
    is_alcoholic: bool
    display_order: int


class MenuVariantCreate(RequestModel):
    name: NonEmptyStr
    description: OptionalText | None = None
    sub_category_id: UUID
    price: float = Field(ge=0)
    happy_hour_price: float | None = Field(default=None, ge=0)
    image_url: ImageUrl | None = None
    is_available: bool | None = None
    preparation_time: int | None = Field(default=None, ge=0)
    is_alcoholic: bool | None = None
    display_order: int | None = Field(default=None, ge=0)


class MenuVariantUpdate(RequestModel):
    name: NonEmptyStr | None = None
    description: OptionalText | None = None
    sub_category_id: UUID | None = None
    price: float | None = Field(default=None, ge=0)
    happy_hour_price: float | None = Field(default=None, ge=0)
    image_url: ImageUrl | None = None
    is_available: bool | None = None
    preparation_time: int | None = Field(default=None, ge=0)
    is_alcoholic: bool | None = None
    display_order: int | None = Field(default=None, ge=0)
