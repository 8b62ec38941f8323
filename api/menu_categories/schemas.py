"""
Menu category schemas.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel


class MenuCategory(EntityModel):
    name: str
    description: str | None = None
    display_order: int


class MenuCategoryCreate(RequestModel):
    name: NonEmptyStr
    description: OptionalText | None = None
    display_order: int | None = Field(default=None, ge=0)


class MenuCategoryUpdate(RequestModel):
    name: NonEmptyStr | None = None
    description: OptionalText | None = None
    display_order: int | None = Field(default=None, ge=0)
