"""
Menu ingredient schemas.

An ingredient of a menu variant points either at a stock variant or at a menu
sub-category, never both.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, computed_field, model_validator

from core.schemas import EntityModel, OptionalText, RequestModel


class MenuIngredient(EntityModel):
    menu_variant_id: UUID
    stock_variant_id: UUID | None = None
    stock_variant_name: str | None = None
    menu_sub_category_id: UUID | None = None
    quantity: float
    is_optional: bool
    notes: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ingredient_type(self) -> str:
        return "stock" if self.stock_variant_id is not None else "menu"


class MenuIngredientCreate(RequestModel):
    menu_variant_id: UUID
    stock_variant_id: UUID | None = None
    menu_sub_category_id: UUID | None = None
    quantity: float = Field(gt=0)
    is_optional: bool | None = None
    notes: OptionalText | None = None

    @model_validator(mode="after")
    def check_single_source(self) -> MenuIngredientCreate:
        has_stock = self.stock_variant_id is not None
        has_menu = self.menu_sub_category_id is not None
        if has_stock and has_menu:
            raise ValueError("cannot specify both stock_variant_id and menu_sub_category_id")
        if not has_stock and not has_menu:
            raise ValueError("must specify either stock_variant_id or menu_sub_category_id")
        return self


class MenuIngredientUpdate(RequestModel):
    quantity: float | None = Field(default=None, gt=0)
    is_optional: bool | None = None
    notes: OptionalText | None = None
