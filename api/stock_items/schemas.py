"""
Stock item schemas.

`current_stock` and `total_value` are maintained by the store (existences feed
them); clients cannot set them directly.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel

VALID_UNITS = ("kg", "g", "lb", "oz", "l", "ml", "unit", "dozen")


def _check_unit(value: str | None) -> str | None:
    if value is None:
        return None
    unit = value.strip().lower()
    if unit not in VALID_UNITS:
        raise ValueError(f"unit must be one of: {', '.join(VALID_UNITS)}")
    return unit


class StockItem(EntityModel):
    name: str
    unit: str
    description: str | None = None
    category_id: UUID | None = None
    category_name: str | None = None
    current_stock: float
    unit_cost: float | None = None
    total_value: float


class StockItemCreate(RequestModel):
    name: NonEmptyStr
    unit: NonEmptyStr
    description: OptionalText | None = None
    category_id: UUID | None = None
    unit_cost: float | None = Field(default=None, ge=0)

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, value: str | None) -> str | None:
        return _check_unit(value)


class StockItemUpdate(RequestModel):
    name: NonEmptyStr | None = None
    unit: NonEmptyStr | None = None
    description: OptionalText | None = None
    category_id: UUID | None = None
    unit_cost: float | None = Field(default=None, ge=0)

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, value: str | None) -> str | None:
        return _check_unit(value)
