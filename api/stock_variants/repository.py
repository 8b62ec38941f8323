"""
Stock variant persistence descriptor.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import StockVariant

ENTITY = EntitySpec(
    name="stock_variant",
    plural="stock_variants",
    label="stock variant",
    list_key="variants",
    sql_dir=Path(__file__).parent / "sql",
    model=StockVariant,
    create_fields=("name", "stock_sub_category_id", "invoice_id", "unit", "number_of_units", "is_active"),
    update_fields=("name", "unit", "number_of_units", "is_active"),
    defaults={"number_of_units": 0, "is_active": True},
    parent_param="sub_category_id",
    parent_type=UUID,
    dependents="menu ingredients",
)
