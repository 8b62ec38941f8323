"""
Stock sub-category persistence descriptor.

Lists can be narrowed with `?category_id=`. A sub-category referenced by stock
variants cannot be deleted.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import StockSubCategory

ENTITY = EntitySpec(
    name="stock_sub_category",
    plural="stock_sub_categories",
    label="stock sub-category",
    list_key="sub_categories",
    sql_dir=Path(__file__).parent / "sql",
    model=StockSubCategory,
    create_fields=("name", "description", "stock_category_id", "display_order", "is_active"),
    update_fields=("name", "description", "display_order", "is_active"),
    defaults={"display_order": 0, "is_active": True},
    parent_param="category_id",
    parent_type=UUID,
    dependents="stock variants",
)
