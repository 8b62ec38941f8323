"""
Stock item persistence descriptor.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import StockItem

ENTITY = EntitySpec(
    name="stock_item",
    plural="stock_items",
    label="stock item",
    list_key="items",
    sql_dir=Path(__file__).parent / "sql",
    model=StockItem,
    create_fields=("name", "unit", "description", "category_id", "unit_cost"),
    update_fields=("name", "unit", "description", "category_id", "unit_cost"),
    parent_param="category_id",
    parent_type=UUID,
    dependents="existences or invoice details",
)
