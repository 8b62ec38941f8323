"""
Stock category persistence descriptor. SQL lives in `sql/`.
"""

from __future__ import annotations

from pathlib import Path

from core.repository import EntitySpec

from .schemas import StockCategory

ENTITY = EntitySpec(
    name="stock_category",
    plural="stock_categories",
    label="stock category",
    list_key="categories",
    sql_dir=Path(__file__).parent / "sql",
    model=StockCategory,
    create_fields=("name", "description", "display_order", "is_active"),
    update_fields=("name", "description", "display_order", "is_active"),
    defaults={"display_order": 0, "is_active": True},
    dependents="sub-categories or stock items",
)
