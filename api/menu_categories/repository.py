"""
Menu category persistence descriptor.
"""

from __future__ import annotations

from pathlib import Path

from core.repository import EntitySpec

from .schemas import MenuCategory

ENTITY = EntitySpec(
    name="menu_category",
    plural="menu_categories",
    label="menu category",
    list_key="categories",
    sql_dir=Path(__file__).parent / "sql",
    model=MenuCategory,
    create_fields=("name", "description", "display_order"),
    update_fields=("name", "description", "display_order"),
    defaults={"display_order": 0},
    dependents="menu sub-categories",
)
