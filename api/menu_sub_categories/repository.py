"""
Menu sub-category persistence descriptor.

Lists can be narrowed with `?category_id=`. A sub-category is kept while menu
variants belong to it or menu ingredients point at it.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import MenuSubCategory

ENTITY = EntitySpec(
    name="menu_sub_category",
    plural="menu_sub_categories",
    label="menu sub-category",
    list_key="sub_categories",
    sql_dir=Path(__file__).parent / "sql",
    model=MenuSubCategory,
    create_fields=("name", "description", "category_id", "item_type", "display_order", "is_active"),
    update_fields=("name", "description", "category_id", "item_type", "display_order", "is_active"),
    defaults={"display_order": 0, "is_active": True},
    parent_param="category_id",
    parent_type=UUID,
    dependents="menu variants or menu ingredients",
)
