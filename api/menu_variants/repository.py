"""
Menu variant persistence descriptor.

Lists can be narrowed with `?sub_category_id=`. Rows carry the sub-category
name and its item type.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import MenuVariant

_FIELDS = (
    "name",
    "description",
    "sub_category_id",
    "price",
    "happy_hour_price",
    "image_url",
    "is_available",
    "preparation_time",
    "is_alcoholic",
    "display_order",
)

ENTITY = EntitySpec(
    name="menu_variant",
    plural="menu_variants",
    label="menu variant",
    list_key="variants",
    sql_dir=Path(__file__).parent / "sql",
    model=MenuVariant,
    create_fields=_FIELDS,
    update_fields=_FIELDS,
    defaults={"is_available": True, "is_alcoholic": False, "display_order": 0},
    parent_param="sub_category_id",
    parent_type=UUID,
    dependents="menu ingredients",
)
