"""
Menu ingredient persistence descriptor. Lists are usually narrowed with
`?menu_variant_id=`.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import MenuIngredient

ENTITY = EntitySpec(
    name="menu_ingredient",
    plural="menu_ingredients",
    label="menu ingredient",
    list_key="ingredients",
    sql_dir=Path(__file__).parent / "sql",
    model=MenuIngredient,
    create_fields=(
        "menu_variant_id",
        "stock_variant_id",
        "menu_sub_category_id",
        "quantity",
        "is_optional",
        "notes",
    ),
    update_fields=("quantity", "is_optional", "notes"),
    defaults={"is_optional": False},
    parent_param="menu_variant_id",
    parent_type=UUID,
)
