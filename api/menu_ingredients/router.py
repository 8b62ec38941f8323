"""
Menu ingredient endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import MenuIngredientCreate, MenuIngredientUpdate

router = build_crud_router(ENTITY, create_model=MenuIngredientCreate, update_model=MenuIngredientUpdate)
