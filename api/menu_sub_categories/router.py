"""
Menu sub-category endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import MenuSubCategoryCreate, MenuSubCategoryUpdate

router = build_crud_router(ENTITY, create_model=MenuSubCategoryCreate, update_model=MenuSubCategoryUpdate)
