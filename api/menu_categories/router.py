"""
Menu category endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import MenuCategoryCreate, MenuCategoryUpdate

router = build_crud_router(ENTITY, create_model=MenuCategoryCreate, update_model=MenuCategoryUpdate)
