"""
Menu variant endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import MenuVariantCreate, MenuVariantUpdate

router = build_crud_router(ENTITY, create_model=MenuVariantCreate, update_model=MenuVariantUpdate)
