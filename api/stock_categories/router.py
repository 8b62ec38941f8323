"""
Stock category endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import StockCategoryCreate, StockCategoryUpdate

router = build_crud_router(ENTITY, create_model=StockCategoryCreate, update_model=StockCategoryUpdate)
