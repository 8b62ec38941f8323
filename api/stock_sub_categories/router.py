"""
Stock sub-category endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import StockSubCategoryCreate, StockSubCategoryUpdate

router = build_crud_router(ENTITY, create_model=StockSubCategoryCreate, update_model=StockSubCategoryUpdate)
