"""
Pydantic building blocks shared by the entity schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
OptionalText = Annotated[str, StringConstraints(max_length=2000)]


class RequestModel(BaseModel):
    """
    Base for create/update bodies: unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")


class EntityModel(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
