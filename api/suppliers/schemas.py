"""
Supplier schemas.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel

Email = Annotated[str, StringConstraints(strip_whitespace=True, max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]


class Supplier(EntityModel):
    name: str
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None


class SupplierCreate(RequestModel):
    name: NonEmptyStr
    contact_name: NonEmptyStr | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: OptionalText | None = None


class SupplierUpdate(RequestModel):
    name: NonEmptyStr | None = None
    contact_name: NonEmptyStr | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: OptionalText | None = None
