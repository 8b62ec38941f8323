"""
Purchase invoice schemas.

The invoice number and supplier are fixed once an invoice is recorded; dates,
amount, status and notes can change.
"""

from __future__ import annotations

from datetime import date
from typing import Literal
from uuid import UUID

from pydantic import Field, model_validator

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel

InvoiceStatus = Literal["pending", "paid", "cancelled"]


class PurchaseInvoice(EntityModel):
    invoice_number: str
    supplier_id: UUID
    supplier_name: str | None = None
    invoice_date: date
    due_date: date | None = None
    total_amount: float | None = None
    status: str
    notes: str | None = None


class PurchaseInvoiceCreate(RequestModel):
    invoice_number: NonEmptyStr
    supplier_id: UUID
    invoice_date: date
    due_date: date | None = None
    total_amount: float | None = Field(default=None, ge=0)
    status: InvoiceStatus | None = None
    notes: OptionalText | None = None

    @model_validator(mode="after")
    def check_due_date(self) -> PurchaseInvoiceCreate:
        if self.due_date is not None and self.due_date < self.invoice_date:
            raise ValueError("due_date cannot be before invoice_date")
        return self


class PurchaseInvoiceUpdate(RequestModel):
    invoice_date: date | None = None
    due_date: date | None = None
    total_amount: float | None = Field(default=None, ge=0)
    status: InvoiceStatus | None = None
    notes: OptionalText | None = None
