"""
Service setting schemas: one key/value pair scoped to a service name.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import StringConstraints

from core.schemas import EntityModel, NonEmptyStr, OptionalText, RequestModel

SettingValue = Annotated[str, StringConstraints(max_length=4000)]


class Setting(EntityModel):
    service: str
    key: str
    value: str
    description: str | None = None


class SettingCreate(RequestModel):
    service: NonEmptyStr
    key: NonEmptyStr
    value: SettingValue
    description: OptionalText | None = None


class SettingUpdate(RequestModel):
    # (service, key) identifies the setting; only its value and description change.
    value: SettingValue | None = None
    description: OptionalText | None = None
