"""
Page/limit normalization for list endpoints.

Out-of-range values are clamped, never rejected.
"""

from __future__ import annotations

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 100
MAX_LIMIT = 100
# Highest page whose OFFSET still fits a PostgreSQL bigint at MAX_LIMIT.
MAX_PAGE = (2**63 - 1) // MAX_LIMIT + 1


def _parse_int(raw: str | int | None) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def normalize_page(raw: str | int | None) -> int:
    value = _parse_int(raw)
    if value is None:
        return DEFAULT_PAGE
    return max(1, min(value, MAX_PAGE))


def normalize_limit(raw: str | int | None) -> int:
    value = _parse_int(raw)
    if value is None:
        return DEFAULT_LIMIT
    return max(1, min(value, MAX_LIMIT))


def offset_for(page: int, limit: int) -> int:
    return (page - 1) * limit
