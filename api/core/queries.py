"""
Named SQL registry.

Each feature package keeps its statements as `sql/<name>.sql` files. A
`QueryStore` is built once at startup, is read-only afterwards, and is handed
to the repository that owns it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from .errors import QueryLoadError, QueryNotFoundError


class QueryStore:
    def __init__(self, queries: Mapping[str, str]) -> None:
        self._queries = MappingProxyType(dict(queries))

    @classmethod
    def load(cls, directory: Path, *, required: Iterable[str] = ()) -> QueryStore:
        """
        Read every `*.sql` file in `directory`; the file stem is the query name.

        Raises QueryLoadError when the directory cannot be read, a file is
        empty, or one of the `required` names has no file.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise QueryLoadError(f"SQL directory not found: {directory}")

        queries: dict[str, str] = {}
        for path in sorted(directory.glob("*.sql")):
            try:
                text = path.read_text(encoding="utf-8").strip()
            except (OSError, UnicodeDecodeError) as exc:
                raise QueryLoadError(f"failed to read SQL file {path.name}: {exc}") from exc
            if not text:
                raise QueryLoadError(f"SQL file is empty: {path.name}")
            queries[path.stem] = text

        missing = sorted(set(required) - queries.keys())
        if missing:
            raise QueryLoadError(f"missing SQL files in {directory}: {', '.join(missing)}")
        return cls(queries)

    def get(self, name: str) -> str:
        try:
            return self._queries[name]
        except KeyError:
            raise QueryNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._queries)

    def __contains__(self, name: object) -> bool:
        return name in self._queries

    def __len__(self) -> int:
        return len(self._queries)
