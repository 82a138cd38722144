from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from orgrepos.errors import RecordError
from orgrepos.result import Failure, Result, Success


def _is_type(value: Any, expected: type) -> bool:
    # JSON booleans decode to bool, which is an int subclass
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


@dataclass(frozen=True)
class RepositoryRecord:
    """Metadata for one GitHub repository, as listed under an organisation."""

    id: int
    name: str
    full_name: str
    created_at: str
    updated_at: str
    url: str
    stars: int
    forks: int
    watchers: int

    # (attribute, JSON key, type)
    REQUIRED_FIELDS: ClassVar[tuple[tuple[str, str, type], ...]] = (
        ("id", "id", int),
        ("name", "name", str),
        ("full_name", "full_name", str),
        ("created_at", "created_at", str),
        ("updated_at", "updated_at", str),
        ("url", "url", str),
        ("stars", "stargazers_count", int),
        ("forks", "forks", int),
        ("watchers", "watchers_count", int),
    )

    @classmethod
    def from_json(cls, obj: Any) -> Result[RepositoryRecord]:
        """Validate one element of ``GET /orgs/<org>/repos``.

        Every required key must be present with the right type; extra keys
        are ignored. Returns ``Success(record)`` or ``Failure(RecordError)``.
        """
        if not isinstance(obj, dict):
            return Failure(RecordError([], [f"<{type(obj).__name__}>"]))

        missing: list[str] = []
        mistyped: list[str] = []
        values: dict[str, Any] = {}
        for attr, key, expected in cls.REQUIRED_FIELDS:
            if key not in obj or obj[key] is None:
                missing.append(key)
            elif not _is_type(obj[key], expected):
                mistyped.append(key)
            else:
                values[attr] = obj[key]

        if missing or mistyped:
            return Failure(RecordError(missing, mistyped))
        return Success(cls(**values))

    def to_json(self) -> dict[str, Any]:
        """Return the record keyed the way GitHub keys it."""
        return {key: getattr(self, attr) for attr, key, _ in self.REQUIRED_FIELDS}
