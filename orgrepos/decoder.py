from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterator

from loguru import logger

from orgrepos.errors import ErrorKind, NetworkError
from orgrepos.models import RepositoryRecord


@dataclass(frozen=True)
class DecodeReport:
    """Records decoded from one payload and how many elements were dropped."""

    records: tuple[RepositoryRecord, ...] = ()
    skipped: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[RepositoryRecord]:
        return iter(self.records)


def decode_repositories(data: bytes) -> DecodeReport:
    """Decode a JSON array of repository objects.

    Decoding is per element: an object with a missing or mistyped field is
    dropped and counted in ``skipped`` while its siblings still decode.
    Raises :class:`NetworkError` with ``COULD_NOT_PARSE_JSON`` when the
    payload is not JSON or its top level is not an array.
    """
    try:
        payload = json.loads(data)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        raise NetworkError(
            ErrorKind.COULD_NOT_PARSE_JSON, f"invalid JSON: {e}", cause=e
        ) from e

    if not isinstance(payload, list):
        raise NetworkError(
            ErrorKind.COULD_NOT_PARSE_JSON,
            f"expected a JSON array, got {type(payload).__name__}",
        )

    records: list[RepositoryRecord] = []
    skipped = 0
    for index, item in enumerate(payload):
        result = RepositoryRecord.from_json(item)
        if result.ok:
            records.append(result.value)
        else:
            skipped += 1
            logger.debug("Skipping element {}: {}", index, result.error)

    if skipped:
        logger.warning(
            "Dropped {} of {} repository objects", skipped, len(payload)
        )
    return DecodeReport(records=tuple(records), skipped=skipped)
