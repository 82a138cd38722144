from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NETWORK_REQUEST = "network_request"
    COULD_NOT_PARSE_JSON = "could_not_parse_json"
    NO_DATA = "no_data"
    INVALID_RESPONSE = "invalid_response"
    REDIRECT = "redirect"
    UNAUTHORIZED = "unauthorized"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


class NetworkError(Exception):
    """A failed round trip, classified by :class:`ErrorKind`."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str = "",
        *,
        status_code: int | None = None,
        url: str = "",
        cause: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.url = url
        self.cause = cause
        super().__init__(message or kind.value)

    def __str__(self) -> str:
        parts = [f"{self.kind.value}: {self.args[0]}"]
        if self.status_code is not None:
            parts.append(f"(HTTP {self.status_code})")
        if self.url:
            parts.append(f"[{self.url}]")
        return " ".join(parts)


class RecordError(ValueError):
    """A JSON object that could not be turned into a record."""

    def __init__(self, missing: list[str], mistyped: list[str]) -> None:
        self.missing = missing
        self.mistyped = mistyped
        details = []
        if missing:
            details.append(f"missing {', '.join(missing)}")
        if mistyped:
            details.append(f"wrong type for {', '.join(mistyped)}")
        super().__init__("; ".join(details) or "invalid record")


def classify_status(status_code: int) -> ErrorKind | None:
    """Map an HTTP status to an error kind, or ``None`` for 2xx."""
    if 200 <= status_code <= 299:
        return None
    if 300 <= status_code <= 399:
        return ErrorKind.REDIRECT
    if 400 <= status_code <= 499:
        return ErrorKind.UNAUTHORIZED
    if 500 <= status_code <= 599:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.UNKNOWN
