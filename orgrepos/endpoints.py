from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_ORG = "LearnSwiftSD"


class HTTPMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"


@dataclass(frozen=True)
class Endpoint:
    """One GitHub API operation: where it lives and how to call it."""

    path: str
    method: HTTPMethod = HTTPMethod.GET
    parameters: dict[str, Any] | None = None
    base_url: str = DEFAULT_BASE_URL

    @property
    def url(self) -> str:
        return self.base_url.rstrip("/") + self.path


class GitHubAPI:
    """Factory for the endpoints this package knows about."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self.base_url = base_url

    def get_repositories(self, org: str = DEFAULT_ORG) -> Endpoint:
        return Endpoint(path=f"/orgs/{org}/repos", base_url=self.base_url)

    def create_repository(self, name: str, org: str = DEFAULT_ORG) -> Endpoint:
        return Endpoint(
            path=f"/orgs/{org}/repos",
            method=HTTPMethod.POST,
            parameters={"name": name},
            base_url=self.base_url,
        )
