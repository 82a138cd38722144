from __future__ import annotations

import asyncio
import json
from typing import Callable

import httpx
import pytest

from orgrepos.client import NetworkClient


def repo_json(id: int = 1, name: str = "swift-basics", **overrides) -> dict:
    data = {
        "id": id,
        "name": name,
        "full_name": f"LearnSwiftSD/{name}",
        "created_at": "2017-05-23T00:56:12Z",
        "updated_at": "2017-06-01T18:30:00Z",
        "url": f"https://api.github.com/repos/LearnSwiftSD/{name}",
        "html_url": f"https://github.com/LearnSwiftSD/{name}",
        "stargazers_count": 3,
        "forks": 2,
        "watchers_count": 3,
        "watchers": 3,
        "forks_count": 2,
    }
    data.update(overrides)
    return data


def payload(items) -> bytes:
    return json.dumps(items).encode()


@pytest.fixture
def make_client() -> Callable[..., NetworkClient]:
    """Build a NetworkClient whose transport answers with ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> NetworkClient:
        transport = httpx.MockTransport(handler)
        return NetworkClient(client=httpx.AsyncClient(transport=transport))

    return _make


def run(coro):
    return asyncio.run(coro)
