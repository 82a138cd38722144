from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from orgrepos.endpoints import DEFAULT_BASE_URL, DEFAULT_ORG


@dataclass
class Config:
    github_api_url: str = DEFAULT_BASE_URL
    github_org: str = DEFAULT_ORG
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Config:
        load_dotenv()

        return cls(
            github_api_url=os.environ.get("GITHUB_API_URL", DEFAULT_BASE_URL),
            github_org=os.environ.get("GITHUB_ORG", DEFAULT_ORG),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
