from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from loguru import logger

from orgrepos.client import NetworkClient
from orgrepos.config import Config
from orgrepos.decoder import DecodeReport


async def _list_repositories(config: Config, org: str) -> DecodeReport | None:
    async with NetworkClient(config.github_api_url) as client:
        logger.info("Fetching repos for {}…", org)
        result = await client.fetch_repositories(org)

    if not result.ok:
        error = result.error
        logger.bind(kind=error.kind.value).error(
            "Could not list repos for {} ({}): {}", org, error.kind.value, error
        )
        return None
    return result.value


def cmd_list(config: Config, *, org: str | None = None, as_json: bool = False) -> int:
    """Print the repositories of an organisation, one per line."""
    org = org or config.github_org
    report = asyncio.run(_list_repositories(config, org))
    if report is None:
        return 1

    if as_json:
        print(json.dumps([r.to_json() for r in report], indent=2))
        return 0

    print(f"\n{'=' * 60}")
    print(f" {org}")
    print(f"{'=' * 60}")
    for r in report:
        print(f"  {r.full_name:<40} ★{r.stars:<5} ⑂{r.forks:<5} 👁{r.watchers}")
    print(f"{'=' * 60}")
    print(f"  {len(report)} repos", end="")
    if report.skipped:
        print(f", {report.skipped} skipped (malformed)", end="")
    print(f"\n{'=' * 60}\n")
    return 0


class _InterceptHandler(logging.Handler):
    """Route stdlib logging (httpx, httpcore) into loguru.

    Each record is tagged with its stdlib logger name, both in ``extra`` and
    as a message prefix, so transport chatter is easy to tell apart.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.bind(source=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, "[{}] {}", record.name, record.getMessage())


def _setup_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> — "
            "<level>{message}</level>"
        ),
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="orgrepos",
        description="List the repositories of a GitHub organisation",
    )
    sub = parser.add_subparsers(dest="command")

    list_p = sub.add_parser("list", help="List an organisation's repositories")
    list_p.add_argument(
        "--org",
        default=None,
        help="Organisation login (default: env GITHUB_ORG or LearnSwiftSD)",
    )
    list_p.add_argument(
        "--json",
        action="store_true",
        help="Print the decoded records as JSON",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config.from_env()
    _setup_logging(config.log_level)

    if args.command == "list":
        sys.exit(cmd_list(config, org=args.org, as_json=args.json))
