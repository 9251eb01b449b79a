"""CLI for newsdesk."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from newsdesk.bookmarks import BookmarkManager
from newsdesk.config import create_from_config, get_default_config_path, load_config
from newsdesk.config.factory import create_store
from newsdesk.connectivity import ConnectivityMonitor
from newsdesk.data import Article
from newsdesk.errors import FetchError, NewsdeskError
from newsdesk.observers import FeedObserver
from newsdesk.sync import SyncCoordinator

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["headlines", "search", "bookmarks", "bookmark"]
    config: Path
    query: str = ""
    filter: str = ""
    url: str = ""
    log_level: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


class ConsoleObserver(FeedObserver):
    """Reports failures on stderr; results are printed by the command itself."""

    def articles_did_fail_to_load(self, error: FetchError) -> None:
        print(f"Could not load articles: {error.description}", file=sys.stderr)


def print_articles(articles: list[Article], bookmarks: BookmarkManager) -> None:
    if not articles:
        print("No articles.")
        return
    for i, article in enumerate(articles, 1):
        mark = "*" if bookmarks.is_bookmarked(article) else " "
        print(f"{mark} {i}. {article.title}")
        print(f"     {article.source_name} | {article.published_at}")
        print(f"     {article.url}")


async def _feed_command(
    args: CLIArgs, coordinator: SyncCoordinator, bookmarks: BookmarkManager
) -> None:
    observer = ConsoleObserver()
    coordinator.subscribe(observer)
    try:
        if args.command == "search":
            articles = await coordinator.search(args.query)
        else:
            await coordinator.load()
            articles = coordinator.filter(args.filter)
        logger.info(f"State: {coordinator.state}")
        print_articles(articles, bookmarks)
    finally:
        coordinator.unsubscribe(observer)
        await coordinator.wait_for_pending_writes()


async def run(args: CLIArgs) -> None:
    """Execute one command with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    if args.log_level is None:
        logging.getLogger().setLevel(config.logging.level)
    if args.command in ("bookmarks", "bookmark"):
        _bookmark_command(args, BookmarkManager(create_store(config.storage)))
        return

    coordinator, bookmarks, connectivity = create_from_config(config)
    if isinstance(connectivity, ConnectivityMonitor):
        await connectivity.check()
    await _feed_command(args, coordinator, bookmarks)


def _bookmark_command(args: CLIArgs, bookmarks: BookmarkManager) -> None:
    if args.command == "bookmarks":
        print_articles(bookmarks.load_bookmarks(), bookmarks)
        return
    if args.command == "bookmark":
        if bookmarks.toggle_bookmark(args.url):
            print(f"Bookmarked {args.url}")
        else:
            print(f"Not bookmarked: {args.url}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read news headlines, online or from cache.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured logging level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    headlines = commands.add_parser("headlines", help="Show top headlines")
    headlines.add_argument("--filter", "-f", default="", help="Only titles containing this text")

    search = commands.add_parser("search", help="Search all articles")
    search.add_argument("query", help="Search keywords")

    commands.add_parser("bookmarks", help="List bookmarked articles")

    bookmark = commands.add_parser("bookmark", help="Toggle the bookmark of a cached article")
    bookmark.add_argument("url", help="Article URL")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    ns = build_parser().parse_args(argv)
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            query=getattr(ns, "query", ""),
            filter=getattr(ns, "filter", ""),
            url=getattr(ns, "url", ""),
            log_level=ns.log_level,
        )
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=args.log_level or logging.INFO, format="%(message)s")

    try:
        asyncio.run(run(args))
    except NewsdeskError as e:
        logger.error(e.description)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
