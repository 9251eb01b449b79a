"""Tests for protocol compliance."""

from pathlib import Path

from newsdesk.bookmarks import BookmarkManager
from newsdesk.connectivity import ConnectivityFlag, ConnectivityMonitor
from newsdesk.data import Article, StoredArticle
from newsdesk.source import NewsAPIClient
from newsdesk.storage import SQLiteArticleStore


def test_newsapi_client_matches_article_source_protocol() -> None:
    """Verify NewsAPIClient structurally matches the ArticleSource protocol."""
    client = NewsAPIClient(ConnectivityFlag(), api_key="test")
    assert callable(client.fetch_top_headlines)
    assert callable(client.search_articles)


def test_sqlite_store_matches_article_store_protocol(tmp_path: Path) -> None:
    store = SQLiteArticleStore(tmp_path / "p.db")
    for name in (
        "upsert_articles",
        "fetch_cached_articles",
        "fetch_bookmarked",
        "toggle_bookmark",
        "is_bookmarked",
    ):
        assert callable(getattr(store, name))


class InMemoryStore:
    """A minimal implementation to verify protocol requirements."""

    def __init__(self) -> None:
        self.records: dict[str, StoredArticle] = {}

    def upsert_articles(self, articles: list[Article]) -> None:
        for a in articles:
            self.records.setdefault(a.url, StoredArticle(article=a))

    def fetch_cached_articles(self) -> list[StoredArticle]:
        return sorted(self.records.values(), key=lambda r: r.article.published_at, reverse=True)

    def fetch_bookmarked(self) -> list[StoredArticle]:
        return [r for r in self.fetch_cached_articles() if r.bookmarked]

    def toggle_bookmark(self, url: str) -> bool:
        record = self.records.get(url)
        if record is None:
            return False
        self.records[url] = StoredArticle(record.article, not record.bookmarked)
        return not record.bookmarked

    def is_bookmarked(self, url: str) -> bool:
        record = self.records.get(url)
        return record is not None and record.bookmarked


def test_bookmark_manager_accepts_any_store() -> None:
    """Any class with the right methods can back the bookmark manager."""
    store = InMemoryStore()
    store.upsert_articles(
        [Article(title="T", url="u", source_name="S", published_at="2025-01-01")]
    )
    manager = BookmarkManager(store)

    assert manager.toggle_bookmark("u") is True
    assert [a.url for a in manager.bookmarks] == ["u"]


def test_connectivity_monitor_is_a_flag() -> None:
    assert ConnectivityMonitor().is_connected is True
