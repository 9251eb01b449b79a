"""Tests for BookmarkManager."""

from unittest.mock import MagicMock

from factories import make_article

from newsdesk.bookmarks import BookmarkManager
from newsdesk.data import Article
from newsdesk.observers import FeedObserver
from newsdesk.storage import SQLiteArticleStore


class BookmarkRecorder(FeedObserver):
    def __init__(self) -> None:
        self.updates: list[list[str]] = []

    def bookmarks_did_update(self, bookmarks: list[Article]) -> None:
        self.updates.append([a.url for a in bookmarks])


def _seeded(store: SQLiteArticleStore) -> BookmarkManager:
    store.upsert_articles(
        [
            make_article("a", title="Alpha", published_at="2025-01-02"),
            make_article("b", title="Beta", published_at="2025-01-03"),
        ]
    )
    return BookmarkManager(store)


def test_toggle_returns_new_state(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)
    article = make_article("a")

    assert manager.toggle_bookmark(article) is True
    assert manager.is_bookmarked(article) is True
    assert manager.toggle_bookmark(article) is False
    assert manager.is_bookmarked("a") is False


def test_toggle_accepts_url(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)

    manager.toggle_bookmark("b")

    assert manager.is_bookmarked("b")


def test_toggle_uncached_article_is_noop(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)

    assert manager.toggle_bookmark("https://example.com/never-cached") is False
    assert manager.bookmarks == []


def test_toggle_notifies_with_fresh_list(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)
    recorder = BookmarkRecorder()
    manager.subscribe(recorder)

    manager.toggle_bookmark("a")
    manager.toggle_bookmark("b")

    assert recorder.updates == [["a"], ["b", "a"]]


def test_load_bookmarks(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)
    store.toggle_bookmark("a")
    recorder = BookmarkRecorder()
    manager.subscribe(recorder)

    bookmarks = manager.load_bookmarks()

    assert [a.title for a in bookmarks] == ["Alpha"]
    assert manager.bookmarks == bookmarks
    assert recorder.updates == [["a"]]


def test_remove_bookmark(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)
    manager.toggle_bookmark("a")
    manager.toggle_bookmark("b")

    remaining = manager.remove_bookmark(make_article("b"))

    assert [a.url for a in remaining] == ["a"]
    assert manager.is_bookmarked("b") is False


def test_remove_bookmark_of_unbookmarked_article(store: SQLiteArticleStore) -> None:
    """Removing must never turn a bookmark on."""
    manager = _seeded(store)

    manager.remove_bookmark("a")

    assert manager.is_bookmarked("a") is False


def test_unsubscribed_observer_gets_nothing(store: SQLiteArticleStore) -> None:
    manager = _seeded(store)
    recorder = BookmarkRecorder()
    manager.subscribe(recorder)
    manager.unsubscribe(recorder)

    manager.toggle_bookmark("a")

    assert recorder.updates == []


def test_toggle_reports_flag_from_the_toggle_itself() -> None:
    """The returned flag comes from the write, not from a later read."""
    store = MagicMock()
    store.toggle_bookmark.return_value = True
    store.is_bookmarked.return_value = False
    store.fetch_bookmarked.return_value = []
    manager = BookmarkManager(store)

    assert manager.toggle_bookmark("a") is True
    store.toggle_bookmark.assert_called_once_with("a")
