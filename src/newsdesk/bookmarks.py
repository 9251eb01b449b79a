"""Bookmark management on top of the article store."""

import logging

from newsdesk.data import Article
from newsdesk.observers import FeedObserver, ObserverRegistry
from newsdesk.storage import ArticleStore

logger = logging.getLogger(__name__)


class BookmarkManager:
    """Synchronous facade over the store's bookmark operations.

    Independent of any in-flight load or search: it only touches the store,
    never the coordinator's article set.

    Args:
        store: Article store holding the bookmark flags.
    """

    def __init__(self, store: ArticleStore) -> None:
        self._store = store
        self._observers = ObserverRegistry()
        self._bookmarks: list[Article] = []

    @property
    def bookmarks(self) -> list[Article]:
        """Bookmarked articles as of the last load or change."""
        return list(self._bookmarks)

    def subscribe(self, observer: FeedObserver) -> None:
        self._observers.subscribe(observer)

    def unsubscribe(self, observer: FeedObserver) -> None:
        self._observers.unsubscribe(observer)

    def toggle_bookmark(self, article: Article | str) -> bool:
        """Flip the bookmark flag of an article.

        Articles that were never cached cannot be bookmarked; the call is then
        a no-op.

        Args:
            article: The article, or its URL.

        Returns:
            The flag after the toggle.
        """
        url = _url_of(article)
        bookmarked = self._store.toggle_bookmark(url)
        logger.info(f"{'Bookmarked' if bookmarked else 'Removed bookmark for'} {url}")
        self.load_bookmarks()
        return bookmarked

    def is_bookmarked(self, article: Article | str) -> bool:
        return self._store.is_bookmarked(_url_of(article))

    def load_bookmarks(self) -> list[Article]:
        """Reload the bookmarked list from the store and notify observers."""
        self._bookmarks = [record.article for record in self._store.fetch_bookmarked()]
        bookmarks = self.bookmarks
        for observer in self._observers:
            observer.bookmarks_did_update(bookmarks)
        return bookmarks

    def remove_bookmark(self, article: Article | str) -> list[Article]:
        """Unbookmark an article and return the refreshed list."""
        url = _url_of(article)
        if self._store.is_bookmarked(url):
            self._store.toggle_bookmark(url)
        return self.load_bookmarks()


def _url_of(article: Article | str) -> str:
    return article.url if isinstance(article, Article) else article
