"""Cache/sync coordinator: reconciles the remote source with the local store."""

import asyncio
import dataclasses
import logging

from newsdesk.bookmarks import BookmarkManager
from newsdesk.data import Article, FeedSnapshot, StoredArticle, SyncState
from newsdesk.errors import FetchError
from newsdesk.observers import FeedObserver, ObserverRegistry
from newsdesk.source import ArticleSource
from newsdesk.storage import ArticleStore

logger = logging.getLogger(__name__)


class SyncCoordinator:
    """Holds the active article set and keeps it in sync with source and cache.

    Flow of ``load()``:
    1. Notify loading, fetch top headlines
    2. On success, persist them in the background and show them
    3. On failure, show the cached articles and report the error

    ``search()`` shows remote search results without caching them and has no
    cache fallback. ``filter()`` narrows the current set by title locally.

    Overlapping loads and searches are not cancelled; whichever completes last
    determines the active set. The feed stays LOADING until all of them finish.

    Args:
        source: Remote article source.
        store: Local article cache.
        bookmarks: Bookmark manager sharing ``store``.
    """

    def __init__(
        self,
        source: ArticleSource,
        store: ArticleStore,
        bookmarks: BookmarkManager,
    ) -> None:
        self._source = source
        self._store = store
        self._bookmarks = bookmarks
        self._observers = ObserverRegistry()
        self._snapshot = FeedSnapshot()
        self._pending_writes: set[asyncio.Task[None]] = set()
        self._in_flight = 0
        self._settled_state = SyncState.IDLE

    @property
    def snapshot(self) -> FeedSnapshot:
        """Current immutable view of the feed."""
        return self._snapshot

    @property
    def articles(self) -> list[Article]:
        return list(self._snapshot.articles)

    @property
    def visible_articles(self) -> list[Article]:
        return list(self._snapshot.visible)

    @property
    def state(self) -> SyncState:
        return self._snapshot.state

    @property
    def is_loading(self) -> bool:
        return self._snapshot.is_loading

    @property
    def search_text(self) -> str:
        return self._snapshot.search_text

    def subscribe(self, observer: FeedObserver) -> None:
        """Register an observer without taking ownership of it."""
        self._observers.subscribe(observer)

    def unsubscribe(self, observer: FeedObserver) -> None:
        self._observers.unsubscribe(observer)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def load(self) -> list[Article]:
        """Load top headlines, falling back to the cache on failure.

        Returns:
            The visible (filtered) articles after the load.
        """
        self._set_loading(True)
        error: FetchError | None = None
        articles: list[Article] = []
        try:
            articles = await self._source.fetch_top_headlines()
        except FetchError as e:
            error = e
        finally:
            self._set_loading(False)

        if error is None:
            self._schedule_cache_write(articles)
            state = SyncState.READY if articles else SyncState.EMPTY
            self._replace_articles(articles, state)
            self._notify_update()
            return self.visible_articles

        logger.warning(f"Loading headlines failed ({error}), using cached articles")
        records: list[StoredArticle] = await asyncio.to_thread(self._store.fetch_cached_articles)
        cached = [record.article for record in records]
        self._replace_articles(cached, SyncState.FALLBACK if cached else SyncState.EMPTY)
        self._notify_update()
        self._notify_failure(error)
        return self.visible_articles

    async def refresh(self) -> list[Article]:
        """Re-fetch headlines. Same as :meth:`load`."""
        return await self.load()

    async def search(self, query: str) -> list[Article]:
        """Search the remote source; results are shown but not cached.

        An empty query only clears the filter over the current set. The query
        becomes the active filter once results arrive; a failed search leaves
        the current view untouched and only reports the error.

        Returns:
            The visible articles after the search.
        """
        if not query:
            return self.filter("")

        self._set_loading(True)
        error: FetchError | None = None
        articles: list[Article] = []
        try:
            articles = await self._source.search_articles(query)
        except FetchError as e:
            error = e
        finally:
            self._set_loading(False)

        if error is not None:
            logger.warning(f"Search for {query!r} failed: {error}")
            self._notify_failure(error)
            return self.visible_articles

        self._snapshot = dataclasses.replace(self._snapshot, search_text=query)
        self._replace_articles(articles, SyncState.READY if articles else SyncState.EMPTY)
        self._notify_update()
        return self.visible_articles

    def filter(self, text: str) -> list[Article]:
        """Show only articles whose title contains ``text``, ignoring case."""
        current = self._snapshot
        self._snapshot = dataclasses.replace(
            current,
            search_text=text,
            visible=filter_by_title(current.articles, text),
        )
        self._notify_update()
        return self.visible_articles

    def toggle_bookmark(self, article: Article) -> bool:
        return self._bookmarks.toggle_bookmark(article)

    def is_bookmarked(self, article: Article) -> bool:
        return self._bookmarks.is_bookmarked(article)

    async def wait_for_pending_writes(self) -> None:
        """Wait until background cache writes scheduled by :meth:`load` finish."""
        if self._pending_writes:
            await asyncio.gather(*self._pending_writes)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _schedule_cache_write(self, articles: list[Article]) -> None:
        task = asyncio.create_task(asyncio.to_thread(self._store.upsert_articles, articles))
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)

    def _replace_articles(self, articles: list[Article], state: SyncState) -> None:
        self._settled_state = state
        current = self._snapshot
        self._snapshot = FeedSnapshot(
            articles=tuple(articles),
            visible=filter_by_title(articles, current.search_text),
            search_text=current.search_text,
            state=SyncState.LOADING if self._in_flight else state,
            is_loading=current.is_loading,
        )

    def _set_loading(self, loading: bool) -> None:
        """Track one operation starting or finishing.

        The feed stays LOADING while any operation is in flight; once the last
        one finishes it returns to the state of the last article set shown.
        Observers are told about every start and finish.
        """
        self._in_flight += 1 if loading else -1
        busy = self._in_flight > 0
        state = SyncState.LOADING if busy else self._settled_state
        self._snapshot = dataclasses.replace(self._snapshot, is_loading=busy, state=state)
        for observer in self._observers:
            observer.loading_state_did_change(loading)

    def _notify_update(self) -> None:
        visible = self.visible_articles
        for observer in self._observers:
            observer.articles_did_update(visible)

    def _notify_failure(self, error: FetchError) -> None:
        for observer in self._observers:
            observer.articles_did_fail_to_load(error)


def filter_by_title(articles: tuple[Article, ...] | list[Article], text: str) -> tuple[Article, ...]:
    """Articles whose title contains ``text`` case-insensitively; all if empty."""
    if not text:
        return tuple(articles)
    needle = text.casefold()
    return tuple(a for a in articles if needle in a.title.casefold())
