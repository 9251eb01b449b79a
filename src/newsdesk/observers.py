"""Observer interface for feed and bookmark notifications."""

import weakref
from collections.abc import Iterator

from newsdesk.data import Article
from newsdesk.errors import FetchError


class FeedObserver:
    """Receiver of coordinator and bookmark notifications.

    Subclasses override the notifications they care about; the defaults do
    nothing. Observers are held by weak reference, so the registering party
    keeps ownership.
    """

    def articles_did_update(self, articles: list[Article]) -> None:
        """The visible article set changed."""

    def articles_did_fail_to_load(self, error: FetchError) -> None:
        """A load or search failed. On load this follows a cache fallback."""

    def loading_state_did_change(self, is_loading: bool) -> None:
        """A network operation started or finished."""

    def bookmarks_did_update(self, bookmarks: list[Article]) -> None:
        """The bookmarked article list changed."""


class ObserverRegistry:
    """Non-owning set of :class:`FeedObserver` registrations."""

    def __init__(self) -> None:
        self._observers: weakref.WeakSet[FeedObserver] = weakref.WeakSet()

    def subscribe(self, observer: FeedObserver) -> None:
        self._observers.add(observer)

    def unsubscribe(self, observer: FeedObserver) -> None:
        self._observers.discard(observer)

    def __iter__(self) -> Iterator[FeedObserver]:
        # Copy so observers may unsubscribe while being notified.
        return iter(list(self._observers))

    def __len__(self) -> int:
        return len(self._observers)
