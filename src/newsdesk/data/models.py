"""Core data models for newsdesk."""

from dataclasses import dataclass
from enum import StrEnum


class SyncState(StrEnum):
    """Lifecycle of the coordinator's active article set."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FALLBACK = "fallback"
    EMPTY = "empty"


@dataclass(frozen=True, eq=False)
class Article:
    """A single news item, identified by its canonical URL.

    Equality and hashing look at ``url`` only: two articles with the same URL
    are the same entity even when their other fields differ.
    """

    title: str
    url: str
    source_name: str
    published_at: str
    author: str | None = None
    image_url: str | None = None
    content: str | None = None

    def __hash__(self) -> int:
        return hash(self.url)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self.url == other.url


@dataclass(frozen=True)
class StoredArticle:
    """An article record as persisted in the local store."""

    article: Article
    bookmarked: bool = False

    @property
    def url(self) -> str:
        return self.article.url


@dataclass(frozen=True)
class FeedSnapshot:
    """Immutable view of the coordinator's state.

    ``articles`` is the full active set, ``visible`` the subsequence whose
    titles match ``search_text``.
    """

    articles: tuple[Article, ...] = ()
    visible: tuple[Article, ...] = ()
    search_text: str = ""
    state: SyncState = SyncState.IDLE
    is_loading: bool = False
