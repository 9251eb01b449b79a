from typing import Protocol

from newsdesk.data import Article, StoredArticle


class ArticleStore(Protocol):
    """Interface for the local article cache.

    Implementations absorb their own failures: reads degrade to empty results
    and writes to no-ops, so an empty result may also mean a storage error.
    """

    def upsert_articles(self, articles: list[Article]) -> None:
        """Insert articles whose URL is not stored yet; leave the rest untouched."""
        ...

    def fetch_cached_articles(self) -> list[StoredArticle]:
        """Return all records, newest ``published_at`` first."""
        ...

    def fetch_bookmarked(self) -> list[StoredArticle]:
        """Return bookmarked records, newest ``published_at`` first."""
        ...

    def toggle_bookmark(self, url: str) -> bool:
        """Flip the bookmark flag of the record with ``url``, if any.

        Returns:
            The flag after the toggle; ``False`` when no record matches.
        """
        ...

    def is_bookmarked(self, url: str) -> bool:
        """Whether a record with ``url`` exists and is bookmarked."""
        ...
