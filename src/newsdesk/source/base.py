from typing import Protocol

from newsdesk.data import Article


class ArticleSource(Protocol):
    """Interface for querying a remote article API.

    Both methods either return the articles or raise exactly one
    :class:`~newsdesk.errors.FetchError` subclass.
    """

    async def fetch_top_headlines(self) -> list[Article]:
        """Fetch the current top headlines."""
        ...

    async def search_articles(self, query: str) -> list[Article]:
        """Search all articles matching a keyword query.

        Args:
            query: Raw user query; encoded by the implementation.
        """
        ...
