"""Test data builders."""

from newsdesk.data import Article


def make_article(
    url: str,
    title: str = "Untitled",
    published_at: str = "2025-01-01T00:00:00Z",
    *,
    source_name: str = "Example News",
    author: str | None = None,
    content: str | None = None,
    image_url: str | None = None,
) -> Article:
    return Article(
        title=title,
        url=url,
        source_name=source_name,
        published_at=published_at,
        author=author,
        image_url=image_url,
        content=content,
    )
