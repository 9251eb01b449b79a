"""Data models for newsdesk."""

from newsdesk.data.models import Article, FeedSnapshot, StoredArticle, SyncState

__all__ = [
    "Article",
    "FeedSnapshot",
    "StoredArticle",
    "SyncState",
]
