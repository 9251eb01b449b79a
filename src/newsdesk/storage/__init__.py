from newsdesk.storage.base import ArticleStore
from newsdesk.storage.sqlite import SQLiteArticleStore

__all__ = ["ArticleStore", "SQLiteArticleStore"]
