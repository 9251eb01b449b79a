"""newsdesk: news headlines client with an offline cache and bookmarks."""

from newsdesk.bookmarks import BookmarkManager
from newsdesk.config import NewsdeskConfig, create_from_config, load_config
from newsdesk.connectivity import ConnectivityFlag, ConnectivityMonitor, ConnectivitySignal
from newsdesk.data import Article, FeedSnapshot, StoredArticle, SyncState
from newsdesk.errors import (
    ConfigError,
    DecodeError,
    FetchError,
    InvalidURLError,
    NewsdeskError,
    NoConnectionError,
    NoDataError,
    StorageError,
    TransportError,
)
from newsdesk.observers import FeedObserver
from newsdesk.source import ArticleSource, NewsAPIClient
from newsdesk.storage import ArticleStore, SQLiteArticleStore
from newsdesk.sync import SyncCoordinator, filter_by_title

__all__ = [
    # Models
    "Article",
    "FeedSnapshot",
    "StoredArticle",
    "SyncState",
    # Errors
    "ConfigError",
    "DecodeError",
    "FetchError",
    "InvalidURLError",
    "NewsdeskError",
    "NoConnectionError",
    "NoDataError",
    "StorageError",
    "TransportError",
    # Protocols
    "ArticleSource",
    "ArticleStore",
    "ConnectivitySignal",
    "FeedObserver",
    # Connectivity
    "ConnectivityFlag",
    "ConnectivityMonitor",
    # Components
    "BookmarkManager",
    "NewsAPIClient",
    "SQLiteArticleStore",
    "SyncCoordinator",
    # Functions
    "filter_by_title",
    # Config
    "NewsdeskConfig",
    "create_from_config",
    "load_config",
]
