"""Factory functions to create components from configuration."""

from newsdesk.bookmarks import BookmarkManager
from newsdesk.config.models import (
    NewsAPIConfig,
    NewsdeskConfig,
    ProbeConnectivityConfig,
    StaticConnectivityConfig,
    StorageConfig,
)
from newsdesk.connectivity import ConnectivityFlag, ConnectivityMonitor, ConnectivitySignal
from newsdesk.source import NewsAPIClient
from newsdesk.storage import SQLiteArticleStore
from newsdesk.sync import SyncCoordinator


def create_connectivity(
    config: StaticConnectivityConfig | ProbeConnectivityConfig,
) -> ConnectivityFlag:
    """Create the connectivity signal from config."""
    if isinstance(config, StaticConnectivityConfig):
        return ConnectivityFlag(connected=config.connected)
    if isinstance(config, ProbeConnectivityConfig):
        return ConnectivityMonitor(
            probe_url=config.probe_url,
            interval=config.interval,
            timeout=config.timeout,
        )
    msg = f"Unknown connectivity config type: {type(config)}"
    raise ValueError(msg)


def create_source(config: NewsAPIConfig, connectivity: ConnectivitySignal) -> NewsAPIClient:
    return NewsAPIClient(
        connectivity,
        api_key=config.api_key,
        base_url=config.base_url,
        country=config.country,
        timeout=config.timeout,
    )


def create_store(config: StorageConfig) -> SQLiteArticleStore:
    return SQLiteArticleStore(config.path)


def create_from_config(
    config: NewsdeskConfig,
) -> tuple[SyncCoordinator, BookmarkManager, ConnectivityFlag]:
    """Wire a complete coordinator from root config.

    Args:
        config: Root configuration.

    Returns:
        Tuple of (coordinator, bookmark_manager, connectivity).
        The bookmark manager shares the coordinator's store.
    """
    connectivity = create_connectivity(config.connectivity)
    store = create_store(config.storage)
    bookmarks = BookmarkManager(store)
    source = create_source(config.api, connectivity)
    coordinator = SyncCoordinator(source, store, bookmarks)
    return (coordinator, bookmarks, connectivity)
