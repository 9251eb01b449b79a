from newsdesk.sync.coordinator import SyncCoordinator, filter_by_title

__all__ = ["SyncCoordinator", "filter_by_title"]
