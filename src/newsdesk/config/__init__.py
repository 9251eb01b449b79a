"""Configuration module for newsdesk."""

from newsdesk.config.factory import create_from_config
from newsdesk.config.loader import get_default_config_path, load_config
from newsdesk.config.models import (
    ConnectivityConfig,
    LoggingConfig,
    NewsAPIConfig,
    NewsdeskConfig,
    ProbeConnectivityConfig,
    StaticConnectivityConfig,
    StorageConfig,
)

__all__ = [
    "ConnectivityConfig",
    "LoggingConfig",
    "NewsAPIConfig",
    "NewsdeskConfig",
    "ProbeConnectivityConfig",
    "StaticConnectivityConfig",
    "StorageConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
