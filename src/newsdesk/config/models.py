"""Pydantic configuration models for newsdesk components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Remote Source Config
# ============================================================


class NewsAPIConfig(BaseModel):
    """Configuration for NewsAPIClient."""

    base_url: str = "https://newsapi.org/v2"
    api_key: str | None = None
    country: str = "us"
    timeout: float = 30.0

    model_config = {"frozen": True}


# ============================================================
# Storage Config
# ============================================================


class StorageConfig(BaseModel):
    """Location of the SQLite article cache."""

    path: str = "data/newsdesk.db"

    model_config = {"frozen": True}


# ============================================================
# Connectivity Configs
# ============================================================


class StaticConnectivityConfig(BaseModel):
    """Fixed connectivity flag, for offline use and tests."""

    type: Literal["static"] = "static"
    connected: bool = True

    model_config = {"frozen": True}


class ProbeConnectivityConfig(BaseModel):
    """Connectivity flag refreshed by probing a URL."""

    type: Literal["probe"] = "probe"
    probe_url: str = "https://newsapi.org"
    interval: float = 30.0
    timeout: float = 5.0

    model_config = {"frozen": True}


ConnectivityConfig = Annotated[
    StaticConnectivityConfig | ProbeConnectivityConfig,
    Field(discriminator="type"),
]


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsdeskConfig(BaseModel):
    """Root configuration for newsdesk."""

    api: NewsAPIConfig = Field(default_factory=NewsAPIConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    connectivity: ConnectivityConfig = Field(default_factory=StaticConnectivityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
