from __future__ import annotations

import logging
import os
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field, ValidationError

from newsdesk.connectivity import ConnectivitySignal
from newsdesk.data import Article
from newsdesk.errors import (
    ConfigError,
    DecodeError,
    InvalidURLError,
    NoConnectionError,
    NoDataError,
    TransportError,
)

NEWSAPI_BASE_URL = "https://newsapi.org/v2"

logger = logging.getLogger(__name__)


class SourcePayload(BaseModel):
    name: str


class ArticlePayload(BaseModel):
    """One entry of the ``articles`` array as sent by NewsAPI."""

    title: str
    author: str | None = None
    image_url: str | None = Field(default=None, alias="urlToImage")
    published_at: str = Field(alias="publishedAt")
    content: str | None = None
    url: str
    source: SourcePayload

    def to_article(self) -> Article:
        return Article(
            title=self.title,
            url=self.url,
            source_name=self.source.name,
            published_at=self.published_at,
            author=self.author,
            image_url=self.image_url,
            content=self.content,
        )


class NewsResponse(BaseModel):
    """Envelope of a successful NewsAPI response.

    ``status`` and ``total_results`` are required but not checked against the
    article list.
    """

    status: str
    total_results: int = Field(alias="totalResults")
    articles: list[ArticlePayload]


class NewsAPIErrorResponse(BaseModel):
    status: str
    code: str | None = None
    message: str


class NewsAPIClient:
    """Query NewsAPI.org for top headlines and keyword searches.

    Args:
        connectivity: Signal checked before every request.
        api_key: NewsAPI key (defaults to NEWSAPI_KEY env var).
        base_url: API root, without trailing slash.
        country: Country code for top headlines.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        connectivity: ConnectivitySignal,
        *,
        api_key: str | None = None,
        base_url: str = NEWSAPI_BASE_URL,
        country: str = "us",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWSAPI_KEY")
        if not self._api_key:
            raise ConfigError("NewsAPI key required. Pass api_key or set NEWSAPI_KEY env var.")
        self._connectivity = connectivity
        self._base_url = base_url.rstrip("/")
        self._country = country
        self._timeout = timeout

    async def fetch_top_headlines(self) -> list[Article]:
        """Fetch the current top headlines for the configured country."""
        self._require_connection()
        url = f"{self._base_url}/top-headlines?country={self._country}&apiKey={self._api_key}"
        return await self._perform_request(url)

    async def search_articles(self, query: str) -> list[Article]:
        """Search all articles matching ``query``, newest first."""
        self._require_connection()
        encoded = _encode_query(query)
        url = (
            f"{self._base_url}/everything?q={encoded}"
            f"&apiKey={self._api_key}&sortBy=publishedAt"
        )
        return await self._perform_request(url)

    def _require_connection(self) -> None:
        if not self._connectivity.is_connected:
            logger.info("Skipping request: no connection")
            raise NoConnectionError()

    async def _perform_request(self, url: str) -> list[Article]:
        """GET ``url`` and decode the article envelope."""
        request_url = _parse_url(url)
        logger.debug(f"GET {request_url.copy_remove_param('apiKey')}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(request_url)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidURLError(f"Invalid URL: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Network error: {e}")
            raise TransportError(f"Network error: {e}") from e

        if not response.content:
            logger.warning("No data received from server")
            raise NoDataError()

        try:
            envelope = NewsResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(_describe_decode_failure(response.content)) from e

        articles = [item.to_article() for item in envelope.articles if item.title.strip()]
        skipped = len(envelope.articles) - len(articles)
        if skipped:
            logger.debug(f"Skipped {skipped} articles without a title")
        logger.info(f"Fetched {len(articles)} articles (status={envelope.status})")
        return articles


def _encode_query(query: str) -> str:
    """Percent-encode a query parameter value; unencodable input becomes ''."""
    try:
        return quote(query, safe="")
    except UnicodeEncodeError:
        logger.warning("Could not encode search query, using empty query")
        return ""


def _parse_url(url: str) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidURLError(f"Invalid URL: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURLError(f"Invalid URL: {parsed.copy_remove_param('apiKey')}")
    return parsed


def _describe_decode_failure(body: bytes) -> str:
    """Use the API's own error message when the body is an error document."""
    try:
        error = NewsAPIErrorResponse.model_validate_json(body)
    except ValidationError:
        return DecodeError.description
    return f"{DecodeError.description}: {error.message}"
