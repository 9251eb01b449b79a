"""Tests for data models."""

import dataclasses

import pytest

from newsdesk.data import Article, FeedSnapshot, StoredArticle, SyncState


def test_article_optional_fields_default_to_none() -> None:
    article = Article(
        title="Title",
        url="https://example.com/a",
        source_name="Example",
        published_at="2025-01-01T00:00:00Z",
    )
    assert article.author is None
    assert article.image_url is None
    assert article.content is None


def test_articles_with_same_url_are_equal() -> None:
    a = Article(title="Old", url="https://example.com/a", source_name="X", published_at="1")
    b = Article(title="New", url="https://example.com/a", source_name="Y", published_at="2")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_articles_with_different_url_differ() -> None:
    a = Article(title="Same", url="https://example.com/a", source_name="X", published_at="1")
    b = Article(title="Same", url="https://example.com/b", source_name="X", published_at="1")
    assert a != b


def test_article_is_frozen() -> None:
    article = Article(title="T", url="u", source_name="S", published_at="p")
    with pytest.raises(dataclasses.FrozenInstanceError):
        article.title = "changed"  # type: ignore[misc]


def test_stored_article_exposes_url() -> None:
    article = Article(title="T", url="https://example.com/a", source_name="S", published_at="p")
    record = StoredArticle(article=article)
    assert record.url == "https://example.com/a"
    assert record.bookmarked is False


def test_feed_snapshot_defaults() -> None:
    snapshot = FeedSnapshot()
    assert snapshot.articles == ()
    assert snapshot.visible == ()
    assert snapshot.search_text == ""
    assert snapshot.state == SyncState.IDLE
    assert snapshot.is_loading is False


def test_sync_state_values() -> None:
    assert SyncState.FALLBACK == "fallback"
    assert str(SyncState.READY) == "ready"
