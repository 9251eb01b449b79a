from newsdesk.source.base import ArticleSource
from newsdesk.source.newsapi import NewsAPIClient

__all__ = ["ArticleSource", "NewsAPIClient"]
