"""
WikiKit - Wikipedia query client

A small asynchronous client for the Wikipedia search and REST APIs. It searches
articles, fetches page summaries, random pages and the daily featured article,
and maps the responses onto typed value objects.
"""

__version__ = "1.0.0"

from wikikit.core.language import Language
from wikikit.core.article import Article, Image, LengthCategory, SearchResult
from wikikit.core.errors import (
    ArticleNotFound,
    ErrorKind,
    InvalidLanguage,
    InvalidQuery,
    NetworkError,
    ParseError,
    RateLimited,
    ServerError,
    WikipediaError,
)
from wikikit.client import (
    WikipediaClient,
    featured_article,
    find_article,
    get_article,
    random_article,
    search,
    search_titles,
)

__all__ = [
    "Language",
    "Article",
    "Image",
    "LengthCategory",
    "SearchResult",
    "ErrorKind",
    "WikipediaError",
    "ArticleNotFound",
    "NetworkError",
    "InvalidQuery",
    "RateLimited",
    "ServerError",
    "InvalidLanguage",
    "ParseError",
    "WikipediaClient",
    "search",
    "get_article",
    "random_article",
    "featured_article",
    "search_titles",
    "find_article",
]
