"""
Public query interface for WikiKit.

Usage:
    import asyncio
    import wikikit

    results = asyncio.run(wikikit.search("quantum physics"))
    article = asyncio.run(wikikit.get_article("Python (programming language)"))
"""
import logging
from datetime import date
from typing import List, Optional, Union

import aiohttp

from wikikit.config import get_config
from wikikit.core import decoder
from wikikit.core.article import Article, SearchResult
from wikikit.core.decoder import SearchHit
from wikikit.core.errors import InvalidQuery, NetworkError
from wikikit.core.language import Language
from wikikit.utils import urls
from wikikit.utils.http import DEFAULT_USER_AGENT, RequestExecutor
from wikikit.utils.text import tokenize

# Configure logging
logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 300
MAX_TITLE_LENGTH = 255
MIN_SEARCH_LIMIT = 1
MAX_SEARCH_LIMIT = 50

LanguageLike = Union[Language, str, None]


def validate_query(query: str) -> str:
    """
    Check a search query before any request is made.

    Raises:
        InvalidQuery: If the query is blank or longer than 300 characters
    """
    trimmed = query.strip()
    if not trimmed:
        raise InvalidQuery("Search query cannot be empty")
    if len(trimmed) > MAX_QUERY_LENGTH:
        raise InvalidQuery(f"Search query too long (max {MAX_QUERY_LENGTH} characters)")
    return trimmed


def validate_title(title: str) -> str:
    trimmed = title.strip()
    if not trimmed:
        raise InvalidQuery("Article title cannot be empty")
    if len(trimmed) > MAX_TITLE_LENGTH:
        raise InvalidQuery(f"Article title too long (max {MAX_TITLE_LENGTH} characters)")
    return trimmed


def clamp_limit(limit: int) -> int:
    return max(MIN_SEARCH_LIMIT, min(MAX_SEARCH_LIMIT, limit))


def _setting(key: str, cast, default):
    """
    Read a configuration value and convert it.

    Raises:
        ValueError: If the configured value cannot be converted
    """
    value = get_config(key, default)
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for setting '{key}': {value!r}") from e


def relevance_score(hit: SearchHit, query: str) -> float:
    """
    Token-overlap score between a query and a search hit.

    Each lowercase query token earns 2.0 when it is a title token, otherwise
    1.0 when it is a snippet token. The total is divided by the number of
    query tokens. The snippet is compared as returned by the API, markup
    included.

    Args:
        hit: Raw search hit
        query: The user's query

    Returns:
        Score in the range [0.0, 2.0]
    """
    query_tokens = tokenize(query.lower())
    if not query_tokens:
        return 0.0
    title_tokens = set(tokenize(hit.title.lower()))
    snippet_tokens = set(tokenize(hit.snippet.lower()))

    score = 0.0
    for token in query_tokens:
        if token in title_tokens:
            score += 2.0
        elif token in snippet_tokens:
            score += 1.0
    return score / len(query_tokens)


class WikipediaClient:
    """
    Issues search, summary, random and featured-article requests.

    The client holds configuration only. Calls share no mutable state, so one
    client can serve any number of concurrent operations.
    """
    def __init__(
        self,
        language: LanguageLike = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the WikipediaClient.

        Args:
            language: Default edition; falls back to the 'defaults.language' setting
            user_agent: User-Agent header; falls back to 'http.user_agent'
            timeout: Per-request timeout in seconds; falls back to 'http.timeout_seconds'
            session: Optional aiohttp session owned by the caller
        """
        self.language = Language.from_code(language or get_config("defaults.language", "en"))
        if timeout is None:
            timeout = _setting("http.timeout_seconds", float, 10)
        self.search_limit = _setting("defaults.search_limit", int, 10)
        self.executor = RequestExecutor(
            user_agent=user_agent or _setting("http.user_agent", str, DEFAULT_USER_AGENT),
            timeout=float(timeout),
            session=session,
        )

    def _language(self, language: LanguageLike) -> Language:
        if language is None:
            return self.language
        return Language.from_code(language)

    async def search(self, query: str, language: LanguageLike = None, limit: Optional[int] = None) -> List[SearchResult]:
        """
        Full-text search.

        Args:
            query: Search terms, 1 to 300 characters after trimming
            language: Edition to search
            limit: Maximum number of results, clamped to 1..50

        Returns:
            Results in the order the API ranked them
        """
        validate_query(query)
        edition = self._language(language)
        limit = clamp_limit(self.search_limit if limit is None else int(limit))

        payload = await self.executor.fetch(urls.search_url(query, edition, limit))
        hits = decoder.decode_search(payload)

        results = [
            SearchResult(
                title=hit.title,
                snippet=hit.clean_snippet,
                page_id=hit.page_id,
                word_count=hit.word_count,
                relevance_score=relevance_score(hit, query),
            )
            for hit in hits[:limit]
        ]
        logger.debug(f"Search for {query!r} on {edition.code} returned {len(results)} results")
        return results

    async def get_article(self, title: str, language: LanguageLike = None) -> Optional[Article]:
        """
        Fetch the summary of a page by title.

        Args:
            title: Page title, 1 to 255 characters after trimming
            language: Edition to query

        Returns:
            The Article, or None when the page does not exist
        """
        validate_title(title)
        edition = self._language(language)

        try:
            payload = await self.executor.fetch(urls.summary_url(title, edition))
        except NetworkError as e:
            if e.is_not_found:
                logger.info(f"No article titled {title!r} on {edition.code}")
                return None
            raise
        return decoder.decode_summary(payload, edition)

    async def random_article(self, language: LanguageLike = None) -> Article:
        edition = self._language(language)
        payload = await self.executor.fetch(urls.random_url(edition))
        return decoder.decode_summary(payload, edition)

    async def featured_article(self, day: Optional[date] = None, language: LanguageLike = None) -> Article:
        """
        Fetch the featured article for a calendar day.

        Args:
            day: Date to query, today's local date when omitted
            language: Edition to query

        Returns:
            The day's featured article
        """
        edition = self._language(language)
        payload = await self.executor.fetch(urls.featured_url(edition, day))
        return decoder.decode_featured(payload, edition)

    async def search_titles(self, query: str, language: LanguageLike = None, limit: Optional[int] = None) -> List[str]:
        results = await self.search(query, language=language, limit=limit)
        return [result.title for result in results]

    async def find_article(self, query: str, language: LanguageLike = None) -> Optional[Article]:
        """
        Resolve a query to an article.

        Tries the query as an exact title first, then falls back to the top
        search hit. Requests are made one after another.

        Args:
            query: Title or search terms
            language: Edition to query

        Returns:
            The Article, or None if nothing matched
        """
        article = await self.get_article(query, language=language)
        if article is not None:
            return article

        results = await self.search(query, language=language, limit=1)
        if not results:
            return None
        return await self.get_article(results[0].title, language=language)


_default_client: Optional[WikipediaClient] = None


def default_client() -> WikipediaClient:
    global _default_client
    if _default_client is None:
        _default_client = WikipediaClient()
    return _default_client


async def search(query: str, language: LanguageLike = None, limit: Optional[int] = None) -> List[SearchResult]:
    return await default_client().search(query, language=language, limit=limit)


async def get_article(title: str, language: LanguageLike = None) -> Optional[Article]:
    return await default_client().get_article(title, language=language)


async def random_article(language: LanguageLike = None) -> Article:
    return await default_client().random_article(language=language)


async def featured_article(day: Optional[date] = None, language: LanguageLike = None) -> Article:
    return await default_client().featured_article(day=day, language=language)


async def search_titles(query: str, language: LanguageLike = None, limit: Optional[int] = None) -> List[str]:
    return await default_client().search_titles(query, language=language, limit=limit)


async def find_article(query: str, language: LanguageLike = None) -> Optional[Article]:
    return await default_client().find_article(query, language=language)
