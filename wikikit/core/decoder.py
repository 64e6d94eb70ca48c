"""
Response decoding for WikiKit.

Turns the JSON bodies returned by the search, summary and featured endpoints
into the value objects in wikikit.core.article.
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from wikikit.core.article import Article, Image
from wikikit.core.errors import ParseError
from wikikit.core.language import Language
from wikikit.utils.text import strip_html

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    """
    Raw fields of one search hit, before relevance scoring.
    """
    title: str
    snippet: str
    page_id: int
    word_count: int

    @property
    def clean_snippet(self) -> str:
        return strip_html(self.snippet)


def load_json(payload: bytes) -> Any:
    try:
        return json.loads(payload)
    except (TypeError, ValueError) as e:
        logger.error(f"Response body is not valid JSON: {e}")
        raise ParseError(f"invalid JSON: {e}") from e


def decode_search(payload: bytes) -> List[SearchHit]:
    """
    Decode a search response: {query: {search: [{title, snippet, pageid, wordcount}]}}.

    Args:
        payload: Raw response body

    Returns:
        One SearchHit per item, in upstream order

    Raises:
        ParseError: If the body is not JSON or a required field is missing
    """
    data = load_json(payload)
    query = _require(data, "query", dict, "response")
    items = _require(query, "search", list, "query")

    hits = []
    for index, item in enumerate(items):
        where = f"query.search[{index}]"
        if not isinstance(item, dict):
            raise ParseError(f"{where} is not an object")
        hits.append(SearchHit(
            title=_require(item, "title", str, where),
            snippet=_require(item, "snippet", str, where),
            page_id=_require_int(item, "pageid", where),
            word_count=max(0, _require_int(item, "wordcount", where)),
        ))
    return hits


def decode_summary(payload: bytes, language: Language) -> Article:
    """
    Decode a page summary response into an Article.

    Args:
        payload: Raw response body
        language: Edition the request was made against

    Returns:
        The decoded Article

    Raises:
        ParseError: If the body is not JSON or a required field is missing
    """
    data = load_json(payload)
    return article_from_summary(data, language, "summary")


def decode_featured(payload: bytes, language: Language) -> Article:
    """
    Decode a featured feed response and return its article of the day (tfa).
    """
    data = load_json(payload)
    summary = _require(data, "tfa", dict, "featured")
    return article_from_summary(summary, language, "tfa")


def article_from_summary(data: Any, language: Language, where: str = "summary") -> Article:
    if not isinstance(data, dict):
        raise ParseError(f"{where} is not an object")

    content_urls = _require(data, "content_urls", dict, where)
    desktop = _require(content_urls, "desktop", dict, f"{where}.content_urls")
    page_url = _require(desktop, "page", str, f"{where}.content_urls.desktop")
    if not is_valid_url(page_url):
        raise ParseError(f"{where}.content_urls.desktop.page is not a valid URL: {page_url!r}")

    return Article(
        title=_require(data, "title", str, where),
        extract=_require(data, "extract", str, where),
        description=_optional(data, "description", str, where),
        thumbnail=_decode_thumbnail(data.get("thumbnail"), where),
        url=page_url,
        page_id=_require_int(data, "pageid", where),
        language=language,
        last_modified=_decode_timestamp(data.get("timestamp"), where),
    )


def is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


def _decode_thumbnail(raw: Optional[Dict], where: str) -> Optional[Image]:
    if raw is None:
        return None
    where = f"{where}.thumbnail"
    if not isinstance(raw, dict):
        raise ParseError(f"{where} is not an object")

    source = _require(raw, "source", str, where)
    width = _require_int(raw, "width", where)
    height = _require_int(raw, "height", where)

    # Protocol-relative sources are served over https
    if source.startswith("//"):
        source = f"https:{source}"

    # A thumbnail with an unusable source or negative size is dropped, not reported
    if not is_valid_url(source) or width < 0 or height < 0:
        logger.debug(f"Dropping thumbnail with invalid source {source!r}")
        return None
    return Image(source=source, width=width, height=height)


def _decode_timestamp(raw: Any, where: str) -> Optional[datetime]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ParseError(f"{where}.timestamp is not a string")
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as e:
        raise ParseError(f"{where}.timestamp is not an ISO 8601 timestamp: {raw!r}") from e


def _require(data: Dict, key: str, expected: type, where: str) -> Any:
    if not isinstance(data, dict):
        raise ParseError(f"{where} is not an object")
    if key not in data or data[key] is None:
        raise ParseError(f"missing field '{key}' in {where}")
    value = data[key]
    if not isinstance(value, expected):
        raise ParseError(f"field '{key}' in {where} should be {expected.__name__}, got {type(value).__name__}")
    return value


def _require_int(data: Dict, key: str, where: str) -> int:
    value = _require(data, key, int, where)
    # bool is a subclass of int
    if isinstance(value, bool):
        raise ParseError(f"field '{key}' in {where} should be int, got bool")
    return value


def _optional(data: Dict, key: str, expected: type, where: str) -> Any:
    if data.get(key) is None:
        return None
    return _require(data, key, expected, where)
