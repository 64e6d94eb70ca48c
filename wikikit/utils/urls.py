"""
Request URL construction for the Wikipedia endpoints used by WikiKit.
"""
from datetime import date
from typing import Optional
from urllib.parse import quote, urlencode

from wikikit.core.language import Language

ACTION_API_PATH = "/w/api.php"
REST_API_PATH = "/api/rest_v1"

# Sub-delimiters and ':' '@' stay literal in a path segment; '/', '?' and '#' do not
TITLE_SAFE_CHARS = "!$&'()*+,;=:@"


def _base(language: Language) -> str:
    return f"https://{language.host}"


def search_url(query: str, language: Language, limit: int) -> str:
    """
    Build a full-text search URL against the action API.

    Args:
        query: Search terms, unescaped
        language: Edition to search
        limit: Maximum number of hits, already clamped by the caller

    Returns:
        Fully-qualified URL
    """
    params = [
        ("action", "query"),
        ("list", "search"),
        ("format", "json"),
        ("srsearch", query),
        ("srlimit", str(limit)),
        ("srprop", "snippet|wordcount"),
    ]
    query_string = urlencode(params, errors="replace", quote_via=quote)
    return f"{_base(language)}{ACTION_API_PATH}?{query_string}"


def encode_title(title: str) -> str:
    """
    Percent-encode a page title as a single path segment.

    Non-ASCII characters are encoded as UTF-8. Characters that cannot be
    encoded (lone surrogates) are replaced rather than raising.
    """
    return quote(title, safe=TITLE_SAFE_CHARS, errors="replace")


def summary_url(title: str, language: Language) -> str:
    return f"{_base(language)}{REST_API_PATH}/page/summary/{encode_title(title)}"


def random_url(language: Language) -> str:
    return f"{_base(language)}{REST_API_PATH}/page/random/summary"


def featured_url(language: Language, day: Optional[date] = None) -> str:
    """
    Build the featured-content feed URL for a calendar day.

    The day is taken as given. When omitted, the local calendar date is used,
    so callers near midnight may see a different day than the servers do.

    Args:
        language: Edition to query
        day: Calendar date; datetimes are truncated to their own date fields

    Returns:
        Fully-qualified URL ending in /feed/featured/YYYY/MM/DD
    """
    if day is None:
        day = date.today()
    return (
        f"{_base(language)}{REST_API_PATH}/feed/featured/"
        f"{day.year:04d}/{day.month:02d}/{day.day:02d}"
    )
