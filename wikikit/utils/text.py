"""
Text helpers for WikiKit.
"""
import re
from typing import List

HTML_TAG_PATTERN = re.compile(r"<[^>]+>")

WORDS_PER_MINUTE = 200


def strip_html(text: str) -> str:
    """
    Remove every <...> tag from a string. Entities are left as they are.

    Args:
        text: HTML fragment such as a search snippet

    Returns:
        The text without tags
    """
    return HTML_TAG_PATTERN.sub("", text)


def tokenize(text: str) -> List[str]:
    """Split on whitespace, dropping empty tokens."""
    return text.split()


def word_count(text: str) -> int:
    return len(tokenize(text))


def reading_time(words: int) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    return max(1, words // WORDS_PER_MINUTE)
