"""
Article data models for WikiKit.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from wikikit.core.language import Language
from wikikit.utils.text import reading_time, word_count


class LengthCategory(Enum):
    """
    Size bucket of an article, derived from the word count of its extract.
    """
    STUB = "stub"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "very_long"

    @property
    def description(self) -> str:
        return _CATEGORY_INFO[self][0]

    @property
    def detailed_description(self) -> str:
        return _CATEGORY_INFO[self][1]

    @property
    def reading_time_range(self) -> Tuple[int, int]:
        """Inclusive (min, max) reading time in minutes, for display only."""
        return _CATEGORY_INFO[self][2]

    @classmethod
    def for_word_count(cls, words: int) -> "LengthCategory":
        """
        Bucket a word count. Lower bounds are inclusive, upper bounds exclusive.

        Args:
            words: Number of words in the extract

        Returns:
            The matching LengthCategory
        """
        if words < 50:
            return cls.STUB
        if words < 200:
            return cls.SHORT
        if words < 500:
            return cls.MEDIUM
        if words < 1000:
            return cls.LONG
        return cls.VERY_LONG


_CATEGORY_INFO = {
    LengthCategory.STUB: ("Stub Article", "Stub Article (< 50 words)", (1, 1)),
    LengthCategory.SHORT: ("Short Article", "Short Article (50-200 words)", (1, 1)),
    LengthCategory.MEDIUM: ("Medium Article", "Medium Article (200-500 words)", (1, 3)),
    LengthCategory.LONG: ("Long Article", "Long Article (500-1,000 words)", (3, 5)),
    LengthCategory.VERY_LONG: ("Very Long Article", "Very Long Article (1,000+ words)", (5, 10)),
}


@dataclass(frozen=True)
class Image:
    """
    A thumbnail image attached to an article.
    """
    source: str
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        if self.height <= 0:
            return 1.0
        return self.width / self.height

    @property
    def is_landscape(self) -> bool:
        return self.width > self.height

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width

    @property
    def is_square(self) -> bool:
        return 0.9 <= self.aspect_ratio <= 1.1


@dataclass(frozen=True)
class SearchResult:
    """
    A single hit returned by full-text search.
    """
    title: str
    snippet: str
    page_id: int
    word_count: int
    relevance_score: float

    @property
    def id(self) -> int:
        return self.page_id

    @property
    def estimated_reading_time(self) -> int:
        return reading_time(self.word_count)

    @property
    def is_highly_relevant(self) -> bool:
        return self.relevance_score >= 1.5


@dataclass(frozen=True)
class Article:
    """
    Normalized summary of a Wikipedia page with its metadata.
    """
    title: str
    extract: str
    url: str
    page_id: int
    language: Language
    description: Optional[str] = None
    thumbnail: Optional[Image] = None
    last_modified: Optional[datetime] = field(default=None, compare=False)

    @property
    def id(self) -> int:
        return self.page_id

    @property
    def word_count(self) -> int:
        return word_count(self.extract)

    @property
    def estimated_reading_time(self) -> int:
        return reading_time(self.word_count)

    @property
    def length_category(self) -> LengthCategory:
        return LengthCategory.for_word_count(self.word_count)

    @property
    def has_thumbnail(self) -> bool:
        return self.thumbnail is not None
