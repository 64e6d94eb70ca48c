"""
Wikipedia language editions supported by WikiKit.
"""
from enum import Enum
from typing import Union

from wikikit.core.errors import InvalidLanguage


class Language(Enum):
    """
    A Wikipedia language edition.

    Each member's value is the ISO 639-1 code used as the edition's subdomain.
    """
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    JAPANESE = "ja"
    CHINESE = "zh"
    ARABIC = "ar"
    HINDI = "hi"
    KOREAN = "ko"
    DUTCH = "nl"
    POLISH = "pl"
    SWEDISH = "sv"
    NORWEGIAN = "no"
    DANISH = "da"
    FINNISH = "fi"
    TURKISH = "tr"
    CZECH = "cs"

    @property
    def code(self) -> str:
        return self.value

    @property
    def name_native(self) -> str:
        """Name of the language in the language itself."""
        return _NAMES[self][0]

    @property
    def name_english(self) -> str:
        return _NAMES[self][1]

    @property
    def host(self) -> str:
        return f"{self.value}.wikipedia.org"

    @classmethod
    def from_code(cls, code: Union[str, "Language"]) -> "Language":
        """
        Look up a language edition by its ISO code.

        Args:
            code: ISO 639-1 code such as 'en', or a Language member

        Returns:
            The matching Language

        Raises:
            InvalidLanguage: If the code is not a supported edition
        """
        if isinstance(code, cls):
            return code
        normalized = str(code).strip().lower()
        for language in cls:
            if language.value == normalized:
                return language
        raise InvalidLanguage(str(code))


_NAMES = {
    Language.ENGLISH: ("English", "English"),
    Language.SPANISH: ("Español", "Spanish"),
    Language.FRENCH: ("Français", "French"),
    Language.GERMAN: ("Deutsch", "German"),
    Language.ITALIAN: ("Italiano", "Italian"),
    Language.PORTUGUESE: ("Português", "Portuguese"),
    Language.RUSSIAN: ("Русский", "Russian"),
    Language.JAPANESE: ("日本語", "Japanese"),
    Language.CHINESE: ("中文", "Chinese"),
    Language.ARABIC: ("العربية", "Arabic"),
    Language.HINDI: ("हिन्दी", "Hindi"),
    Language.KOREAN: ("한국어", "Korean"),
    Language.DUTCH: ("Nederlands", "Dutch"),
    Language.POLISH: ("Polski", "Polish"),
    Language.SWEDISH: ("Svenska", "Swedish"),
    Language.NORWEGIAN: ("Norsk", "Norwegian"),
    Language.DANISH: ("Dansk", "Danish"),
    Language.FINNISH: ("Suomi", "Finnish"),
    Language.TURKISH: ("Türkçe", "Turkish"),
    Language.CZECH: ("Čeština", "Czech"),
}

DEFAULT_LANGUAGE = Language.ENGLISH
