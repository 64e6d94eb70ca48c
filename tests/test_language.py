import pytest

from wikikit.core.errors import ErrorKind, InvalidLanguage
from wikikit.core.language import DEFAULT_LANGUAGE, Language


def test_registry_has_twenty_editions_with_unique_codes() -> None:
    codes = [language.code for language in Language]
    assert len(codes) == 20
    assert len(set(codes)) == 20


def test_language_names() -> None:
    assert Language.GERMAN.code == "de"
    assert Language.GERMAN.name_native == "Deutsch"
    assert Language.GERMAN.name_english == "German"
    assert Language.JAPANESE.name_native == "日本語"
    assert Language.CZECH.name_native == "Čeština"


def test_every_language_has_names() -> None:
    for language in Language:
        assert language.name_native
        assert language.name_english


def test_host_uses_code_as_subdomain() -> None:
    assert Language.FRENCH.host == "fr.wikipedia.org"


def test_from_code_is_case_and_space_insensitive() -> None:
    assert Language.from_code(" ES ") is Language.SPANISH
    assert Language.from_code(Language.KOREAN) is Language.KOREAN


def test_from_code_rejects_unknown_edition() -> None:
    with pytest.raises(InvalidLanguage) as excinfo:
        Language.from_code("xx")
    assert excinfo.value.kind is ErrorKind.INVALID_LANGUAGE
    assert str(excinfo.value) == "Unsupported language: xx"


def test_default_language_is_english() -> None:
    assert DEFAULT_LANGUAGE is Language.ENGLISH
