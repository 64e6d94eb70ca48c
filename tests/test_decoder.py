import copy
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from conftest import as_bytes
from wikikit.core import decoder
from wikikit.core.article import Image
from wikikit.core.errors import ParseError
from wikikit.core.language import Language


def test_decode_search_keeps_order_and_raw_fields(search_payload) -> None:
    hits = decoder.decode_search(search_payload)

    assert [hit.title for hit in hits] == ["Machine learning", "Deep learning", "Quantum computing"]
    assert hits[0].page_id == 233488
    assert hits[0].word_count == 1200
    assert hits[0].snippet.startswith("<span")
    assert hits[0].clean_snippet == "Machine learning is a field of study"


def test_decode_search_with_no_hits() -> None:
    assert decoder.decode_search(as_bytes({"query": {"search": []}})) == []


def test_decode_search_missing_field(search_data) -> None:
    del search_data["query"]["search"][1]["pageid"]
    with pytest.raises(ParseError) as excinfo:
        decoder.decode_search(as_bytes(search_data))
    assert "pageid" in excinfo.value.detail


def test_decode_search_type_mismatch(search_data) -> None:
    search_data["query"]["search"][0]["wordcount"] = "many"
    with pytest.raises(ParseError):
        decoder.decode_search(as_bytes(search_data))


def test_decode_summary(summary_payload) -> None:
    article = decoder.decode_summary(summary_payload, Language.ENGLISH)

    assert article.title == "Machine learning"
    assert article.page_id == 233488
    assert article.id == 233488
    assert article.url == "https://en.wikipedia.org/wiki/Machine_learning"
    assert article.language is Language.ENGLISH
    assert article.description.startswith("Study of algorithms")
    assert article.thumbnail == Image("https://upload.wikimedia.org/ml.png", 320, 240)
    assert article.last_modified == datetime(2025, 7, 30, 12, 1, 2, tzinfo=timezone.utc)


def test_decode_summary_optional_fields_absent(summary_data) -> None:
    for key in ("description", "thumbnail", "timestamp"):
        del summary_data[key]
    article = decoder.decode_summary(as_bytes(summary_data), Language.GERMAN)

    assert article.description is None
    assert article.thumbnail is None
    assert not article.has_thumbnail
    assert article.last_modified is None
    assert article.language is Language.GERMAN


def test_decode_summary_drops_thumbnail_with_invalid_source(summary_data) -> None:
    summary_data["thumbnail"]["source"] = "not a url"
    article = decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)
    assert article.thumbnail is None
    assert article.title == "Machine learning"


@pytest.mark.parametrize("field", ["title", "extract", "pageid", "content_urls"])
def test_decode_summary_missing_required_field(summary_data, field) -> None:
    del summary_data[field]
    with pytest.raises(ParseError):
        decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)


def test_decode_summary_bad_timestamp(summary_data) -> None:
    summary_data["timestamp"] = "yesterday"
    with pytest.raises(ParseError):
        decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)


def test_decode_summary_rejects_invalid_json() -> None:
    with pytest.raises(ParseError) as excinfo:
        decoder.decode_summary(b"<html>oops</html>", Language.ENGLISH)
    assert excinfo.value.user_message == "Unable to process the response from Wikipedia."


def test_decode_summary_rejects_non_object_body() -> None:
    with pytest.raises(ParseError):
        decoder.decode_summary(as_bytes(["not", "an", "object"]), Language.ENGLISH)


def test_decode_featured_uses_tfa(summary_data) -> None:
    payload = as_bytes({"tfa": copy.deepcopy(summary_data), "mostread": {}})
    article = decoder.decode_featured(payload, Language.ENGLISH)
    assert article == decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)


def test_decode_featured_without_tfa() -> None:
    with pytest.raises(ParseError) as excinfo:
        decoder.decode_featured(as_bytes({"mostread": {}}), Language.ENGLISH)
    assert "tfa" in str(excinfo.value)


@pytest.mark.parametrize("width, height", [(-1, 240), (320, -5)])
def test_decode_summary_drops_thumbnail_with_negative_size(summary_data, width, height) -> None:
    summary_data["thumbnail"]["width"] = width
    summary_data["thumbnail"]["height"] = height
    article = decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)
    assert article.thumbnail is None


def test_decode_summary_keeps_zero_sized_thumbnail(summary_data) -> None:
    summary_data["thumbnail"]["width"] = 0
    summary_data["thumbnail"]["height"] = 0
    article = decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)
    assert article.thumbnail.aspect_ratio == 1.0


def test_decode_summary_resolves_protocol_relative_thumbnail(summary_data) -> None:
    summary_data["thumbnail"]["source"] = "//upload.wikimedia.org/ml.png"
    article = decoder.decode_summary(as_bytes(summary_data), Language.ENGLISH)
    assert article.thumbnail == Image("https://upload.wikimedia.org/ml.png", 320, 240)


def test_search_hit_is_immutable(search_payload) -> None:
    hit = decoder.decode_search(search_payload)[0]
    with pytest.raises(FrozenInstanceError):
        hit.title = "Other"
    assert hit == decoder.SearchHit(hit.title, hit.snippet, hit.page_id, hit.word_count)
