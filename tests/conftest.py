"""
Shared fixtures: canned Wikipedia payloads and a stand-in aiohttp session.
"""
import asyncio
import json

import pytest


class FakeResponse:
    def __init__(self, status: int = 200, body: bytes = b"", delay: float = 0.0):
        self.status = status
        self.body = body
        self.delay = delay

    async def read(self) -> bytes:
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeSession:
    """Replays queued responses (or raises queued exceptions) for each GET."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def get(self, url, headers=None):
        self.requests.append((str(url), dict(headers or {})))
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class ClosingSession(FakeSession):
    """FakeSession that also behaves like the async context manager aiohttp.ClientSession is."""

    def __init__(self, *responses):
        super().__init__(*responses)
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True
        return False


def as_bytes(data) -> bytes:
    return json.dumps(data).encode("utf-8")


@pytest.fixture
def summary_data():
    return {
        "title": "Machine learning",
        "extract": "Machine learning is a field of study in artificial intelligence.",
        "description": "Study of algorithms that improve automatically through experience",
        "thumbnail": {
            "source": "https://upload.wikimedia.org/ml.png",
            "width": 320,
            "height": 240,
        },
        "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Machine_learning"}},
        "pageid": 233488,
        "timestamp": "2025-07-30T12:01:02Z",
    }


@pytest.fixture
def search_data():
    return {
        "query": {
            "search": [
                {
                    "title": "Machine learning",
                    "snippet": "<span class=\"searchmatch\">Machine</span> learning is a field of study",
                    "pageid": 233488,
                    "wordcount": 1200,
                },
                {
                    "title": "Deep learning",
                    "snippet": "a subset of machine learning methods",
                    "pageid": 32472154,
                    "wordcount": 150,
                },
                {
                    "title": "Quantum computing",
                    "snippet": "a computer that exploits quantum mechanics",
                    "pageid": 25220,
                    "wordcount": 0,
                },
            ]
        }
    }


@pytest.fixture
def summary_payload(summary_data):
    return as_bytes(summary_data)


@pytest.fixture
def search_payload(search_data):
    return as_bytes(search_data)
