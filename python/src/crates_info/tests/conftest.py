"""Shared fixtures for crates-info tests."""

import json

import httpx
import pytest

from crates_info.client import CratesClient


@pytest.fixture
def crate_payload() -> dict:
    return {
        "crate": {
            "id": "serde",
            "name": "serde",
            "description": "A generic serialization/deserialization framework",
            "keywords": ["serde", "serialization", "no_std"],
            "max_stable_version": "1.0.210",
            "max_version": "1.0.210",
            "homepage": "https://serde.rs",
            "repository": "https://github.com/serde-rs/serde",
            "documentation": "https://docs.rs/serde",
            "downloads": 123456789,
        }
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, status_code: int = 200, payload=None, content: bytes | None = None):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, content=json.dumps(payload).encode())

        super().__init__(handler)


@pytest.fixture
def make_transport():
    """Build a RecordingTransport serving a fixed response."""
    return RecordingTransport


@pytest.fixture
def make_client():
    """Build a CratesClient backed by a RecordingTransport."""

    def _make(status_code: int = 200, payload=None, content: bytes | None = None, settings=None):
        transport = RecordingTransport(status_code=status_code, payload=payload, content=content)
        return CratesClient(settings, transport=transport), transport

    return _make
