"""
Shared fixtures for unit tests.

No test here touches the network: HTTP traffic goes through
httpx.MockTransport and every request is recorded for inspection.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://api.1inch.dev"


class RecordingTransport:
    """
    Mock transport that records requests and replies from a queue

    Each queued reply is (status_code, json_body) or an exception instance
    to raise. When the queue is empty, replies 200 with {"ok": True}.
    """

    def __init__(self):
        self.requests = []
        self.replies = []

    def queue(self, status_code=200, body=None):
        self.replies.append((status_code, body))

    def queue_error(self, error):
        self.replies.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0) if self.replies else (200, {"ok": True})
        if isinstance(reply, Exception):
            raise reply
        status_code, body = reply
        if body is None:
            return httpx.Response(status_code)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @staticmethod
    def body_of(request: httpx.Request):
        return json.loads(request.content) if request.content else None


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def credential():
    from oneinch_network.types import Credential
    return Credential(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def client(transport):
    from oneinch_network import OneInchClient
    http_client = transport.client()
    with OneInchClient(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, http_client=http_client) as c:
        yield c
    http_client.close()
