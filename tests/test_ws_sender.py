import asyncio
import json

import pytest
from fastapi import WebSocketDisconnect

from catalogo.api import dependencies
from catalogo.api.router_ws import search_socket


class BrokenPeerSocket:
    """Accepts, then fails every send as a vanished client would."""

    def __init__(self, messages):
        self.messages = list(messages)
        self.received = 0
        self.closed_with = None

    async def accept(self):
        pass

    async def close(self, code=1000):
        self.closed_with = code

    async def send_json(self, payload):
        raise RuntimeError("peer went away")

    async def receive_text(self):
        await asyncio.sleep(0.05)
        if not self.messages:
            raise WebSocketDisconnect()
        self.received += 1
        return self.messages.pop(0)


@pytest.fixture
def installed_store(sample_store):
    dependencies.set_store(sample_store)
    yield sample_store
    dependencies.set_store(None)


@pytest.mark.asyncio
async def test_failed_send_ends_the_session(installed_store):
    query = json.dumps({"type": "query", "q": "agri"})
    ws = BrokenPeerSocket([query] * 5)

    await asyncio.wait_for(search_socket(ws), timeout=2)

    assert ws.received < 5
    assert not [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]


@pytest.mark.asyncio
async def test_socket_closes_without_store():
    dependencies.set_store(None)
    ws = BrokenPeerSocket([])
    await search_socket(ws)
    assert ws.closed_with == 1013
