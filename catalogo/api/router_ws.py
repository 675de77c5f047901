"""
WebSocket search session — keystrokes in, debounced grouped results out.

Client messages:
  {"type": "query", "q": "..."}
  {"type": "max_results", "value": 200}
  {"type": "copied", "code": "...", "ok": true, "error": null}
Server messages:
  {"type": "state", "state": "idle|searching|settled"}
  {"type": "result", ...search result...}
  {"type": "copied", "code": "..." | null}
  {"type": "error", "detail": "..."}
"""
from __future__ import annotations

import asyncio
import json

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect

from catalogo.api.dependencies import get_store
from catalogo.search.session import SearchSession

router = APIRouter(tags=["search"])


def _dispatch(session: SearchSession, msg) -> str | None:
    """Apply one client message. Returns an error detail, or None."""
    if not isinstance(msg, dict):
        return "Message must be a JSON object"
    kind = msg.get("type")
    if kind == "query":
        session.on_input(msg.get("q", ""))
    elif kind == "max_results":
        try:
            session.set_max_results(msg.get("value"))
        except ValueError as exc:
            return str(exc)
    elif kind == "copied":
        code = msg.get("code")
        if code is None:
            return "copied requires a code"
        session.mark_copied(str(code), ok=bool(msg.get("ok", True)), error=msg.get("error"))
    else:
        return f"Unknown message type: {kind!r}"
    return None


@router.websocket("/ws/search")
async def search_socket(websocket: WebSocket):
    try:
        store = get_store()
    except HTTPException:
        await websocket.close(code=1013)
        return
    await websocket.accept()
    outbox: asyncio.Queue = asyncio.Queue()

    session = SearchSession(
        store,
        on_result=lambda result: outbox.put_nowait({"type": "result", **result.to_dict()}),
        on_state=lambda state: outbox.put_nowait({"type": "state", "state": state.value}),
        on_feedback=lambda code: outbox.put_nowait({"type": "copied", "code": code}),
    )

    async def _sender():
        while True:
            payload = await outbox.get()
            await websocket.send_json(payload)

    sender = asyncio.create_task(_sender())
    try:
        while True:
            text = await websocket.receive_text()
            if sender.done():
                break
            try:
                msg = json.loads(text)
            except ValueError:
                outbox.put_nowait({"type": "error", "detail": "Invalid JSON"})
                continue
            detail = _dispatch(session, msg)
            if detail:
                outbox.put_nowait({"type": "error", "detail": detail})
    except WebSocketDisconnect:
        pass
    finally:
        session.close()
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)
