"""
middleware.py — Request logging for every HTTP request

Wraps the ASGI send callable to capture the response status, then writes
one log line per request through the RequestLogger built at startup.

Business Rules:
- Only the first http.response.start is forwarded; later ones are dropped
- Status defaults to 200 when the app never sent a start message
- An exception before any status was sent answers 500 (with X-Request-ID),
  is logged as 500 and re-raised
- Every response carries an 8-char X-Request-ID, also bound to log records

Called by: nbadata/main.py (create_app)
Depends on: nbadata/logging_config.py (RequestLogger)
"""

import time
import uuid

from loguru import logger

from .logging_config import RequestLogger

REQUEST_ID_HEADER = b"x-request-id"


class StatusRecorder:
    """ASGI send wrapper that remembers the first status written."""

    def __init__(self, send, request_id: str = ""):
        self._send = send
        self._request_id = request_id
        self._status = None

    @property
    def wrote_header(self) -> bool:
        return self._status is not None

    @property
    def status(self) -> int:
        return self._status if self._status is not None else 200

    async def __call__(self, message) -> None:
        if message["type"] == "http.response.start":
            if self._status is not None:
                return
            self._status = message["status"]
            if self._request_id:
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, self._request_id.encode("latin-1")))
                message = {**message, "headers": headers}
        await self._send(message)


class RequestLoggingMiddleware:
    def __init__(self, app, request_logger: RequestLogger):
        self.app = app
        self.request_logger = request_logger

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = uuid.uuid4().hex[:8]
        scope = {**scope, "state": {**scope.get("state", {}), "request_id": request_id}}
        recorder = StatusRecorder(send, request_id)
        start = time.perf_counter()
        with logger.contextualize(request_id=request_id):
            try:
                await self.app(scope, receive, recorder)
            except Exception:
                if not recorder.wrote_header:
                    # through the recorder so the 500 carries X-Request-ID
                    await _send_server_error(recorder)
                self._log(scope, recorder.status, time.perf_counter() - start)
                raise
            self._log(scope, recorder.status, time.perf_counter() - start)

    def _log(self, scope, status: int, duration: float) -> None:
        self.request_logger.log_request(scope["method"], _request_uri(scope), status, duration)


async def _send_server_error(send) -> None:
    body = b"Internal Server Error"
    await send({
        "type": "http.response.start",
        "status": 500,
        "headers": [
            (b"content-type", b"text/plain; charset=utf-8"),
            (b"content-length", str(len(body)).encode("latin-1")),
        ],
    })
    await send({"type": "http.response.body", "body": body})


def _request_uri(scope) -> str:
    path = scope.get("raw_path") or scope["path"].encode("utf-8")
    if isinstance(path, bytes):
        path = path.decode("latin-1")
    query = scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path
