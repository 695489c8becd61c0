"""
CSRF protection for the console's form posts.
"""
import hmac
import secrets
from typing import Iterable, Optional
from urllib.parse import parse_qs

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

CSRF_HEADER = "x-csrf-token"
CSRF_FORM_FIELD = "csrf_token"
CSRF_SESSION_KEY = "csrf_token"
SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def generate_csrf_token() -> str:
    """32 random bytes, hex encoded."""
    return secrets.token_hex(32)


def validate_csrf_token(token: Optional[str], stored_token: Optional[str]) -> bool:
    if not token or not stored_token:
        return False
    return hmac.compare_digest(token.encode(), stored_token.encode())


def get_csrf_token(request: Request) -> str:
    """Return the session's token, issuing one on first use."""
    token = request.session.get(CSRF_SESSION_KEY)
    if not token:
        token = generate_csrf_token()
        request.session[CSRF_SESSION_KEY] = token
    return token


class CSRFMiddleware:
    """
    Reject unsafe requests whose token does not match the session's.

    The token is read from the ``x-csrf-token`` header, falling back to the
    ``csrf_token`` field of an url-encoded form body. Must sit inside
    ``SessionMiddleware``.
    """

    def __init__(self, app: ASGIApp, exclude: Iterable[str] = ()):
        self.app = app
        self.exclude = tuple(exclude)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        if scope["method"] in SAFE_METHODS or any(path.startswith(p) for p in self.exclude):
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        stored = request.session.get(CSRF_SESSION_KEY)
        token = request.headers.get(CSRF_HEADER)

        body = b""
        if token is None and request.headers.get("content-type", "").startswith(
            "application/x-www-form-urlencoded"
        ):
            body = await _read_body(receive)
            values = parse_qs(body.decode("latin-1")).get(CSRF_FORM_FIELD)
            token = values[0] if values else None

        if not validate_csrf_token(token, stored):
            response = JSONResponse({"error": "Invalid CSRF token"}, status_code=403)
            await response(scope, receive, send)
            return

        if body:
            receive = _replay(body)
        await self.app(scope, receive, send)


async def _read_body(receive: Receive) -> bytes:
    chunks = []
    more_body = True
    while more_body:
        message = await receive()
        chunks.append(message.get("body", b""))
        more_body = message.get("more_body", False)
    return b"".join(chunks)


def _replay(body: bytes) -> Receive:
    sent = False

    async def receive() -> Message:
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return receive
