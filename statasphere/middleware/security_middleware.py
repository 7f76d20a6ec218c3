"""
Dashboard gate

Optional HTTP Basic Auth in front of every page and API route (enabled when
both DASH_USER and DASH_PASS are set), plus the response headers the
dashboard always carries: ``X-Robots-Tag`` and a ``Cache-Control`` chosen by
content type.
"""
import base64
import binascii
import secrets
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from statasphere.config import get_settings

# Reachable without credentials (uptime checks, crawlers)
OPEN_PATHS = ("/health", "/robots.txt")

AUTH_REALM = "Statasphere"

# View fragments carry live warehouse rows, API payloads must never be stored
CACHE_CONTROL = {
    "text/html": "private, no-cache",
    "application/json": "private, no-store",
}


def parse_basic_auth(header: str) -> Optional[Tuple[str, str]]:
    """``Basic base64(user:password)`` → (user, password), or None if malformed"""
    scheme, _, token = header.partition(" ")
    if scheme != "Basic" or not token:
        return None
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    user, sep, password = decoded.partition(":")
    if not sep:
        return None
    return user, password


def _matches(supplied: str, expected: str) -> bool:
    # compare_digest rejects non-ASCII str, so compare the UTF-8 bytes
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


class SecurityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        settings = get_settings()

        if self._gate_enabled(settings) and not request.url.path.startswith(OPEN_PATHS):
            if not self._authorised(request, settings):
                return Response(
                    content="Unauthorized",
                    status_code=401,
                    headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'},
                )

        response: Response = await call_next(request)

        response.headers["X-Robots-Tag"] = "noindex, nofollow"
        content_type = response.headers.get("content-type", "")
        for media_type, policy in CACHE_CONTROL.items():
            if media_type in content_type:
                response.headers["Cache-Control"] = policy
                break

        return response

    @staticmethod
    def _gate_enabled(settings) -> bool:
        return bool(settings.dash_user and settings.dash_pass)

    @staticmethod
    def _authorised(request: Request, settings) -> bool:
        credentials = parse_basic_auth(request.headers.get("authorization", ""))
        if credentials is None:
            return False
        user, password = credentials
        user_ok = _matches(user, settings.dash_user)
        pass_ok = _matches(password, settings.dash_pass)
        return user_ok and pass_ok
