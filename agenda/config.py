"""Environment-level settings for the agenda service."""

import os
from pathlib import Path

PORT = int(os.getenv("PORT", "80"))


def _default_static_url(port: int) -> str:
    return "http://localhost" if port == 80 else f"http://localhost:{port}"


def agenda_prefix(raw: str) -> str:
    """Normalize the protected prefix; the site root cannot be protected
    since anonymous callers are redirected there."""
    prefix = "/" + raw.strip().strip("/")
    if prefix == "/":
        raise ValueError("AGENDA_PATH must name a path below the site root")
    return prefix


# Public URL the service is reachable at; used to build the OAuth callback
STATIC_URL = os.getenv("STATIC_URL", _default_static_url(PORT)).rstrip("/")

# Protected agenda root and its data API
AGENDA_PATH = agenda_prefix(os.getenv("AGENDA_PATH", "/agenda"))
AGENDA_API_PATH = AGENDA_PATH + "/data"

# GitHub OAuth handshake routes
GITHUB_LOGIN_PATH = "/auth/github"
GITHUB_CALLBACK_PATH = GITHUB_LOGIN_PATH + "/authorized"

# Cookie carrying the opaque session token
COOKIE_ACCESS_TOKEN = "access_token"

STATIC_DIR = Path(os.getenv("STATIC_DIR", Path(__file__).resolve().parent / "public"))

CORS_ORIGINS = os.getenv("CORS_ORIGINS", STATIC_URL).split(",")
