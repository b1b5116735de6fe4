"""GitHub login routes; a completed login leaves the token in a cookie."""
import logging
import secrets
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from agenda.config import AGENDA_PATH, COOKIE_ACCESS_TOKEN, GITHUB_LOGIN_PATH
from agenda.errors import AuthFailure
from .service import GitHubOAuth

logger = logging.getLogger(__name__)

router = APIRouter(prefix=GITHUB_LOGIN_PATH, tags=["Authentication"])

OAUTH_STATE_COOKIE = "oauth_state"
AUTH_FAILURE_MESSAGE = "Failed to authenticate with GitHub"


def _github_oauth() -> GitHubOAuth:
    oauth = GitHubOAuth.from_env()
    if oauth is None:
        raise HTTPException(status_code=500, detail="GitHub OAuth not configured")
    return oauth


def _failure_redirect() -> RedirectResponse:
    url = "/?" + urlencode({"error": AUTH_FAILURE_MESSAGE})
    response = RedirectResponse(url, status_code=status.HTTP_302_FOUND)
    response.delete_cookie(OAUTH_STATE_COOKIE)
    return response


@router.get("")
async def github_login():
    """Send the caller to GitHub's authorization page."""
    oauth = _github_oauth()
    state = secrets.token_urlsafe(24)
    response = RedirectResponse(oauth.authorization_url(state), status_code=status.HTTP_302_FOUND)
    # Persist state in HttpOnly cookie to validate on callback
    response.set_cookie(OAUTH_STATE_COOKIE, state, httponly=True, max_age=600, samesite="lax")
    return response


@router.get("/authorized")
def github_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
):
    """Complete the GitHub login and store the access token as the session."""
    oauth = _github_oauth()
    try:
        state_cookie = request.cookies.get(OAUTH_STATE_COOKIE)
        if not code:
            raise AuthFailure("No authorization code in callback")
        if not state_cookie or state_cookie != state:
            raise AuthFailure("Invalid OAuth state")

        access_token = oauth.exchange_code(code)
        user = oauth.fetch_user(access_token)
    except AuthFailure as e:
        logger.warning(f"GitHub login failed: {e.reason}")
        return _failure_redirect()

    logger.info(f"GitHub user {user.login} logged in")
    response = RedirectResponse(AGENDA_PATH, status_code=status.HTTP_302_FOUND)
    response.set_cookie(COOKIE_ACCESS_TOKEN, access_token, httponly=True, samesite="lax")
    response.delete_cookie(OAUTH_STATE_COOKIE)
    return response
