"""GitHub OAuth authorization code exchange."""
import logging
import os
from typing import Optional
from urllib.parse import urlencode

import requests
from pydantic import ValidationError

from agenda.config import GITHUB_CALLBACK_PATH, STATIC_URL
from agenda.errors import AuthFailure
from .models import GitHubToken, GitHubUser

logger = logging.getLogger(__name__)

GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_USER_URL = "https://api.github.com/user"
GITHUB_USER_SCOPE = "read:user"


class GitHubOAuth:
    """Client for GitHub's web application flow."""

    def __init__(self, client_id: str, client_secret: str, redirect_uri: Optional[str] = None):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri or STATIC_URL + GITHUB_CALLBACK_PATH

    @classmethod
    def from_env(cls) -> Optional["GitHubOAuth"]:
        """Build a client from GH_OAUTH_ID/GH_OAUTH_SECRET, or None if unset."""
        client_id = os.getenv("GH_OAUTH_ID")
        client_secret = os.getenv("GH_OAUTH_SECRET")
        if not client_id or not client_secret:
            return None
        return cls(client_id, client_secret)

    def authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": GITHUB_USER_SCOPE,
            "state": state,
        }
        return f"{GITHUB_AUTHORIZE_URL}?{urlencode(params)}"

    def exchange_code(self, code: str) -> str:
        """Trade an authorization code for an access token."""
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }
        try:
            resp = requests.post(
                GITHUB_TOKEN_URL,
                data=data,
                headers={"Accept": "application/json"},
                timeout=10,
            )
        except requests.RequestException as e:
            raise AuthFailure(f"Token exchange failed: {e}")
        if resp.status_code != 200:
            raise AuthFailure(f"Token exchange returned {resp.status_code}")

        try:
            token = GitHubToken.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise AuthFailure(f"Unreadable token response: {e}")
        if token.error:
            raise AuthFailure(f"GitHub refused the code: {token.error_description or token.error}")
        if not token.access_token:
            raise AuthFailure("No access token returned by GitHub")
        return token.access_token

    def fetch_user(self, access_token: str) -> GitHubUser:
        """Fetch the profile of the user owning ``access_token``."""
        try:
            resp = requests.get(
                GITHUB_USER_URL,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
                timeout=10,
            )
        except requests.RequestException as e:
            raise AuthFailure(f"User lookup failed: {e}")
        if resp.status_code != 200:
            raise AuthFailure(f"User lookup returned {resp.status_code}")

        try:
            return GitHubUser.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise AuthFailure(f"Unreadable user profile: {e}")
