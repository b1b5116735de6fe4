"""GitHub authentication package for the application."""
from .models import GitHubToken, GitHubUser
from .service import GitHubOAuth
from .router import router as auth_router

__all__ = [
    'GitHubToken',
    'GitHubUser',
    'GitHubOAuth',
    'auth_router'
]
