"""Per-request gates run before any route handler.

The availability gate refuses all traffic until the backing store is ready.
The access gate keeps anonymous callers out of the agenda and sends callers
that already hold a session past the GitHub login.
"""
import enum
import logging
from typing import Mapping

from fastapi import Request, status
from fastapi.responses import RedirectResponse, Response

from .config import AGENDA_PATH, COOKIE_ACCESS_TOKEN, GITHUB_LOGIN_PATH
from .database import backing_store
from .errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class PathClass(enum.Enum):
    protected = "protected"
    auth_flow = "auth_flow"
    other = "other"


class GateDecision(enum.Enum):
    allow = "allow"
    redirect_home = "redirect_home"
    redirect_agenda = "redirect_agenda"


def classify_path(path: str, agenda_path: str = AGENDA_PATH,
                  auth_path: str = GITHUB_LOGIN_PATH) -> PathClass:
    if path.startswith(agenda_path):
        return PathClass.protected
    if path.startswith(auth_path):
        return PathClass.auth_flow
    return PathClass.other


def has_session(cookies: Mapping[str, str]) -> bool:
    """Any session cookie value, even an empty one, counts as logged in."""
    return cookies.get(COOKIE_ACCESS_TOKEN) is not None


def decide(path_class: PathClass, session: bool) -> GateDecision:
    if path_class is PathClass.protected and not session:
        return GateDecision.redirect_home
    if path_class is PathClass.auth_flow and session:
        return GateDecision.redirect_agenda
    return GateDecision.allow


async def access_gate(request: Request, call_next):
    """Redirect according to the path and the presence of a session cookie."""
    path = request.url.path
    decision = decide(classify_path(path), has_session(request.cookies))
    if decision is GateDecision.redirect_home:
        logger.debug(f"Anonymous request for {path}, redirecting home")
        return RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    if decision is GateDecision.redirect_agenda:
        logger.debug(f"Session already present for {path}, redirecting to agenda")
        return RedirectResponse(AGENDA_PATH, status_code=status.HTTP_302_FOUND)
    return await call_next(request)


async def availability_gate(request: Request, call_next):
    """Short-circuit with 503 while the backing store is not ready."""
    try:
        backing_store.require_ready()
    except UpstreamUnavailableError as e:
        logger.warning(f"Refusing {request.method} {request.url.path}: {e}")
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return await call_next(request)
