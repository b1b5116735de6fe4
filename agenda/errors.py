"""Exceptions raised by the agenda core and translated at the HTTP boundary."""


class AgendaError(Exception):
    """Base exception for agenda errors."""
    pass


class RecordValidationError(AgendaError):
    """Raised when a homework payload or one of its timestamps is malformed."""
    def __init__(self, message: str = ""):
        self.message = message or "Malformed homework record"
        super().__init__(self.message)


class RecordNotFoundError(AgendaError):
    """Raised when an operation references a submission date with no record."""
    def __init__(self, key: str, message: str = ""):
        self.key = key
        self.message = message or f"No homework record submitted at: {key}"
        super().__init__(self.message)


class UpstreamUnavailableError(AgendaError):
    """Raised when the backing store has not reported ready."""
    pass


class AuthFailure(AgendaError):
    """Raised when the GitHub OAuth exchange cannot be completed."""
    def __init__(self, reason: str = ""):
        self.reason = reason or "Failed to authenticate with GitHub"
        super().__init__(self.reason)
