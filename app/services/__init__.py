"""Business logic services."""

from app.services.auth_service import AuthService
from app.services.result import ServiceResult
from app.services.session_context import FileSessionStore, MemorySessionStore, SessionContext, get_session_context

__all__ = [
    "AuthService",
    "ServiceResult",
    "SessionContext",
    "FileSessionStore",
    "MemorySessionStore",
    "get_session_context",
]
