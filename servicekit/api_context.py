"""Per-request context holding metadata, the current user, error and audit data."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field

from servicekit.audit import AuditPayload
from servicekit.base_response import ApiError

CACHE_STATEFUL_SESSION = "CACHE_STATEFUL_SESSION"
API_CONTEXT_KEY = "apicontext"


@dataclass
class Metadata:
    """Header values taken from a request, plus the client address."""

    authorization: str = ""
    trace_id: str = ""
    span_id: str = ""
    device_id: str = ""
    device_os: str = ""
    device_model: str = ""
    device_brand: str = ""
    user_agent: str = ""
    app_version: str = ""
    language: str = ""
    latitude: str = ""
    longitude: str = ""
    channel: str = ""
    forward: str = ""
    x_auth_token: str = ""
    client_ip: str = ""


@dataclass
class User:
    """The authenticated user making the request."""

    user_id: int = 0
    name: str = ""
    type: str = ""
    phone_number: str = ""
    email: str = ""
    token: str = ""


@dataclass
class ApiContext:
    """Everything known about the request being handled."""

    metadata: Metadata = field(default_factory=Metadata)
    user: User = field(default_factory=User)
    error: ApiError = field(default_factory=ApiError)
    audit: AuditPayload = field(default_factory=AuditPayload)


_current: ContextVar[ApiContext] = ContextVar(API_CONTEXT_KEY)


def get_api_context() -> ApiContext:
    """Return the current request's context, creating an empty one if needed."""
    try:
        return _current.get()
    except LookupError:
        context = ApiContext()
        _current.set(context)
        return context


def update_api_context(context: ApiContext) -> None:
    """Replace the current request's context."""
    _current.set(context)