"""Request Context Management.

Binds a per-call request ID plus the HTTP method and endpoint of the
outbound API call to every log entry emitted while the call is in flight.
Uses contextvars so concurrent calls on one event loop stay separate.
"""

import uuid
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any


_request_id_var: ContextVar[str] = ContextVar("request_id", default="")
_extra_context_var: ContextVar[dict] = ContextVar("extra_context", default={})


def generate_request_id() -> str:
    """Generate a unique request ID using UUID4."""
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Get the current request ID from context."""
    return _request_id_var.get()


def get_context_dict() -> dict[str, Any]:
    """Get all context variables as a dictionary for log binding."""
    ctx = {}
    req_id = _request_id_var.get()
    if req_id:
        ctx["request_id"] = req_id
    extra = _extra_context_var.get()
    if extra:
        ctx.update(extra)
    return ctx


@dataclass
class RequestContext:
    """Context manager scoping log fields to one outbound API call.

    Example:
        with RequestContext(method="GET", endpoint="/trader/v1/accounts"):
            logger.info("sending")  # includes request_id, method, endpoint
    """

    method: str = ""
    endpoint: str = ""
    request_id: str = ""
    extra: dict[str, Any] = field(default_factory=dict)
    _tokens: list = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.request_id:
            self.request_id = generate_request_id()

    def __enter__(self) -> "RequestContext":
        bound = dict(self.extra)
        if self.method:
            bound["method"] = self.method
        if self.endpoint:
            bound["endpoint"] = self.endpoint
        self._tokens = [
            _request_id_var.set(self.request_id),
            _extra_context_var.set(bound),
        ]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        request_token, extra_token = self._tokens
        _extra_context_var.reset(extra_token)
        _request_id_var.reset(request_token)
        self._tokens = []

