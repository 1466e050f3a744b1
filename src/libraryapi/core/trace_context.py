"""Request-scoped trace id shared by the middleware and the log formatter."""

from contextvars import ContextVar

# None outside of an HTTP request (startup, shutdown, tests)
trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)
