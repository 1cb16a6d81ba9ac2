"""Observability package.

Structured JSON event logging, request-scoped context, in-process metrics
and the ASGI middleware that ties them to HTTP requests.
"""

__all__ = [
    "middleware",
    "metrics",
    "logger",
    "context",
]
