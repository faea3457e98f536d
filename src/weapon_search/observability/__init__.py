"""Observability module for structured logging and OpenTelemetry tracing."""

from weapon_search.observability.context import get_trace_context, set_trace_context, trace_context
from weapon_search.observability.logging import JsonFormatter, configure_logging
from weapon_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
]
