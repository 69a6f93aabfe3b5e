"""Span helpers for the search pipeline.

Search text and actor ids may identify a deceased person or a family member,
so they are never copied onto spans. Only allowlisted keyword arguments and
explicit counters become attributes.
"""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

SPAN_ARGUMENT_ALLOWLIST = frozenset({"scope", "kind", "role", "limit"})

_tracer = trace.get_tracer("app.search")


def _argument_attributes(kwargs: dict[str, Any]) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for key, value in kwargs.items():
        if key.lower() in SPAN_ARGUMENT_ALLOWLIST:
            attrs[f"arg.{key}"] = str(getattr(value, "value", value))
    return attrs


def traced(operation_name: str | None = None, attributes: dict | None = None) -> Callable:
    """Run the decorated coroutine (or function) inside its own span.

    The span is marked ERROR and the exception recorded when the call raises;
    the exception still propagates.
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"

        def _open(kwargs: dict[str, Any]):
            span_cm = _tracer.start_as_current_span(
                span_name,
                attributes={**(attributes or {}), **_argument_attributes(kwargs)},
                record_exception=False,
                set_status_on_exception=False,
            )
            return span_cm

        def _fail(span: trace.Span, exc: Exception) -> None:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, type(exc).__name__))

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _open(kwargs) as span:
                    try:
                        return await func(*args, **kwargs)
                    except Exception as exc:
                        _fail(span, exc)
                        raise

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _open(kwargs) as span:
                try:
                    return func(*args, **kwargs)
                except Exception as exc:
                    _fail(span, exc)
                    raise

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)
