from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

try:  # Optional OpenTelemetry import
    from opentelemetry import trace
except Exception:  # pragma: no cover
    trace = None


@contextmanager
def traced_span(name: str, **attributes: Any) -> Iterator[None]:
    if trace:
        tracer = trace.get_tracer("citeguard")
        with tracer.start_as_current_span(name) as span:
            for key, value in attributes.items():
                span.set_attribute(key, value)
            yield
    else:
        yield
