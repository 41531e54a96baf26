"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from storefront.shared.telemetry.logging import (
    RequestIdLogFilter,
    get_logger,
    request_id_var,
    setup_logging,
)
from storefront.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from storefront.shared.telemetry.tracing import (
    add_span_attributes,
    get_trace_id,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "RequestIdLogFilter",
    "request_id_var",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "set_span_error",
    "get_trace_id",
]
