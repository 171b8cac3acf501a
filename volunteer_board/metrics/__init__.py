# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "volunteer_requests_total",
    "Total HTTP requests to the volunteer board",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "volunteer_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "volunteer_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
REGISTRATIONS_CREATED = Counter(
    "volunteer_registrations_total",
    "Total volunteer registrations created",
    ["kind"],
)
REGISTRATIONS_REJECTED = Counter(
    "volunteer_registrations_rejected_total",
    "Registrations refused by validation, capacity or duplicate checks",
    ["reason"],
)
REGISTRATIONS_DELETED = Counter(
    "volunteer_registrations_deleted_total",
    "Registrations removed by an administrator",
)
ADMIN_AUTH_FAILURES = Counter(
    "volunteer_admin_auth_failures_total",
    "Admin requests refused",
    ["reason"],
)
