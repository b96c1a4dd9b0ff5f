"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "parrain_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "parrain_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "parrain_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

# ============================================================
# Store Metrics
# ============================================================

store_operations_total = Counter(
    "parrain_store_operations_total",
    "Total store load/flush operations",
    ["operation"],
)

store_operation_duration_seconds = Histogram(
    "parrain_store_operation_duration_seconds",
    "Store operation duration in seconds",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

# ============================================================
# Business Metrics
# ============================================================

users_created_total = Counter(
    "parrain_users_created_total",
    "Total users registered",
)

referrals_credited_total = Counter(
    "parrain_referrals_credited_total",
    "Total referral credits applied",
)

orphaned_referrals_total = Counter(
    "parrain_orphaned_referrals_total",
    "Signups with a referral code that matched no user",
)

profile_conflicts_total = Counter(
    "parrain_profile_conflicts_total",
    "Profile updates rejected for uniqueness conflicts",
    ["field"],
)

registered_users = Gauge(
    "parrain_registered_users",
    "Users in the registry at last flush",
)
