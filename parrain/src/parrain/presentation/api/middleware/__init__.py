"""
API middleware for Parrain.
"""

from parrain.presentation.api.middleware.error_handler import (
    parrain_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from parrain.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from parrain.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "parrain_exception_handler",
    "validation_exception_handler",
    "unhandled_exception_handler",
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
