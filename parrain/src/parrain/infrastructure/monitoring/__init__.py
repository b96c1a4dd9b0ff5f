"""
Monitoring and observability infrastructure.
"""

from parrain.infrastructure.monitoring import metrics
from parrain.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    log_performance,
    set_request_id,
    setup_logging,
)

__all__ = [
    "metrics",
    "get_logger",
    "get_request_id",
    "set_request_id",
    "setup_logging",
    "log_performance",
]
