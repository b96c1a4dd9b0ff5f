"""
Persistence infrastructure.
"""

from parrain.infrastructure.persistence.json_user_store import JsonUserStore

__all__ = ["JsonUserStore"]
