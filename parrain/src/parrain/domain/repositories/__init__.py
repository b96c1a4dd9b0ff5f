"""
Repository interfaces.
"""

from parrain.domain.repositories.i_user_store import IUserStore

__all__ = ["IUserStore"]
