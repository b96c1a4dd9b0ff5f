"""
API routes.
"""

from parrain.presentation.api.routes import health, leaderboard, users

__all__ = ["health", "leaderboard", "users"]
