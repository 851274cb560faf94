"""Auth queries (CQRS read side)."""

from workflo_auth.application.queries.auth_queries import (
    GetCurrentUser,
    ValidateRefreshToken,
)

__all__ = ["GetCurrentUser", "ValidateRefreshToken"]
