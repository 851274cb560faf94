"""Query handlers."""

from workflo_auth.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from workflo_auth.application.queries.handlers.validate_refresh_token_handler import (
    ValidateRefreshTokenHandler,
)

__all__ = ["GetCurrentUserHandler", "ValidateRefreshTokenHandler"]
