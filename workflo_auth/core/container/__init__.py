"""Container module - centralized dependency injection.

    from workflo_auth.core.container import bootstrap, get_message_bus

Organized by concern:
- infrastructure: logging, security, persistence, email, OAuth registry
- handlers: auth handlers wired into the message bus
"""

from workflo_auth.core.container.handlers import (
    bootstrap,
    get_message_bus,
    reset_container,
)
from workflo_auth.core.container.infrastructure import (
    get_breach_service,
    get_email_hasher,
    get_email_service,
    get_email_verification_token_service,
    get_logger,
    get_oauth_registry,
    get_password_service,
    get_refresh_token_store,
    get_token_service,
    get_used_token_store,
    get_user_repository,
)

__all__ = [
    "bootstrap",
    "get_breach_service",
    "get_email_hasher",
    "get_email_service",
    "get_email_verification_token_service",
    "get_logger",
    "get_message_bus",
    "get_oauth_registry",
    "get_password_service",
    "get_refresh_token_store",
    "get_token_service",
    "get_used_token_store",
    "get_user_repository",
    "reset_container",
]
