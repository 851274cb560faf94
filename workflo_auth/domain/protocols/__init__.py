"""Domain protocols (ports).

Usage:
    from workflo_auth.domain.protocols import UserRepository, TokenServiceProtocol
"""

from workflo_auth.domain.protocols.email_hashing_protocol import EmailHashingProtocol
from workflo_auth.domain.protocols.email_service_protocol import EmailServiceProtocol
from workflo_auth.domain.protocols.logger_protocol import LoggerProtocol
from workflo_auth.domain.protocols.oauth_provider_protocol import (
    OAuthAuthenticator,
    OAuthProviderLookup,
    OAuthProviderProtocol,
)
from workflo_auth.domain.protocols.password_hashing_protocol import (
    PasswordBreachProtocol,
    PasswordHashingProtocol,
)
from workflo_auth.domain.protocols.token_service_protocol import (
    EmailVerificationTokenProtocol,
    TokenServiceProtocol,
)
from workflo_auth.domain.protocols.token_store_protocol import (
    RefreshTokenRecord,
    RefreshTokenStore,
    UsedTokenStore,
)
from workflo_auth.domain.protocols.user_repository import UserRepository

__all__ = [
    "EmailHashingProtocol",
    "EmailServiceProtocol",
    "EmailVerificationTokenProtocol",
    "LoggerProtocol",
    "OAuthAuthenticator",
    "OAuthProviderLookup",
    "OAuthProviderProtocol",
    "PasswordBreachProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenRecord",
    "RefreshTokenStore",
    "TokenServiceProtocol",
    "UsedTokenStore",
    "UserRepository",
]
