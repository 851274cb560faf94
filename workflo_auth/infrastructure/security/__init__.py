"""Security adapters: password hashing, breach screening, email hashing, tokens."""

from workflo_auth.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from workflo_auth.infrastructure.security.email_hashing_service import (
    EmailHashingService,
)
from workflo_auth.infrastructure.security.email_verification_token_service import (
    EmailVerificationTokenService,
)
from workflo_auth.infrastructure.security.jwt_codec import JWTCodec
from workflo_auth.infrastructure.security.jwt_service import JWTService
from workflo_auth.infrastructure.security.password_breach_service import (
    LocalPasswordBreachService,
    PwnedPasswordsBreachService,
)

__all__ = [
    "BcryptPasswordService",
    "EmailHashingService",
    "EmailVerificationTokenService",
    "JWTCodec",
    "JWTService",
    "LocalPasswordBreachService",
    "PwnedPasswordsBreachService",
]
