"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming and are upper snake case so
they can be surfaced verbatim in problem responses.

Categories:
- Validation errors (VALIDATION_*, INVALID_*)
- Business rule violations (BUSINESS_*, PASSWORD_BREACHED)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*)
- Authorization errors (ACCOUNT_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- OAuth errors (OAUTH_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "VALIDATION_FAILED"
    VALIDATION_REQUIRED = "VALIDATION_REQUIRED"
    VALIDATION_TOO_SHORT = "VALIDATION_TOO_SHORT"
    VALIDATION_TOO_LONG = "VALIDATION_TOO_LONG"
    VALIDATION_INVALID_FORMAT = "VALIDATION_INVALID_FORMAT"
    VALIDATION_OUT_OF_RANGE = "VALIDATION_OUT_OF_RANGE"
    PASSWORD_BREACHED = "PASSWORD_BREACHED"

    # Business rule violations
    BUSINESS_INVALID_STATE = "BUSINESS_INVALID_STATE"
    BUSINESS_ALREADY_EXISTS = "BUSINESS_ALREADY_EXISTS"
    BUSINESS_CONSTRAINT_VIOLATION = "BUSINESS_CONSTRAINT_VIOLATION"
    BUSINESS_INVALID_USER_STATE = "BUSINESS_INVALID_USER_STATE"

    # Authentication errors
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
    TOKEN_REQUIRED = "TOKEN_REQUIRED"
    TOKEN_MALFORMED = "TOKEN_MALFORMED"
    TOKEN_SIGNATURE_INVALID = "TOKEN_SIGNATURE_INVALID"
    TOKEN_ISSUER_INVALID = "TOKEN_ISSUER_INVALID"
    TOKEN_AUDIENCE_INVALID = "TOKEN_AUDIENCE_INVALID"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_PURPOSE_INVALID = "TOKEN_PURPOSE_INVALID"
    TOKEN_TYPE_INVALID = "TOKEN_TYPE_INVALID"
    TOKEN_CLAIMS_INVALID = "TOKEN_CLAIMS_INVALID"
    TOKEN_REVOKED = "TOKEN_REVOKED"
    TOKEN_ALREADY_USED = "TOKEN_ALREADY_USED"

    # Authorization errors
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    ACCOUNT_DEACTIVATED = "ACCOUNT_DEACTIVATED"

    # Resource errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Conflict errors
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    RESOURCE_CONFLICT = "RESOURCE_CONFLICT"

    # Privacy errors
    PRIVACY_VIOLATION = "PRIVACY_VIOLATION"

    # OAuth errors
    OAUTH_TIMEOUT = "OAUTH_TIMEOUT"
    OAUTH_NETWORK_ERROR = "OAUTH_NETWORK_ERROR"
    OAUTH_UNEXPECTED_ERROR = "OAUTH_UNEXPECTED_ERROR"
    OAUTH_TOKEN_EXCHANGE_FAILED = "OAUTH_TOKEN_EXCHANGE_FAILED"
    OAUTH_USER_INFO_FAILED = "OAUTH_USER_INFO_FAILED"
    OAUTH_INVALID_RESPONSE = "OAUTH_INVALID_RESPONSE"
    OAUTH_UNSUPPORTED_PROVIDER = "OAUTH_UNSUPPORTED_PROVIDER"
