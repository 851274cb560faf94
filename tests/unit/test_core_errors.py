"""Unit tests for the DomainError taxonomy.

Tests cover:
- Category to HTTP status mapping
- String form "[Category] CODE: message"
- Factory messages for validation, token and OAuth errors
- Errors are values, not exceptions
"""

import pytest

from workflo_auth.core.enums import ErrorCategory, ErrorCode
from workflo_auth.core.errors import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    PrivacyError,
    ValidationError,
)
from workflo_auth.domain.errors import (
    OAuthError,
    OAuthErrorKind,
    OAuthResponseError,
    TokenError,
    UnsupportedOAuthProviderError,
)


@pytest.mark.unit
class TestErrorCategories:
    """Test category and status selection."""

    @pytest.mark.parametrize(
        ("error", "category", "status"),
        [
            (ValidationError.required("Email"), ErrorCategory.VALIDATION, 400),
            (BusinessRuleError.invalid_state("x"), ErrorCategory.BUSINESS_RULE, 422),
            (
                AuthenticationError(code=ErrorCode.AUTHENTICATION_FAILED, message="x"),
                ErrorCategory.AUTHENTICATION,
                401,
            ),
            (
                AuthorizationError(code=ErrorCode.ACCOUNT_DEACTIVATED, message="x"),
                ErrorCategory.AUTHORIZATION,
                403,
            ),
            (
                NotFoundError(code=ErrorCode.USER_NOT_FOUND, message="x", resource_type="User"),
                ErrorCategory.NOT_FOUND,
                404,
            ),
            (
                ConflictError(
                    code=ErrorCode.RESOURCE_CONFLICT, message="x", resource_type="User"
                ),
                ErrorCategory.CONFLICT,
                409,
            ),
            (
                PrivacyError(code=ErrorCode.PRIVACY_VIOLATION, message="x"),
                ErrorCategory.PRIVACY,
                451,
            ),
            (TokenError.expired(), ErrorCategory.AUTHENTICATION, 401),
        ],
    )
    def test_category_selects_http_status(self, error, category, status):
        assert error.category is category
        assert error.http_status == status

    def test_base_error_defaults_to_none_category(self):
        error = DomainError(code=ErrorCode.RESOURCE_NOT_FOUND, message="x")

        assert error.category is ErrorCategory.NONE
        assert error.http_status == 500

    def test_domain_error_is_not_an_exception(self):
        assert not issubclass(DomainError, Exception)


@pytest.mark.unit
class TestErrorFormatting:
    """Test string form and factory messages."""

    def test_str_includes_category_code_and_message(self):
        error = ValidationError.required("Email", field="email")

        assert str(error) == "[Validation] VALIDATION_REQUIRED: Email is required"

    def test_validation_factories(self):
        assert ValidationError.too_short("Password", 8).message == (
            "Password must be at least 8 characters long"
        )
        assert ValidationError.too_long("Email", 254).message == (
            "Email must not exceed 254 characters"
        )
        assert ValidationError.invalid_format("Email", field="email").field == "email"
        assert ValidationError.out_of_range("Rounds", 10, 20).code is (
            ErrorCode.VALIDATION_OUT_OF_RANGE
        )

    def test_errors_are_immutable(self):
        error = BusinessRuleError.already_exists("dup")

        with pytest.raises(AttributeError):
            error.message = "changed"  # type: ignore[misc]


@pytest.mark.unit
class TestTokenErrors:
    """Test TokenError factories."""

    def test_each_failure_kind_has_a_distinct_code(self):
        errors = [
            TokenError.required(),
            TokenError.malformed(),
            TokenError.signature_invalid(),
            TokenError.issuer_invalid(),
            TokenError.audience_invalid(),
            TokenError.expired(),
            TokenError.purpose_invalid(),
            TokenError.type_invalid(),
            TokenError.claims_invalid(),
            TokenError.revoked(),
            TokenError.already_used(),
        ]

        assert len({e.code for e in errors}) == len(errors)
        assert all(isinstance(e, AuthenticationError) for e in errors)

    def test_expired_message(self):
        assert TokenError.expired().message == "Token has expired"
        assert TokenError.required().message == "Token is required"


@pytest.mark.unit
class TestOAuthErrors:
    """Test OAuthError factories and kinds."""

    def test_timeout_is_authentication_category(self):
        error = OAuthError.timeout("google")

        assert error.kind is OAuthErrorKind.TIMEOUT
        assert error.code is ErrorCode.OAUTH_TIMEOUT
        assert error.provider == "google"
        assert error.is_retryable is False
        assert error.message == "Request timeout while communicating with google OAuth"

    def test_token_exchange_failed_names_only_status(self):
        error = OAuthError.token_exchange_failed("google", 400)

        assert error.kind is OAuthErrorKind.TOKEN_EXCHANGE_FAILED
        assert error.message == "Failed to exchange authorization code with google: HTTP 400"

    def test_missing_field_is_validation_category(self):
        error = OAuthResponseError.missing("microsoft", "email")

        assert isinstance(error, OAuthError)
        assert error.kind is OAuthErrorKind.INVALID_RESPONSE
        assert error.category is ErrorCategory.VALIDATION
        assert error.missing_field == "email"
        assert error.message == "Invalid response from microsoft - missing required fields"

    def test_unsupported_provider(self):
        error = UnsupportedOAuthProviderError.for_provider("github")

        assert error.kind is OAuthErrorKind.UNSUPPORTED_PROVIDER
        assert error.http_status == 400
        assert error.message == "Unsupported OAuth provider: github"
