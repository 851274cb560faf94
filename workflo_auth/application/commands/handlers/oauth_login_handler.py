"""OAuthLogin command handler.

Flow:
1. Resolve the provider by name
2. Exchange the authorization code and fetch user info
3. Hash the provider email and look up the user
4. Create the user if none exists (no password, verified per provider)
5. Reject deactivated accounts
6. Issue an access/refresh pair

Outcome is a UnionResult:
- variant 0: DomainError (unsupported provider, OAuthError, deactivated)
- variant 1: NewUserLogin
- variant 2: ExistingUserLogin
"""

from typing import ClassVar

from uuid_extensions import uuid7

from workflo_auth.application.commands.auth_commands import OAuthLogin
from workflo_auth.application.commands.handlers.token_issuance import issue_tokens
from workflo_auth.application.cqrs.response_shape import ResponseShape
from workflo_auth.application.dtos import ExistingUserLogin, NewUserLogin, UserSummary
from workflo_auth.core.constants import DEFAULT_PREFERRED_NAME
from workflo_auth.core.enums import ErrorCode
from workflo_auth.core.errors import AuthorizationError
from workflo_auth.core.result import Failure
from workflo_auth.core.union_result import UnionResult
from workflo_auth.domain.entities import User
from workflo_auth.domain.protocols import (
    EmailHashingProtocol,
    LoggerProtocol,
    OAuthAuthenticator,
    OAuthProviderLookup,
    TokenServiceProtocol,
    UserRepository,
)
from workflo_auth.domain.value_objects import OAuthUserInfo

NEW_USER = 1
EXISTING_USER = 2


class OAuthLoginHandler:
    """Sign in or sign up through an OAuth provider."""

    response_shape: ClassVar[ResponseShape] = ResponseShape.UNION

    def __init__(
        self,
        *,
        providers: OAuthProviderLookup,
        authenticator: OAuthAuthenticator,
        user_repo: UserRepository,
        email_hasher: EmailHashingProtocol,
        token_service: TokenServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize OAuth login handler.

        Args:
            providers: Configured provider lookup.
            authenticator: Runs code exchange then user-info fetch.
            user_repo: User persistence.
            email_hasher: Salted email hashing.
            token_service: Access/refresh token issuer.
            logger: Structured logger.
        """
        self._providers = providers
        self._authenticator = authenticator
        self._user_repo = user_repo
        self._email_hasher = email_hasher
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: OAuthLogin) -> UnionResult:
        lookup = self._providers.get(cmd.provider)
        if isinstance(lookup, Failure):
            self._logger.info("oauth_login_rejected", reason="unsupported_provider")
            return UnionResult.failure(lookup.error)
        provider = lookup.value

        authenticated = await self._authenticator(
            provider, cmd.authorization_code, cmd.redirect_uri
        )
        if isinstance(authenticated, Failure):
            return UnionResult.failure(authenticated.error)
        info = authenticated.value

        email_hash = self._email_hasher.hash_email(info.email)
        user = await self._user_repo.find_by_email_hash(email_hash)
        is_new = user is None
        if user is None:
            user = self._new_user(info, email_hash)
            if not await self._user_repo.add(user):
                # Created concurrently by another login or registration.
                user = await self._user_repo.find_by_email_hash(email_hash)
                is_new = False
        if not is_new and info.email_verified:
            user.mark_email_verified()

        if not user.is_active:
            self._logger.info("oauth_login_rejected", reason="account_deactivated", user_id=str(user.id))
            return UnionResult.failure(
                AuthorizationError(
                    code=ErrorCode.ACCOUNT_DEACTIVATED,
                    message="User account is deactivated",
                )
            )

        user.record_login()
        await self._user_repo.save(user)

        tokens = await issue_tokens(self._token_service, user, remember_me=cmd.remember_me)
        summary = UserSummary.from_user(user)
        self._logger.info(
            "oauth_login_succeeded",
            provider=provider.name,
            user_id=str(user.id),
            new_user=is_new,
        )

        if is_new:
            return UnionResult.of(
                NEW_USER, NewUserLogin(tokens=tokens, user=summary, provider=provider.name)
            )
        return UnionResult.of(
            EXISTING_USER,
            ExistingUserLogin(tokens=tokens, user=summary, provider=provider.name),
        )

    @staticmethod
    def _new_user(info: OAuthUserInfo, email_hash: str) -> User:
        return User(
            id=uuid7(),
            email_hash=email_hash,
            password_hash=None,
            preferred_name=info.name or DEFAULT_PREFERRED_NAME,
            email_verified=info.email_verified,
            oauth_provider=info.provider,
            oauth_provider_id=info.provider_id,
        )
