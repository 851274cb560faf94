"""Domain value objects."""

from workflo_auth.domain.value_objects.oauth_user_info import OAuthUserInfo
from workflo_auth.domain.value_objects.token_claims import TokenClaims

__all__ = ["OAuthUserInfo", "TokenClaims"]
