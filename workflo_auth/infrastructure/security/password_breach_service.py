"""Password breach screening adapters.

Implements PasswordBreachProtocol two ways:

- ``LocalPasswordBreachService``: case-insensitive lookup in a bundled list
  of the most common breached passwords. No I/O.
- ``PwnedPasswordsBreachService``: Have I Been Pwned range API using
  k-anonymity. Only the first five hex characters of the SHA-1 digest leave
  the process; the suffix is matched locally. Falls back to the local list
  when the API is unreachable.

Neither adapter logs the password or any part of its digest.
"""

import hashlib

import httpx
import structlog

from workflo_auth.core.constants import BREACH_API_TIMEOUT_DEFAULT

logger = structlog.get_logger(__name__)

COMMON_BREACHED_PASSWORDS: frozenset[str] = frozenset(
    {
        "password",
        "123456",
        "12345678",
        "password123",
        "admin",
        "letmein",
        "welcome",
        "monkey",
        "dragon",
        "baseball",
        "iloveyou",
        "trustno1",
        "1234567",
        "sunshine",
        "master",
        "123456789",
        "welcome123",
        "password1",
        "qwerty",
        "abc123",
        "111111",
        "1234567890",
        "123123",
        "password123!",
        "admin123",
        "root",
        "toor",
        "test",
        "guest",
        "12345",
        "123",
        "password1234",
        "123qwe",
        "qwerty123",
        "1q2w3e",
        "1q2w3e4r",
        "1q2w3e4r5t",
    }
)

_SHA1_PREFIX_LENGTH = 5


class LocalPasswordBreachService:
    """Breach check against the bundled common-password list."""

    def __init__(self, breached: frozenset[str] = COMMON_BREACHED_PASSWORDS) -> None:
        self._breached = frozenset(p.lower() for p in breached)

    async def is_password_breached(self, password: str) -> bool:
        if not password:
            return False
        return password.lower() in self._breached


class PwnedPasswordsBreachService:
    """Breach check via the Pwned Passwords range API.

    Args:
        api_url: Range endpoint (``https://api.pwnedpasswords.com/range``).
        timeout: HTTP timeout in seconds.
        fallback: Service used when the API fails.
    """

    def __init__(
        self,
        *,
        api_url: str,
        timeout: float = BREACH_API_TIMEOUT_DEFAULT,
        fallback: LocalPasswordBreachService | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._fallback = fallback or LocalPasswordBreachService()

    async def is_password_breached(self, password: str) -> bool:
        """Check the password against the range API.

        Returns:
            True if the password appears in the breach corpus, or (on API
            failure) in the local list.
        """
        if not password:
            return False

        digest = hashlib.sha1(password.encode("utf-8"), usedforsecurity=False)
        hex_digest = digest.hexdigest().upper()
        prefix = hex_digest[:_SHA1_PREFIX_LENGTH]
        suffix = hex_digest[_SHA1_PREFIX_LENGTH:]

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    f"{self._api_url}/{prefix}",
                    headers={"Add-Padding": "true"},
                )
        except httpx.HTTPError as e:
            logger.warning(
                "pwned_passwords_unavailable",
                error_type=type(e).__name__,
            )
            return await self._fallback.is_password_breached(password)

        if response.status_code != 200:
            logger.warning(
                "pwned_passwords_unexpected_status",
                status_code=response.status_code,
            )
            return await self._fallback.is_password_breached(password)

        return _suffix_in_range(suffix, response.text)


def _suffix_in_range(suffix: str, body: str) -> bool:
    # Lines are "SUFFIX:COUNT"; padding entries carry a count of 0.
    for line in body.splitlines():
        candidate, _, count = line.strip().partition(":")
        if candidate.upper() == suffix and count.strip() not in ("", "0"):
            return True
    return False
