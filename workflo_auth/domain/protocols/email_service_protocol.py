"""EmailServiceProtocol - Domain protocol for email operations.

Infrastructure provides concrete implementations (StubEmailService for
development and tests).
"""

from typing import Protocol


class EmailServiceProtocol(Protocol):
    """Protocol for sending transactional email."""

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> None:
        """Send email verification email.

        Args:
            to_email: Recipient email address.
            verification_url: Full URL with verification token.
        """
        ...
