"""Stub email service (development and tests).

Implements EmailServiceProtocol by logging instead of sending. The log line
carries only the recipient's domain; the local part and the verification
token stay out of the logs.
"""

from workflo_auth.domain.protocols import LoggerProtocol


class StubEmailService:
    """Email adapter that records sends instead of delivering them.

    Attributes:
        sent_count: Number of messages "sent" since construction.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent_count = 0

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> None:
        self.sent_count += 1
        self._logger.info(
            "verification_email_stubbed",
            recipient_domain=to_email.rpartition("@")[2] or "unknown",
        )
