"""Email adapters."""

from workflo_auth.infrastructure.email.stub_email_service import StubEmailService

__all__ = ["StubEmailService"]
