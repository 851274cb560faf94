"""Domain entities."""

from workflo_auth.domain.entities.user import User

__all__ = ["User"]
