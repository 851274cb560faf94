"""Domain enums."""

from workflo_auth.domain.enums.token_type import TokenType

__all__ = ["TokenType"]
