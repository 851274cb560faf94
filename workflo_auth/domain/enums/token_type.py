"""JWT token types carried in the ``typ`` claim."""

from enum import Enum


class TokenType(str, Enum):
    """Kind of credential a signed token represents."""

    ACCESS = "access"
    REFRESH = "refresh"
