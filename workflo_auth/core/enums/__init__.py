"""Core enums package.

Usage:
    from workflo_auth.core.enums import ErrorCategory, ErrorCode, Environment
"""

from workflo_auth.core.enums.environment import Environment
from workflo_auth.core.enums.error_category import ErrorCategory
from workflo_auth.core.enums.error_code import ErrorCode

__all__ = ["ErrorCategory", "ErrorCode", "Environment"]
