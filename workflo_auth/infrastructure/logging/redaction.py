"""structlog processor that masks sensitive values.

Callers are expected never to pass secrets as log context. This processor
is the backstop: any event-dict key that names a secret has its value
replaced before rendering.
"""

from typing import Any

REDACTED = "[REDACTED]"

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "confirm_password",
        "password_hash",
        "token",
        "access_token",
        "refresh_token",
        "id_token",
        "code",
        "authorization_code",
        "secret",
        "client_secret",
        "jwt_secret_key",
        "email_hash_salt",
        "email",
        "authorization",
    }
)


def redact_sensitive_values(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace values of sensitive keys with a fixed marker.

    Nested dicts are scanned one level deep (e.g. ``details={...}``).
    """
    for key, value in event_dict.items():
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = {
                k: REDACTED if str(k).lower() in SENSITIVE_KEYS else v
                for k, v in value.items()
            }
    return event_dict
