"""Custom structlog processors.

Usage:
    from typeorm_extender.infrastructure.logging.formatters import mask_sensitive_data
"""

from typing import Any, Dict, FrozenSet, Optional


# Keys whose values must never reach the log output. Matching is by substring,
# so "db_password" and "PASSWORD" are both covered.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "credential",
        "dsn",
        "url",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: Optional[FrozenSet[str]] = None,
):
    """Create a processor that masks sensitive data in log entries.

    Database connection URLs carry the password inline, so ``url`` and ``dsn``
    keys are masked as a whole.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        masked_dict = {}
        for key, value in event_dict.items():
            key_lower = key.lower()
            is_sensitive = any(pattern in key_lower for pattern in patterns)
            if is_sensitive and value is not None:
                masked_dict[key] = mask_value
            else:
                masked_dict[key] = value
        return masked_dict

    return processor
