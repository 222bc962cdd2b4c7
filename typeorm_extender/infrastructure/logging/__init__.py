"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_module_logger(): Get a logger for the calling module
    - mask_sensitive_data(): Processor to redact sensitive fields
"""

from typeorm_extender.infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from typeorm_extender.infrastructure.logging.formatters import (
    mask_sensitive_data,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "mask_sensitive_data",
    "SENSITIVE_PATTERNS",
]
