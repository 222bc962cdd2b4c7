"""
Service construction.

Provides the cached settings provider and the per-invocation CLI container.
"""

from typeorm_extender.infrastructure.services.container import (
    CliServices,
    build_services,
)
from typeorm_extender.infrastructure.services.providers import get_settings

__all__ = [
    "CliServices",
    "build_services",
    "get_settings",
]
