"""
Factory functions for application-scoped infrastructure.

Only process-independent values live here. The translation service and the
project config manager are built per invocation, see ``container``.
"""

from functools import lru_cache

from typeorm_extender.infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment should call ``get_settings.cache_clear()``
    or build ``Settings()`` directly.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
