"""Infrastructure for the typeorm-extender CLI.

- configuration: environment settings and the project config file
- logging: structlog setup
- i18n: message catalogs and locale resolution
- services: settings provider and the per-invocation service container
"""
