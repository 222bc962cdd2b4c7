"""Name conversions shared by the generators."""

import re
from datetime import datetime, timezone
from typing import Optional

from typeorm_extender.core.errors import ScaffoldError

NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def validate_name(name: str) -> str:
    """Return the stripped name, or raise if it cannot become an identifier.

    Raises:
        ScaffoldError: If the name is empty or has characters other than
            letters, digits, ``_`` and ``-``, or does not start with a letter.
    """
    stripped = name.strip()
    if not NAME_PATTERN.match(stripped):
        raise ScaffoldError(
            f"Invalid name: {name!r}",
            {"name": name},
            message_key="errors.invalidName",
        )
    return stripped


def to_pascal_case(name: str) -> str:
    """``create_users`` -> ``CreateUsers``; ``userSeed`` -> ``UserSeed``."""
    parts = re.split(r"[\s_-]+", name.strip())
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


def to_snake_case(name: str) -> str:
    """``CreateUsersTable`` -> ``create_users_table``; ``HTTPLog`` -> ``http_log``."""
    value = re.sub(r"[\s-]+", "_", name.strip())
    value = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", value)
    value = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", value)
    value = re.sub(r"_+", "_", value)
    return value.strip("_").lower()


def split_suffix(name: str, suffix: str) -> str:
    """Return the PascalCase base of ``name`` without a trailing ``suffix``.

    ``UserFactory`` and ``user`` both give ``User`` for suffix ``Factory``.
    A name that is only the suffix is kept as is.
    """
    pascal = to_pascal_case(name)
    if pascal.endswith(suffix) and len(pascal) > len(suffix):
        return pascal[: -len(suffix)]
    return pascal


def migration_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp used as migration file prefix, ``YYYYMMDDHHMMSS``."""
    moment = now or datetime.now(timezone.utc)
    return moment.strftime("%Y%m%d%H%M%S")
