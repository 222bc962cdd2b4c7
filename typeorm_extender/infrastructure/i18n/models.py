"""Translation models for i18n system.

Defines core data structures for managing translations and locales.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple


class Locale(str, Enum):
    """Supported locale identifiers.

    The set is closed: catalogs for other languages are ignored by the loader.
    """

    EN = "en"
    PT_BR = "pt-BR"
    ES = "es"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale code (e.g., "en", "pt-BR").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def language(self) -> str:
        """Get language part of locale (e.g., "pt" from "pt-BR")."""
        return self.value.split("-")[0]

    @property
    def display_name(self) -> str:
        """Human readable name of the locale, in its own language."""
        return LOCALE_DISPLAY_NAMES[self]


LOCALE_DISPLAY_NAMES = {
    Locale.EN: "English",
    Locale.PT_BR: "Português (Brasil)",
    Locale.ES: "Español",
}


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical paths of any depth
    (e.g., "commands.init.messages.success").
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        parts: Path segments, outermost first.
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.parts)

    @property
    def namespace(self) -> str:
        """Top-level namespace (e.g., "commands", "errors")."""
        return self.parts[0] if self.parts else ""

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "errors.connectionFailed").

        Returns:
            TranslationKey instance.
        """
        return cls(parts=tuple(key_string.split(".")))


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict tree {segment: {segment: ... message_string}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def resolve(self, key: TranslationKey) -> Any:
        """Walk the message tree along the key path.

        Args:
            key: TranslationKey to look up.

        Returns:
            The node found at the path (a string leaf or an interior dict),
            or None if any segment is missing.
        """
        node: Any = self.messages
        for part in key.parts:
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Args:
            key: TranslationKey with the full path to a leaf.

        Returns:
            Translated message string, or None if not found or not a leaf.
        """
        node = self.resolve(key)
        return node if isinstance(node, str) else None

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a string leaf exists for given key."""
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get the whole subtree for a top-level namespace."""
        return self.messages.get(namespace, {})

    def keys(self) -> Set[str]:
        """Return the dotted paths of every string leaf in the catalog."""
        found: Set[str] = set()
        stack: List[Tuple[Tuple[str, ...], Any]] = [((), self.messages)]
        while stack:
            path, node = stack.pop()
            if isinstance(node, dict):
                for name, child in node.items():
                    stack.append((path + (str(name),), child))
            elif isinstance(node, str):
                found.add(".".join(path))
        return found

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones; subtrees are merged recursively.

        Args:
            other: TranslationCatalog to merge.
        """
        _deep_merge(self.messages, other.messages)


def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for name, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(name), dict):
            _deep_merge(target[name], value)
        elif isinstance(value, dict):
            target[name] = {}
            _deep_merge(target[name], value)
        else:
            target[name] = value


@dataclass
class LocaleResolutionContext:
    """Context for resolving the active locale of a CLI invocation.

    Attributes:
        requested_locale: Locale passed explicitly on the command line.
        environment_locale: Locale found in the environment.
        config_locale: Locale recorded in the project config file.
        default_locale: Fallback locale.
        supported_locales: List of locales supported by the system.
    """

    requested_locale: Optional[Locale] = None
    environment_locale: Optional[Locale] = None
    config_locale: Optional[Locale] = None
    default_locale: Locale = Locale.EN
    supported_locales: List[Locale] = field(default_factory=lambda: list(Locale))

    def resolve(self) -> Locale:
        """Resolve the best matching locale from available options.

        Resolution order:
        1. Requested locale (if supported)
        2. Environment locale (if supported)
        3. Config file locale (if supported)
        4. Default locale

        Returns:
            Resolved Locale.
        """
        for candidate in (
            self.requested_locale,
            self.environment_locale,
            self.config_locale,
        ):
            if candidate and candidate in self.supported_locales:
                return candidate
        return self.default_locale
