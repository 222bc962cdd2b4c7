"""Locale resolution logic for determining the user's preferred language.

Sources, in precedence order: the ``--language`` flag, the environment
(``TYPEORM_EXTENDER_LANG`` then ``LANG``), the project config file, the default.
"""

from typing import Iterable, Optional

import structlog

from typeorm_extender.infrastructure.i18n.models import Locale, LocaleResolutionContext

logger = structlog.get_logger().bind(component="i18n.resolver")

# Lower-cased aliases accepted anywhere a language can be given.
LANGUAGE_ALIASES = {
    "en": Locale.EN,
    "en_us": Locale.EN,
    "en-us": Locale.EN,
    "english": Locale.EN,
    "pt": Locale.PT_BR,
    "pt_br": Locale.PT_BR,
    "pt-br": Locale.PT_BR,
    "portuguese": Locale.PT_BR,
    "es": Locale.ES,
    "es_es": Locale.ES,
    "es-es": Locale.ES,
    "spanish": Locale.ES,
    "español": Locale.ES,
}


class LocaleResolver:
    """Normalizes language strings and picks the active locale."""

    def __init__(self, default_locale: Locale = Locale.EN):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no source supplies one.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale.value)

    @staticmethod
    def normalize(language: str) -> str:
        """Map a user supplied language to its canonical code.

        Known aliases map to a supported code. Anything else comes back
        lower-cased, so ``"pt-BR"`` stays ``"pt-BR"`` and ``"FR"`` becomes
        ``"fr"``.
        """
        folded = language.strip().lower()
        alias = LANGUAGE_ALIASES.get(folded)
        return alias.value if alias else folded

    def is_supported(self, language: Optional[str]) -> bool:
        return self.resolve_from_string(language) is not None

    def resolve_from_string(self, language: Optional[str]) -> Optional[Locale]:
        """Parse a language string.

        Args:
            language: Code or alias (e.g. "pt", "pt_BR", "Spanish").

        Returns:
            The matching Locale, or None if empty or unsupported.
        """
        if not language:
            return None
        try:
            return Locale.from_string(self.normalize(language))
        except ValueError:
            return None

    def resolve_from_environment(
        self, candidates: Iterable[Optional[str]]
    ) -> Optional[Locale]:
        """Return the first environment value that names a supported locale.

        Args:
            candidates: Environment values in precedence order.
        """
        for value in candidates:
            locale = self.resolve_from_string(value)
            if locale is not None:
                return locale
        return None

    def resolve(
        self,
        requested: Optional[str] = None,
        environment: Iterable[Optional[str]] = (),
        config: Optional[str] = None,
    ) -> Locale:
        """Resolve the active locale of an invocation.

        Args:
            requested: Value of the ``--language`` flag.
            environment: Environment values in precedence order.
            config: Language recorded in the project config file.

        Returns:
            Resolved Locale.
        """
        context = LocaleResolutionContext(
            requested_locale=self.resolve_from_string(requested),
            environment_locale=self.resolve_from_environment(environment),
            config_locale=self.resolve_from_string(config),
            default_locale=self.default_locale,
        )
        resolved = context.resolve()
        self.log.debug("resolved_locale", locale=resolved.value)
        return resolved
