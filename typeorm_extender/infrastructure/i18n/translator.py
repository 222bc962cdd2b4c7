"""Message lookup with fallback and ``{{variable}}`` interpolation."""

import re
from typing import Any, Dict, List, Optional, Set

from typeorm_extender.infrastructure.i18n.loader import TranslationLoader
from typeorm_extender.infrastructure.i18n.models import (
    Locale,
    TranslationCatalog,
    TranslationKey,
)
from typeorm_extender.infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


class Translator:
    """Translate keys for any loaded locale.

    A lookup that misses in the requested locale is retried in the fallback
    locale. A key missing from both is returned verbatim, so a translation
    gap never interrupts a command.

    Attributes:
        loader: TranslationLoader for loading translation files.
        catalogs: Loaded TranslationCatalogs by locale.
        fallback_locale: Locale used when a key is not found.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: Locale = Locale.EN,
    ):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}

    def load_all(self) -> None:
        """Load all available locales and report keys missing from any of them."""
        self.catalogs = self.loader.load_all()
        for locale, missing in self.check_completeness().items():
            logger.warning(
                "missing_translation_keys",
                locale=locale.value,
                count=len(missing),
                keys=sorted(missing),
            )

    def load_locale(self, locale: Locale) -> None:
        """Load a single locale.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self.catalogs[locale] = self.loader.load(locale)

    def check_completeness(self) -> Dict[Locale, Set[str]]:
        """Compare every loaded locale against the fallback locale.

        Returns:
            Locales that lack keys, mapped to the missing dotted keys.
        """
        reference = self.catalogs.get(self.fallback_locale)
        if reference is None:
            return {}

        expected = reference.keys()
        gaps = {}
        for locale, catalog in self.catalogs.items():
            if locale == self.fallback_locale:
                continue
            missing = expected - catalog.keys()
            if missing:
                gaps[locale] = missing
        return gaps

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            key: TranslationKey identifying the message.
            locale: Locale to translate to.
            variables: Optional values for ``{{name}}`` placeholders.

        Returns:
            The interpolated message, or the dotted key itself when neither
            the locale nor the fallback holds a string at that path.
        """
        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if message is None and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None
            if message is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale.value,
                )

        if message is None:
            logger.debug("translation_not_found", key=str(key), locale=locale.value)
            return str(key)

        if variables:
            message = self._interpolate(message, variables)

        return message

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> List[Locale]:
        return list(self.catalogs.keys())

    def get_catalog(self, locale: Locale) -> Optional[TranslationCatalog]:
        return self.catalogs.get(locale)

    @staticmethod
    def _interpolate(message: str, variables: Dict[str, Any]) -> str:
        """Replace ``{{name}}`` with ``str(variables[name])``.

        Placeholders without a matching variable are left as they are.
        """

        def replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name in variables:
                return str(variables[name])
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(replace, message)
