"""Translation service holding the active locale of one CLI invocation."""

from typing import Any, Dict, List, Optional, Union

from typeorm_extender.infrastructure.i18n.factory import create_translator
from typeorm_extender.infrastructure.i18n.models import Locale, TranslationKey
from typeorm_extender.infrastructure.i18n.resolvers import LocaleResolver
from typeorm_extender.infrastructure.i18n.translator import Translator
from typeorm_extender.infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationService:
    """Facade over the Translator with a mutable active locale.

    Usage:
        service = TranslationService(locale=Locale.PT_BR)
        service.translate("commands.init.messages.success")
        service.translate("commands.migration.create.messages.success",
                          {"path": "src/migrations/x.py"})
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        locale: Locale = Locale.EN,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                If not provided, creates default via factory.
            locale: Initial active locale.
            resolver: Resolver used to normalize language strings.
        """
        self._translator = translator or create_translator()
        self._resolver = resolver or LocaleResolver()
        self._locale = locale

    def translate(
        self,
        key: Union[str, TranslationKey],
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Translate a key in the active locale.

        Args:
            key: Dotted key or TranslationKey.
            variables: Optional values for ``{{name}}`` placeholders.

        Returns:
            The message, or the key itself when it is unknown.
        """
        if isinstance(key, str):
            key = TranslationKey.from_string(key)
        return self._translator.translate_message(key, self._locale, variables)

    def has_message(self, key: Union[str, TranslationKey]) -> bool:
        if isinstance(key, str):
            key = TranslationKey.from_string(key)
        return self._translator.has_message(key, self._locale)

    def set_language(self, language: Union[str, Locale]) -> bool:
        """Switch the active locale.

        Unsupported values are ignored.

        Returns:
            True if the active locale was changed to the given language.
        """
        if isinstance(language, Locale):
            locale: Optional[Locale] = language
        else:
            locale = self._resolver.resolve_from_string(language)
        if locale is None:
            logger.debug("ignored_unsupported_language", language=str(language))
            return False
        self._locale = locale
        return True

    def get_language(self) -> str:
        return self._locale.value

    @property
    def locale(self) -> Locale:
        return self._locale

    def get_supported_languages(self) -> List[str]:
        return [locale.value for locale in Locale]

    def normalize(self, language: str) -> str:
        return self._resolver.normalize(language)

    def is_supported(self, language: Optional[str]) -> bool:
        return self._resolver.is_supported(language)

    def language_name(self, language: Union[str, Locale, None] = None) -> str:
        """Display name of a locale, in its own language.

        Args:
            language: Locale or code; the active locale when omitted.

        Returns:
            The display name, or the given value when it is unsupported.
        """
        if language is None:
            return self._locale.display_name
        if isinstance(language, Locale):
            return language.display_name
        locale = self._resolver.resolve_from_string(language)
        return locale.display_name if locale else language

    @property
    def translator(self) -> Translator:
        return self._translator
