"""i18n system - message catalogs, locale resolution and interpolation.

Main components:
- models: TranslationKey, Locale, TranslationCatalog, LocaleResolutionContext
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator with fallback and ``{{variable}}`` interpolation
- resolvers: LocaleResolver for normalizing and picking the active locale
- service: TranslationService, the per-invocation facade
"""

from typeorm_extender.infrastructure.i18n.factory import create_translator
from typeorm_extender.infrastructure.i18n.loader import (
    TranslationLoader,
    YAMLTranslationLoader,
)
from typeorm_extender.infrastructure.i18n.models import (
    Locale,
    LocaleResolutionContext,
    TranslationCatalog,
    TranslationKey,
)
from typeorm_extender.infrastructure.i18n.resolvers import LocaleResolver
from typeorm_extender.infrastructure.i18n.service import TranslationService
from typeorm_extender.infrastructure.i18n.translator import Translator

__all__ = [
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "LocaleResolutionContext",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LocaleResolver",
    "TranslationService",
    "create_translator",
]
