"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import Optional

from typeorm_extender.infrastructure.i18n.loader import YAMLTranslationLoader
from typeorm_extender.infrastructure.i18n.models import Locale
from typeorm_extender.infrastructure.i18n.translator import Translator


def default_translations_dir() -> Path:
    """Return the ``locales`` directory shipped inside the package."""
    # this file is at .../typeorm_extender/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Locale = Locale.EN,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Path to YAML translation files (default: the
            package's own ``locales`` directory)
        fallback_locale: Locale to use when translations not found
        use_cache: Whether loader should cache parsed YAML
        preload: Whether to load all locales immediately

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist
    """
    loader = YAMLTranslationLoader(
        translations_dir=translations_dir or default_translations_dir(),
        use_cache=use_cache,
    )
    translator = Translator(loader=loader, fallback_locale=fallback_locale)

    if preload:
        translator.load_all()

    return translator
