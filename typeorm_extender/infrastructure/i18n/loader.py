"""Reading the message catalogs shipped in ``typeorm_extender/locales``.

A catalog is one or more ``<name>.<locale>.yml`` files, for example
``messages.pt-BR.yml``.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

import structlog
import yaml

from typeorm_extender.infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Source of message catalogs for the translator."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Catalog of one locale.

        Raises:
            FileNotFoundError: If the locale has no catalog file.
            ValueError: If a catalog file is not valid YAML.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Catalogs of every locale the source provides."""


class YAMLTranslationLoader(TranslationLoader):
    """Catalogs read from ``*.<locale>.yml`` files of one directory.

    Files of the same locale are deep-merged in name order, so a later file
    overrides single messages of an earlier one.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

    def _files(self, locale: Locale) -> List[Path]:
        return sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))

    def load(self, locale: Locale) -> TranslationCatalog:
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        files = self._files(locale)
        if not files:
            raise FileNotFoundError(
                f"No {locale.value} catalog in {self.translations_dir}"
            )

        catalog = TranslationCatalog(
            locale=locale, loaded_at=datetime.now(timezone.utc).isoformat()
        )
        for path in files:
            try:
                data = yaml.safe_load(path.read_text(encoding="utf-8"))
            except yaml.YAMLError as e:
                logger.error("catalog_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e

            if not data:
                continue
            if not isinstance(data, dict):
                logger.warning("catalog_not_a_mapping", file=str(path))
                continue
            catalog.merge(TranslationCatalog(locale=locale, messages=data))

        logger.debug(
            "catalog_loaded",
            locale=locale.value,
            files=[path.name for path in files],
        )
        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load every supported locale with a file in the directory.

        Files named after an unsupported locale are ignored.

        Raises:
            ValueError: If no supported locale has a file.
        """
        locales = set()
        for path in self.translations_dir.glob("*.yml"):
            suffix = path.stem.rpartition(".")[2]
            if suffix == path.stem:
                continue
            try:
                locales.add(Locale.from_string(suffix))
            except ValueError:
                continue

        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return {locale: self.load(locale) for locale in sorted(locales)}

    def clear_cache(self) -> None:
        self.cache.clear()
