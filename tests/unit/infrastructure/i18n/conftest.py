"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from typeorm_extender.infrastructure.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a directory with small catalogs.

    - messages.en.yml
    - messages.es.yml (missing ``greeting.farewell``)
    - overrides.en.yml (overrides one leaf of messages.en.yml)
    - notes.fr.yml (unsupported locale, ignored)
    """
    catalogs = {
        "messages.en.yml": {
            "greeting": {
                "hello": "Hello {{name}}",
                "farewell": "Goodbye",
                "count": "{{count}} item(s)",
            }
        },
        "messages.es.yml": {
            "greeting": {
                "hello": "Hola {{name}}",
                "count": "{{count}} elemento(s)",
            }
        },
        "overrides.en.yml": {"greeting": {"farewell": "Bye"}},
        "notes.fr.yml": {"greeting": {"hello": "Bonjour {{name}}"}},
    }
    for file_name, data in catalogs.items():
        with open(tmp_path / file_name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)
