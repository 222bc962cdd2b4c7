"""Tests for typeorm_extender.infrastructure.i18n.service module."""

import pytest

from typeorm_extender.infrastructure.i18n import (
    Locale,
    TranslationKey,
    TranslationService,
)


class TestTranslationService:
    @pytest.fixture
    def service(self, translator):
        return TranslationService(translator=translator)

    def test_defaults_to_english(self, service):
        assert service.get_language() == "en"
        assert service.locale == Locale.EN

    def test_translate(self, service):
        assert service.translate("commands.init.messages.success") == (
            "✅ Project initialized successfully!"
        )

    def test_translate_accepts_translation_key(self, service):
        key = TranslationKey.from_string("errors.unexpected")
        assert service.translate(key) == "❌ Unexpected error"

    def test_translate_with_variables(self, service):
        message = service.translate(
            "commands.migration.create.messages.file",
            {"path": "src/migrations/x.py"},
        )
        assert message == "📄 File: src/migrations/x.py"

    def test_translate_unknown_key(self, service):
        key = "commands.nope.messages.x"
        assert service.translate(key) == key

    def test_set_language(self, service):
        assert service.set_language("pt") is True
        assert service.get_language() == "pt-BR"
        assert service.translate("commands.init.messages.success") == (
            "✅ Projeto inicializado com sucesso!"
        )

    def test_set_language_with_locale(self, service):
        assert service.set_language(Locale.ES) is True
        assert service.translate("commands.init.messages.success") == (
            "✅ ¡Proyecto inicializado con éxito!"
        )

    def test_set_language_unsupported_is_ignored(self, service):
        service.set_language("es")
        assert service.set_language("fr") is False
        assert service.get_language() == "es"

    def test_has_message(self, service):
        assert service.has_message("errors.details")
        assert not service.has_message("errors")

    def test_supported_languages(self, service):
        assert service.get_supported_languages() == ["en", "pt-BR", "es"]

    def test_normalize_and_is_supported(self, service):
        assert service.normalize("pt_br") == "pt-BR"
        assert service.is_supported("Spanish")
        assert not service.is_supported("de")

    def test_language_name(self, service):
        assert service.language_name() == "English"
        assert service.language_name("pt") == "Português (Brasil)"
        assert service.language_name(Locale.ES) == "Español"
        assert service.language_name("xx") == "xx"

    def test_translator_property(self, service, translator):
        assert service.translator is translator
