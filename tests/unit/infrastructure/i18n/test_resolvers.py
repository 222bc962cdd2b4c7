"""Tests for typeorm_extender.infrastructure.i18n.resolvers module."""

import pytest

from typeorm_extender.infrastructure.i18n import Locale, LocaleResolver


class TestNormalize:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("en", "en"),
            ("EN", "en"),
            ("pt", "pt-BR"),
            ("pt_BR", "pt-BR"),
            ("PT-br", "pt-BR"),
            ("Spanish", "es"),
            (" es ", "es"),
            ("FR", "fr"),
        ],
    )
    def test_normalize(self, value, expected):
        assert LocaleResolver.normalize(value) == expected


class TestLocaleResolver:
    def test_initialization(self):
        resolver = LocaleResolver(default_locale=Locale.ES)
        assert resolver.default_locale == Locale.ES

    def test_is_supported(self):
        resolver = LocaleResolver()
        assert resolver.is_supported("pt")
        assert resolver.is_supported("pt-BR")
        assert not resolver.is_supported("fr")
        assert not resolver.is_supported("")
        assert not resolver.is_supported(None)

    def test_resolve_from_string(self):
        resolver = LocaleResolver()
        assert resolver.resolve_from_string("pt_br") == Locale.PT_BR
        assert resolver.resolve_from_string("de") is None

    def test_encoding_suffix_is_not_stripped(self):
        assert LocaleResolver().resolve_from_string("en_US.UTF-8") is None

    def test_resolve_from_environment_first_supported_wins(self):
        resolver = LocaleResolver()
        assert resolver.resolve_from_environment([None, "es"]) == Locale.ES
        assert resolver.resolve_from_environment(["fr", "pt"]) == Locale.PT_BR
        assert resolver.resolve_from_environment(["fr", None]) is None

    def test_flag_beats_everything(self):
        resolver = LocaleResolver()
        locale = resolver.resolve(requested="es", environment=["pt-BR"], config="en")
        assert locale == Locale.ES

    def test_environment_beats_config(self):
        resolver = LocaleResolver()
        assert resolver.resolve(environment=["pt"], config="es") == Locale.PT_BR

    def test_unsupported_flag_falls_through(self):
        resolver = LocaleResolver()
        assert resolver.resolve(requested="fr", config="es") == Locale.ES

    def test_default(self):
        assert LocaleResolver().resolve() == Locale.EN
        assert LocaleResolver(default_locale=Locale.ES).resolve() == Locale.ES
