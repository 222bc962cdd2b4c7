"""Unit tests for typeorm_extender.infrastructure.logging.formatters module."""

from typeorm_extender.infrastructure.logging import (
    SENSITIVE_PATTERNS,
    mask_sensitive_data,
)


class TestMaskSensitiveData:
    def test_masks_password(self):
        processor = mask_sensitive_data()
        result = processor(None, "info", {"event": "x", "password": "secret"})
        assert result["password"] == "***REDACTED***"
        assert result["event"] == "x"

    def test_matches_by_substring_ignoring_case(self):
        processor = mask_sensitive_data()
        result = processor(
            None,
            "info",
            {"DB_PASSWORD": "p", "database_url": "postgresql://u:p@h/db", "path": "a"},
        )
        assert result["DB_PASSWORD"] == "***REDACTED***"
        assert result["database_url"] == "***REDACTED***"
        assert result["path"] == "a"

    def test_none_is_not_masked(self):
        processor = mask_sensitive_data()
        assert processor(None, "info", {"token": None})["token"] is None

    def test_custom_mask_and_patterns(self):
        processor = mask_sensitive_data(
            mask_value="[hidden]", additional_patterns=frozenset({"host"})
        )
        result = processor(None, "info", {"host": "db", "secret": "s"})
        assert result == {"host": "[hidden]", "secret": "[hidden]"}

    def test_does_not_mutate_input(self):
        event_dict = {"password": "p"}
        mask_sensitive_data()(None, "info", event_dict)
        assert event_dict == {"password": "p"}


def test_sensitive_patterns_cover_credentials():
    assert {"password", "secret", "token", "url"} <= SENSITIVE_PATTERNS
