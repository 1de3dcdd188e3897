"""
Tests for shared/config.py, shared/errors.py and shared/logging_config.py
"""

import json
import logging
import re

from shared.config import REQUIRED_APPWRITE_SETTINGS, Settings
from shared.errors import (
    AppwriteAPIError,
    ConfigurationError,
    ErrorCategory,
    ErrorLogger,
    categorize_exception,
    map_status_to_category,
)
from shared.logging_config import JSONFormatter, mask_secret, truncate_message


# =============================================================================
# Settings
# =============================================================================


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.APPWRITE_ENDPOINT == "https://cloud.appwrite.io/v1"
        assert settings.SEED_ITEM_DELAY_SECONDS == 1.0
        assert settings.APPWRITE_PAGE_SIZE == 100

    def test_missing_settings_listed(self):
        settings = Settings(_env_file=None, APPWRITE_PROJECT_ID="p", APPWRITE_BUCKET_ID="b")

        missing = settings.missing_appwrite_settings()

        assert "APPWRITE_PROJECT_ID" not in missing
        assert "APPWRITE_BUCKET_ID" not in missing
        assert len(missing) == len(REQUIRED_APPWRITE_SETTINGS) - 2

    def test_complete_settings(self, settings):
        assert settings.missing_appwrite_settings() == []

    def test_collection_ids_in_reset_order(self, settings):
        assert list(settings.collection_ids) == [
            "categories",
            "customizations",
            "menu",
            "menu_customizations",
        ]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("APPWRITE_PROJECT_ID", "from-env")
        monkeypatch.setenv("SEED_ITEM_DELAY_SECONDS", "0.25")

        settings = Settings(_env_file=None)

        assert settings.APPWRITE_PROJECT_ID == "from-env"
        assert settings.SEED_ITEM_DELAY_SECONDS == 0.25


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    """Tests for error categories and the error logger."""

    def test_status_mapping(self):
        assert map_status_to_category(400) == ErrorCategory.VALIDATION_ERROR
        assert map_status_to_category(401) == ErrorCategory.PERMISSION_ERROR
        assert map_status_to_category(404) == ErrorCategory.NOT_FOUND_ERROR
        assert map_status_to_category(429) == ErrorCategory.EXTERNAL_API_ERROR
        assert map_status_to_category(418) == ErrorCategory.UNEXPECTED_ERROR

    def test_categorize_exception(self):
        assert categorize_exception(AppwriteAPIError(409, "exists", "document_already_exists")) == (
            ErrorCategory.VALIDATION_ERROR
        )
        assert categorize_exception(ConfigurationError(["APPWRITE_API_KEY"])) == (
            ErrorCategory.CONFIGURATION_ERROR
        )
        assert categorize_exception(RuntimeError("boom")) == ErrorCategory.UNEXPECTED_ERROR

    def test_appwrite_error_message(self):
        error = AppwriteAPIError(404, "Collection not found", "collection_not_found")

        assert str(error) == "Appwrite 404 (collection_not_found): Collection not found"

    def test_log_error_returns_ref(self, caplog):
        error_logger = ErrorLogger()

        with caplog.at_level(logging.WARNING):
            log_ref = error_logger.log_error(
                AppwriteAPIError(503, "unavailable"),
                ErrorCategory.EXTERNAL_API_ERROR,
                operation="seed",
                exc_info=False,
            )

        assert re.fullmatch(r"err_\d{8}_\d{6}_[0-9a-f]{8}", log_ref)
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.log_ref == log_ref
        assert record.operation == "seed"

    def test_request_errors_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            ErrorLogger().log_error(
                AppwriteAPIError(400, "bad"),
                ErrorCategory.VALIDATION_ERROR,
                exc_info=False,
            )

        assert caplog.records[-1].levelno == logging.WARNING


# =============================================================================
# Logging helpers
# =============================================================================


class TestLoggingHelpers:
    """Tests for logging helpers and the JSON formatter."""

    def test_mask_secret(self):
        assert mask_secret("") == "(unset)"
        assert mask_secret("short") == "***"
        assert mask_secret("standard_abcdef123456") == "***3456"

    def test_truncate_message(self):
        assert truncate_message("ok") == "ok"
        truncated = truncate_message("x" * 300, max_length=10)
        assert truncated.startswith("xxxxxxxxxx...")
        assert "total: 300 chars" in truncated

    def test_json_formatter_includes_extras(self):
        record = logging.LogRecord(
            "shared.appwrite_client", logging.INFO, __file__, 1, "Stored file %s", ("f1",), None
        )
        record.bucket_id = "images"
        record.file_id = "f1"

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "Stored file f1"
        assert payload["level"] == "INFO"
        assert payload["bucket_id"] == "images"
        assert payload["file_id"] == "f1"
        assert "collection_id" not in payload
