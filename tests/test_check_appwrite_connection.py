"""
Tests for scripts/check_appwrite_connection.py
"""

from unittest.mock import AsyncMock, patch

from scripts.check_appwrite_connection import check_connection, main, print_config
from shared.config import Settings
from shared.errors import AppwriteAPIError


async def test_check_connection_returns_total(settings, fake_appwrite):
    for i in range(3):
        await fake_appwrite.create_document("db", "categories", {"name": f"c{i}"})

    assert await check_connection(fake_appwrite, settings) == 3


async def test_missing_config_exit_code(capsys):
    with patch(
        "scripts.check_appwrite_connection.get_settings",
        return_value=Settings(_env_file=None),
    ):
        assert await main([]) == 1

    assert "APPWRITE_PROJECT_ID" in capsys.readouterr().out


async def test_connection_error_exit_code(settings):
    with patch(
        "scripts.check_appwrite_connection.get_settings", return_value=settings
    ), patch(
        "scripts.check_appwrite_connection.check_connection",
        AsyncMock(side_effect=AppwriteAPIError(401, "Invalid API key", "user_unauthorized")),
    ):
        assert await main([]) == 2


async def test_success_exit_code(settings, capsys):
    with patch(
        "scripts.check_appwrite_connection.get_settings", return_value=settings
    ), patch(
        "scripts.check_appwrite_connection.check_connection", AsyncMock(return_value=6)
    ):
        assert await main(["--show-config"]) == 0

    out = capsys.readouterr().out
    assert "Categories collection accessible: 6" in out
    assert "test-api-key" not in out


def test_print_config_masks_key(settings, capsys):
    print_config(settings)

    out = capsys.readouterr().out
    assert "***6789" in out
    assert "test-project" in out
