# tests/unit/test_server_main.py
import logging

import pytest

from stock_service.core.config import Settings
from stock_service.core.exceptions import StartupError
from stock_service import server


@pytest.fixture
def staging_settings(mocker, database_url):
    settings = Settings(
        DATABASE_URL=database_url,
        SERVICE_ADDR_STOCK="127.0.0.1:50073",
        ENVIRONMENT="staging",
    )
    mocker.patch.object(server, "get_settings", return_value=settings)
    mocker.patch.object(server, "configure_logging")
    return settings


def test_startup_log_names_address_and_environment(mocker, caplog, staging_settings):
    run = mocker.patch.object(server, "run_server", new_callable=mocker.AsyncMock)

    with caplog.at_level(logging.INFO, logger="stock_service.server"):
        server.main()

    run.assert_awaited_once_with(staging_settings)
    assert "Starting stock service on 127.0.0.1:50073 (staging)" in caplog.text


def test_startup_error_exits_with_status_one(mocker, caplog, staging_settings):
    mocker.patch.object(
        server, "run_server",
        new_callable=mocker.AsyncMock,
        side_effect=StartupError("address in use")
    )

    with caplog.at_level(logging.INFO, logger="stock_service.server"):
        with pytest.raises(SystemExit) as exc_info:
            server.main()

    assert exc_info.value.code == 1
    assert "failed to start: address in use" in caplog.text
