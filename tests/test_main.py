"""Tests for the startup sequence and the process entry point."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

import main
from core.settings import REQUIRED_ENV_VARS, ConfigurationError


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch, required_env: dict[str, str]) -> dict[str, str]:
    for name, value in required_env.items():
        monkeypatch.setenv(name, value)
    return required_env


@pytest.fixture
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in REQUIRED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def startup_mocks():
    with (
        patch.object(main.db, "init_pool", AsyncMock()) as init_pool,
        patch.object(main.db, "close_pool", AsyncMock()) as close_pool,
        patch.object(main.database_service, "initialize", AsyncMock(return_value=["todos"])) as initialize,
        patch.object(main, "configure_logging") as configure_logging,
    ):
        yield init_pool, close_pool, initialize, configure_logging


class TestLifespan:
    @pytest.mark.asyncio
    async def test_validates_database_before_serving(self, env, startup_mocks) -> None:
        init_pool, close_pool, initialize, configure_logging = startup_mocks
        app = FastAPI()

        async with main.lifespan(app):
            settings = app.state.settings
            configure_logging.assert_called_once_with(settings.log_level)
            init_pool.assert_awaited_once_with(settings)
            initialize.assert_awaited_once_with(settings)
            close_pool.assert_not_awaited()

        assert settings.db_schema == "boilerplate"
        close_pool.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_configuration_aborts_startup(self, clear_env, startup_mocks) -> None:
        init_pool, _, initialize, _ = startup_mocks

        with pytest.raises(ConfigurationError) as exc_info:
            async with main.lifespan(FastAPI()):
                pytest.fail("startup should not complete")

        assert exc_info.value.missing == list(REQUIRED_ENV_VARS)
        init_pool.assert_not_awaited()
        initialize.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_database_failure_aborts_startup(self, env, startup_mocks, caplog) -> None:
        _, close_pool, initialize, _ = startup_mocks
        initialize.side_effect = ConnectionRefusedError("db down")

        with pytest.raises(ConnectionRefusedError):
            async with main.lifespan(FastAPI()):
                pytest.fail("startup should not complete")

        close_pool.assert_awaited_once()
        assert "An error occurred while initializing the database." in caplog.text


class TestRun:
    def test_missing_configuration_exits_with_every_name(self, clear_env, capsys) -> None:
        with patch.object(main.uvicorn, "run") as uvicorn_run:
            with pytest.raises(SystemExit) as exc_info:
                main.run()

        assert exc_info.value.code == 1
        uvicorn_run.assert_not_called()
        err = capsys.readouterr().err
        for name in REQUIRED_ENV_VARS:
            assert name in err

    def test_starts_server_with_loaded_settings(self, env, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delattr(main.app.state, "settings", raising=False)
        with patch.object(main.uvicorn, "run") as uvicorn_run:
            main.run()
        settings = main.app.state.settings
        del main.app.state.settings

        uvicorn_run.assert_called_once()
        assert uvicorn_run.call_args.args == (main.app,)
        assert uvicorn_run.call_args.kwargs["port"] == 9001
        assert settings.db_name == "app"
