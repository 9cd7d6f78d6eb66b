"""Tests for the materialize_recurring_cli adapter."""

from datetime import date
from unittest.mock import MagicMock

from src.adapters import materialize_recurring_cli
from src.application.use_cases.materialize_recurring import MaterializeResult
from src.infrastructure.settings import DashboardSettings


def _patch_cli(monkeypatch, fake_logger, fake_use_case, settings):
    monkeypatch.setattr(
        materialize_recurring_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setattr(
        materialize_recurring_cli,
        "build_settings",
        lambda: settings,
    )
    monkeypatch.setattr(
        materialize_recurring_cli,
        "build_finance_repository",
        lambda: object(),
    )
    monkeypatch.setattr(
        materialize_recurring_cli,
        "MaterializeRecurringSchedulesUseCase",
        lambda repository, logger: fake_use_case,
    )


def test_parse_date_handles_valid_and_invalid_values():
    """_parse_date should accept ISO dates and warn on bad input."""
    logger = MagicMock()

    assert materialize_recurring_cli._parse_date(None, logger) is None
    assert materialize_recurring_cli._parse_date(
        "2024-07-01", logger
    ) == date(2024, 7, 1)
    assert materialize_recurring_cli._parse_date("07/01/2024", logger) is None
    logger.warning.assert_called_once()


def test_main_prints_created_count(monkeypatch, capsys):
    """The CLI should pass MATERIALIZE_UNTIL and report the result."""
    fake_logger = MagicMock()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = MaterializeResult(
        schedules=2,
        created=5,
    )
    monkeypatch.setenv("MATERIALIZE_UNTIL", "2024-07-01")
    _patch_cli(
        monkeypatch,
        fake_logger,
        fake_use_case,
        DashboardSettings(user_id="user-1"),
    )

    materialize_recurring_cli.main()

    fake_use_case.execute.assert_called_once_with(
        "user-1",
        until=date(2024, 7, 1),
    )
    out = capsys.readouterr().out
    assert "Materialized 5 transactions from 2 recurring schedules." in out


def test_main_logs_missing_user(monkeypatch, capsys):
    """A missing user id should stop the run with an error log."""
    fake_logger = MagicMock()
    fake_use_case = MagicMock()
    monkeypatch.delenv("MATERIALIZE_UNTIL", raising=False)
    _patch_cli(
        monkeypatch,
        fake_logger,
        fake_use_case,
        DashboardSettings(user_id=None),
    )

    materialize_recurring_cli.main()

    fake_use_case.execute.assert_not_called()
    fake_logger.error.assert_called_once()
    assert capsys.readouterr().out == ""
