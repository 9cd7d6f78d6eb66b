"""CLI adapter creating the transactions owed by recurring schedules."""

from datetime import date
import os

from src.application.use_cases.materialize_recurring import (
    MaterializeRecurringSchedulesUseCase,
)
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Materialize due recurring transactions up to MATERIALIZE_UNTIL."""
    logger = get_app_logger()
    until = _parse_date(os.getenv("MATERIALIZE_UNTIL"), logger)
    try:
        user_id = build_settings().require_user_id()
        use_case = MaterializeRecurringSchedulesUseCase(
            build_finance_repository(),
            logger=logger,
        )
        result = use_case.execute(user_id, until=until)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(
        f"Materialized {result.created} transactions "
        f"from {result.schedules} recurring schedules."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
