"""CLI adapter printing the net worth timeline of the configured user.

The time range comes from NETWORTH_TIME_RANGE (default 1Y) and the user from
DASHBOARD_USER_ID.
"""

from src.application.use_cases.get_net_worth_timeline import (
    GetNetWorthTimelineUseCase,
)
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the net worth timeline use case and print the series."""
    logger = get_app_logger()
    try:
        settings = build_settings()
        user_id = settings.require_user_id()
        repository = build_finance_repository()
        use_case = GetNetWorthTimelineUseCase(repository, logger=logger)
        timeline = use_case.execute(user_id, settings.time_range)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    summary = timeline.summary
    print(
        f"Net worth ({timeline.time_range.value}, {settings.currency}): "
        f"{summary.net_worth} "
        f"(accounts={summary.account_total}, assets={summary.asset_total})"
    )
    for point in timeline.points:
        print(f"{point.date.isoformat()}  {point.net_worth}")
    print(f"Change over period: {timeline.change}")
    for excluded in timeline.excluded_assets:
        print(f"Excluded asset {excluded.name}: {excluded.reason}")


if __name__ == "__main__":  # pragma: no cover
    main()
