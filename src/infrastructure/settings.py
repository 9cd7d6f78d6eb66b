"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_TIME_RANGE
from src.domain.models.finance import TimeRange
from src.domain.policies.time_ranges import parse_time_range
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the dashboard and command line tools.

    Attributes:
        user_id: Owner whose records are displayed, when configured.
        time_range: Default timeline window.
        currency: Display currency code.
    """

    user_id: Optional[str] = None
    time_range: TimeRange = DEFAULT_TIME_RANGE
    currency: str = "CAD"

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        user_id = (os.getenv("DASHBOARD_USER_ID") or "").strip() or None
        if user_id is None:
            logger.warning("DASHBOARD_USER_ID is not set.")
        time_range = parse_time_range(os.getenv("NETWORTH_TIME_RANGE"), logger)
        currency = (os.getenv("DASHBOARD_CURRENCY") or "CAD").strip().upper()
        return cls(user_id=user_id, time_range=time_range, currency=currency)

    def require_user_id(self) -> str:
        """Return the configured user id.

        Raises:
            RuntimeError: If DASHBOARD_USER_ID is not configured.
        """
        if not self.user_id:
            raise RuntimeError("Missing environment variable: DASHBOARD_USER_ID")
        return self.user_id


__all__ = ["DashboardSettings"]
