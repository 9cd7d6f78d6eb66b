"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import importlib

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.asset_projection import (
    build_plotly_figure,
    build_projection_model,
)
from src.application.use_cases.get_asset_projection import (
    GetAssetProjectionUseCase,
)
from src.application.use_cases.get_budget_progress import (
    GetBudgetProgressUseCase,
)
from src.application.use_cases.get_cashflow import GetCashflowUseCase
from src.application.use_cases.get_net_worth_timeline import (
    GetNetWorthTimelineUseCase,
)
from src.domain.models.assets import Asset
from src.domain.models.budgets import BudgetProgress
from src.domain.models.finance import (
    AssetProjection,
    CashflowView,
    CategoryAmount,
    NetWorthDataPoint,
    NetWorthTimeline,
    TimeRange,
)
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

CURRENCY_SYMBOLS = {"CAD": "$", "USD": "$", "EUR": "€", "GBP": "£"}
TIME_RANGE_OPTIONS = [time_range.value for time_range in TimeRange]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Verify that the numpy/pandas installs used by Altair are usable.

    Returns:
        Tuple of a success flag and an error message naming the broken
        library.
    """
    checks = (("numpy", "ndarray"), ("pandas", "Timestamp"))
    for module_name, attribute in checks:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            return False, f"{module_name} could not be imported: {exc}"
        if not hasattr(module, attribute):
            return (
                False,
                f"{module_name} is installed but incomplete "
                f"(missing {module_name}.{attribute}). Reinstall {module_name}.",
            )
    return True, None


def _fetch_timeline(
    user_id: str,
    time_range: str,
    today: date,
) -> NetWorthTimeline:
    """Fetch the net worth timeline from the finance database."""
    use_case = GetNetWorthTimelineUseCase(build_finance_repository())
    return use_case.execute(user_id, TimeRange(time_range), today=today)


@st.cache_data(show_spinner=False)
def _load_timeline(
    user_id: str,
    time_range: str,
    today: date,
) -> NetWorthTimeline:
    """Cached wrapper around _fetch_timeline."""
    return _fetch_timeline(user_id, time_range, today)


def _fetch_cashflow(user_id: str, time_range: str, today: date) -> CashflowView:
    """Fetch income and spending series."""
    use_case = GetCashflowUseCase(build_finance_repository())
    return use_case.execute(user_id, TimeRange(time_range), today=today)


@st.cache_data(show_spinner=False)
def _load_cashflow(user_id: str, time_range: str, today: date) -> CashflowView:
    """Cached wrapper around _fetch_cashflow."""
    return _fetch_cashflow(user_id, time_range, today)


def _fetch_budget_progress(user_id: str, today: date) -> list[BudgetProgress]:
    """Fetch progress for each budget."""
    use_case = GetBudgetProgressUseCase(build_finance_repository())
    return use_case.execute(user_id, today=today)


@st.cache_data(show_spinner=False)
def _load_budget_progress(user_id: str, today: date) -> list[BudgetProgress]:
    """Cached wrapper around _fetch_budget_progress."""
    return _fetch_budget_progress(user_id, today)


@st.cache_data(show_spinner=False)
def _load_assets(user_id: str) -> list[Asset]:
    """Load the user's assets."""
    return build_finance_repository().fetch_assets(user_id)


def _fetch_asset_projection(
    user_id: str,
    asset_id: str,
    today: date,
) -> AssetProjection | None:
    """Fetch the projection of one asset."""
    use_case = GetAssetProjectionUseCase(build_finance_repository())
    return use_case.execute(user_id, asset_id, today=today)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{value:,.2f} {currency_code}"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / abs(baseline)) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _timeline_chart_data(
    points: Sequence[NetWorthDataPoint],
) -> list[dict[str, str | float]]:
    """Convert timeline points to Altair-ready rows."""
    return [
        {"date": point.date.isoformat(), "net_worth": float(point.net_worth)}
        for point in points
    ]


def _monthly_chart_data(view: CashflowView) -> list[dict[str, str | float]]:
    """Merge income and spending series into Altair-ready rows."""
    data: list[dict[str, str | float]] = []
    for label, series in (("Income", view.income), ("Spending", view.spending)):
        data.extend(
            {"month": item.month, "kind": label, "amount": float(item.amount)}
            for item in series
        )
    return data


def _prepare_donut_chart_data(
    categories: Sequence[CategoryAmount],
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        categories: Spending totals by category, any order.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(categories, key=lambda item: item.amount, reverse=True)
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items = [
            *top_items,
            CategoryAmount(category="Other", amount=other_amount),
        ]
    total_amount = sum(
        (item.amount for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for item in top_items:
        share = (
            (item.amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": item.category,
                "amount": float(item.amount),
                "amount_label": _format_currency(item.amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_net_worth(timeline: NetWorthTimeline, currency_code: str) -> None:
    """Render the net worth metric and area chart."""
    baseline = timeline.points[0].net_worth if timeline.points else Decimal("0")
    st.metric(
        "Net Worth",
        _format_currency(timeline.summary.net_worth, currency_code),
        _format_delta_with_percent(timeline.change, baseline),
    )
    accounts_col, assets_col = st.columns(2)
    accounts_col.metric(
        "Accounts",
        _format_currency(timeline.summary.account_total, currency_code),
    )
    assets_col.metric(
        "Assets",
        _format_currency(timeline.summary.asset_total, currency_code),
    )

    chart = alt.Chart(
        alt.Data(values=_timeline_chart_data(timeline.points))
    ).mark_area(
        line={"color": "#1b9aaa"},
        color="#1b9aaa",
        opacity=0.35,
        interpolate="monotone",
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("net_worth:Q", title=f"Net worth ({currency_code})"),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("net_worth:Q", format=",.2f"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")

    for excluded in timeline.excluded_assets:
        st.caption(f"Excluded {excluded.name}: {excluded.reason}")


def _render_monthly_chart(view: CashflowView, currency_code: str) -> None:
    """Render grouped monthly income and spending bars."""
    st.subheader("Income vs Spending")
    data = _monthly_chart_data(view)
    if not data:
        st.info("No income or spending in this period.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("month:N", title=None),
        xOffset="kind:N",
        y=alt.Y("amount:Q", title=currency_code),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Income", "Spending"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    ).properties(height=300)
    st.altair_chart(chart, width="stretch")


def _render_spending_donut(
    view: CashflowView,
    currency_code: str,
    max_categories: int = 6,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of spending by category."""
    st.subheader("Spending by Category")
    if not view.spending_by_category:
        st.info("No spending available for the chart.")
        return
    data, _ = _prepare_donut_chart_data(
        view.spending_by_category,
        currency_code,
        max_categories=max_categories,
    )
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, width="stretch")


def _render_budgets(
    progress: Sequence[BudgetProgress],
    currency_code: str,
) -> None:
    """Render one progress bar per budget."""
    st.subheader("Budgets")
    if not progress:
        st.info("No budgets defined.")
        return
    for item in progress:
        ratio = min(float(item.percent_used) / 100, 1.0)
        label = (
            f"{item.budget.name} ({item.budget.frequency.value}): "
            f"{_format_currency(item.spent, currency_code)} of "
            f"{_format_currency(item.budget.amount, currency_code)}"
        )
        st.progress(ratio, text=label)
        if item.is_over_budget:
            st.warning(
                f"{item.budget.name} is over budget by "
                f"{_format_currency(-item.remaining, currency_code)}"
            )


def _render_dashboard(
    user_id: str,
    currency_code: str,
    default_range: TimeRange,
    today: date,
) -> None:
    """Render the net worth, cashflow and budget sections."""
    default_index = TIME_RANGE_OPTIONS.index(default_range.value)
    time_range = st.sidebar.selectbox(
        "Time range",
        TIME_RANGE_OPTIONS,
        index=default_index,
    )
    get_usage_logger().info(f"Dashboard viewed with range {time_range}")

    timeline = _load_timeline(user_id, time_range, today)
    _render_net_worth(timeline, currency_code)

    cashflow = _load_cashflow(user_id, time_range, today)
    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_monthly_chart(cashflow, currency_code)
    with chart_right:
        _render_spending_donut(cashflow, currency_code)

    _render_budgets(_load_budget_progress(user_id, today), currency_code)


def _render_assets_page(user_id: str, currency_code: str, today: date) -> None:
    """Render the projection of a selected asset."""
    assets = _load_assets(user_id)
    if not assets:
        st.warning("No vehicles or properties found.")
        return
    names = {asset.id: asset.name for asset in assets}
    asset_id = st.selectbox(
        "Asset",
        list(names),
        format_func=lambda key: names[key],
    )
    get_usage_logger().info(f"Asset projection viewed for {asset_id}")
    projection = _fetch_asset_projection(user_id, asset_id, today)
    if projection is None:
        st.warning(
            f"{names[asset_id]} has no purchase date or price to project."
        )
        return

    value_col, roi_col, loan_col = st.columns(3)
    value_col.metric(
        "Current value",
        _format_currency(projection.current_value, currency_code),
    )
    roi_col.metric(
        "ROI",
        f"{projection.roi_percent}%"
        if projection.roi_percent is not None
        else "n/a",
    )
    loan_col.metric(
        "Loan repaid",
        f"{projection.financing_progress_percent}%"
        if projection.financing is not None
        else "n/a",
    )
    if projection.rental is not None:
        cash_col, cap_col = st.columns(2)
        cash_col.metric(
            "Monthly cash flow",
            _format_currency(projection.rental.monthly_cash_flow, currency_code),
        )
        cap_col.metric("Cap rate", f"{projection.rental.cap_rate_percent}%")
    figure = build_plotly_figure(build_projection_model(projection, today))
    st.plotly_chart(figure, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Dashboard", layout="wide")
    st.title("Net Worth Dashboard")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    try:
        settings = build_settings()
        user_id = settings.require_user_id()
    except RuntimeError as exc:
        st.warning(str(exc))
        return

    today = date.today()
    page = st.sidebar.selectbox("Page", ["Dashboard", "Assets"])
    if page == "Dashboard":
        _render_dashboard(
            user_id,
            settings.currency,
            settings.time_range,
            today,
        )
    else:
        _render_assets_page(user_id, settings.currency, today)


if __name__ == "__main__":  # pragma: no cover
    main()
