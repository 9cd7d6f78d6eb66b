"""Asset projection presentation logic for the Streamlit UI.

This module turns an ``AssetProjection`` produced by
``GetAssetProjectionUseCase`` into a chart model and a Plotly figure. It
performs no IO; the UI loads the projection and renders the figure.

The chart shows the projected value curve and, for financed assets, the
remaining loan balance at each monthly anniversary, plus a marker for the
current value.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models.finance import AssetProjection
from src.domain.services.amortization import amortize

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


VALUE_TRACE = "Projected value"
LOAN_TRACE = "Loan balance"
TODAY_TRACE = "Today"


@dataclass(frozen=True)
class ProjectionChartModel:
    """Series used to draw an asset projection.

    Attributes:
        title: Chart title.
        dates: Anniversary dates of the curve.
        values: Projected values aligned with ``dates``.
        loan_balances: Remaining loan balances aligned with ``dates``, empty
            when the asset is not financed.
        today: Date of the current-value marker.
        current_value: Value at ``today``.
    """

    title: str
    dates: list[date]
    values: list[Decimal]
    loan_balances: list[Decimal]
    today: date
    current_value: Decimal


def _loan_balances(projection: AssetProjection) -> list[Decimal]:
    """Replay the loan for each point of the curve."""
    financing = projection.asset.financing
    if projection.financing is None or financing is None:
        return []
    return [
        amortize(
            financing.loan_amount,
            financing.interest_rate,
            financing.term_months,
            index,
            monthly_payment=financing.monthly_payment,
        ).remaining_balance
        for index in range(len(projection.curve))
    ]


def build_projection_model(
    projection: AssetProjection,
    today: date,
) -> ProjectionChartModel:
    """Build the chart model for an asset projection.

    Args:
        projection: Projection returned by the use case.
        today: Date of the current-value marker.

    Returns:
        ProjectionChartModel: Series ready to plot.
    """
    rate = projection.growth_rate
    sign = "+" if rate >= 0 else ""
    return ProjectionChartModel(
        title=f"{projection.asset.name} ({sign}{rate}% / year)",
        dates=[point.date for point in projection.curve],
        values=[point.value for point in projection.curve],
        loan_balances=_loan_balances(projection),
        today=today,
        current_value=projection.current_value,
    )


def build_plotly_figure(model: ProjectionChartModel) -> "go.Figure":
    """Build a Plotly line figure from a projection model.

    Args:
        model: Precomputed projection model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=model.dates,
            y=[float(value) for value in model.values],
            mode="lines",
            name=VALUE_TRACE,
            line=dict(color="#1b9aaa", width=3),
        )
    )
    if model.loan_balances:
        fig.add_trace(
            go.Scatter(
                x=model.dates,
                y=[float(value) for value in model.loan_balances],
                mode="lines",
                name=LOAN_TRACE,
                line=dict(color="#e76f51", width=2, dash="dash"),
            )
        )
    fig.add_trace(
        go.Scatter(
            x=[model.today],
            y=[float(model.current_value)],
            mode="markers",
            name=TODAY_TRACE,
            marker=dict(size=10, color="#f6c453"),
        )
    )
    fig.update_layout(
        title=model.title,
        margin=dict(l=8, r=8, t=40, b=8),
        height=420,
        hovermode="x unified",
    )
    return fig


__all__ = [
    "ProjectionChartModel",
    "build_projection_model",
    "build_plotly_figure",
]
