"""Check the public surface of the adapter modules."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_export_nothing(package) -> None:
    assert import_module(package).__all__ == []


@pytest.mark.parametrize(
    "module_name",
    ["src.adapters.net_worth_cli", "src.adapters.materialize_recurring_cli"],
)
def test_cli_modules_expose_main(module_name) -> None:
    assert callable(import_module(module_name).main)


def test_asset_projection_exports_chart_helpers() -> None:
    module = import_module("src.adapters.interface.streamlit.asset_projection")
    assert set(module.__all__) == {
        "ProjectionChartModel",
        "build_projection_model",
        "build_plotly_figure",
    }
