"""Tests for the numpy/pandas check run before drawing Altair charts."""

import sys
import types

import pytest

from src.adapters.interface.streamlit import app


def _install(monkeypatch, numpy_attrs, pandas_attrs) -> None:
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(**{name: object for name in numpy_attrs}),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(**{name: object for name in pandas_attrs}),
    )


def test_chart_dependencies_usable(monkeypatch) -> None:
    _install(monkeypatch, ["ndarray"], ["Timestamp"])

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "expected"),
    [
        ([], ["Timestamp"], "numpy.ndarray"),
        (["ndarray"], [], "pandas.Timestamp"),
    ],
)
def test_incomplete_install_names_missing_attribute(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    expected,
) -> None:
    _install(monkeypatch, numpy_attrs, pandas_attrs)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert expected in message
    assert "Reinstall" in message


def test_missing_numpy_reports_import_error(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "numpy", None)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert message.startswith("numpy could not be imported")
