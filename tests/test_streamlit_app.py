"""Smoke tests for the Streamlit app with the streamlit module replaced by a mock."""

import json
from unittest.mock import MagicMock

import pytest

from heroengine.app import streamlit_app


@pytest.fixture
def st(monkeypatch):
    fake = MagicMock()
    col_a, col_b = MagicMock(), MagicMock()
    col_a.selectbox.return_value = 2
    col_b.selectbox.return_value = 3
    fake.columns.return_value = (col_a, col_b)
    fake.button.return_value = True
    monkeypatch.setattr(streamlit_app, "st", fake)
    return fake


def test_run_app_compares_selected_heroes(st, heroes, tmp_path) -> None:
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps([h.to_dict() for h in heroes]), encoding="utf-8")
    streamlit_app.run_app(str(path))
    table = st.dataframe.call_args.args[0]
    assert "image" not in table.columns
    assert len(table) == len(heroes)
    text = st.code.call_args.args[0]
    assert "Ant-Man (#2) vs Bane (#3)" in text
    assert "Overall: Bane (1-5, 0 tied)" in text
    assert st.json.call_args.args[0]["overall_winner"] == 2


def test_run_app_reports_unavailable_catalog(st, tmp_path) -> None:
    streamlit_app.run_app(str(tmp_path / "missing.json"))
    assert "unavailable" in st.error.call_args.args[0]
    st.dataframe.assert_not_called()


def test_run_app_empty_catalog(st, tmp_path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    streamlit_app.run_app(str(path))
    st.warning.assert_called_once()
    st.button.assert_not_called()
