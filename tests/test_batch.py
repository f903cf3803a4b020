from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from calculator.batch import evaluate_many, load_expressions, summarize


def test_evaluate_many() -> None:
    df = evaluate_many(["1+1", "1÷0", "3+"])
    assert list(df.columns) == ["expression", "value", "display", "error"]
    assert df.loc[0, "value"] == 2.0
    assert pd.isna(df.loc[1, "value"])
    assert df["display"].tolist() == ["2", "Math Error: Division by zero", "Syntax Error"]
    assert df["error"].tolist()[1:] == ["division_by_zero", "stack_underflow"]
    assert pd.isna(df.loc[0, "error"])


def test_summarize() -> None:
    summary = summarize(evaluate_many(["1+1", "1÷0", "3+", "4÷0"]))
    assert summary == {
        "total": 4,
        "ok": 1,
        "failed": 3,
        "errors": {"division_by_zero": 2, "stack_underflow": 1},
    }


def test_summarize_empty() -> None:
    summary = summarize(evaluate_many([]))
    assert summary["total"] == 0
    assert summary["errors"] == {}


def test_load_expressions_from_csv(tmp_path: Path) -> None:
    path = tmp_path / "expressions.csv"
    path.write_text("expression\n1+1\n(2+3)×4\n", encoding="utf-8")
    assert load_expressions(path) == ["1+1", "(2+3)×4"]


def test_load_expressions_custom_column(tmp_path: Path) -> None:
    path = tmp_path / "expressions.csv"
    path.write_text("id,formula\n1,2×3\n", encoding="utf-8")
    assert load_expressions(path, column="formula") == ["2×3"]


def test_load_expressions_missing_column(tmp_path: Path) -> None:
    path = tmp_path / "expressions.csv"
    path.write_text("formula\n1+1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="expression"):
        load_expressions(path)


def test_load_expressions_from_text(tmp_path: Path) -> None:
    path = tmp_path / "expressions.txt"
    path.write_text("1+1\n\n2 × 3\n", encoding="utf-8")
    assert load_expressions(path) == ["1+1", "2 × 3"]
