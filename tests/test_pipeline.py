# tests/test_pipeline.py

from __future__ import annotations

import csv
import json

import pytest

from name_validator.config import get_config
from name_validator.core.context import ValidationContext
from name_validator.core.exceptions import ColumnNotFoundError, PipelineError
from name_validator.core.pipeline import Pipeline
from name_validator.logging import get_logger

CSV_TEXT = (
    "id,Full Name,Company Name\n"
    "1,John Smith,Acme\n"
    "2,\"Smith, John Michael\",Acme\n"
    "3,test user,Acme\n"
    "4,王小明,Acme\n"
)


@pytest.fixture
def input_csv(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def make_ctx(input_path, **kwargs):
    return ValidationContext(
        config=get_config(),
        logger=get_logger("tests.pipeline"),
        input_path=str(input_path),
        **kwargs,
    )


def test_pipeline_writes_default_clean_csv(input_csv):
    ctx = make_ctx(input_csv)
    batch = Pipeline(ctx).run()

    out = input_csv.with_name("people_split.csv")
    assert out.exists()
    assert ctx.stats["clean_csv"] == str(out)
    assert ctx.stats["total"] == 4
    assert batch.name_column == "Full Name"

    with out.open(encoding="utf-8-sig", newline="") as f:
        rows = list(csv.DictReader(f))
    assert rows[0] == {"First_Name": "John", "Last_Name": "Smith"}
    assert rows[1] == {"First_Name": "John", "Last_Name": "Smith"}


def test_pipeline_full_and_json_reports(input_csv, tmp_path):
    ctx = make_ctx(
        input_csv,
        output_path=str(tmp_path / "clean.csv"),
        full_report_path=str(tmp_path / "full.csv"),
        json_report_path=str(tmp_path / "report.json"),
    )
    Pipeline(ctx).run()

    assert (tmp_path / "clean.csv").exists()
    assert (tmp_path / "full.csv").exists()
    assert (tmp_path / "report.json").exists()


def test_pipeline_filter_drops_placeholder_rows(input_csv):
    ctx = make_ctx(input_csv, filter_problems=True)
    batch = Pipeline(ctx).run(export=False)

    assert [r["id"] for r in batch.rows] == ["1", "2", "4"]
    assert len(batch.validations) == 3
    assert batch.summary.suspicious_entries == 0
    assert not input_csv.with_name("people_split.csv").exists()


def test_pipeline_explicit_column(input_csv):
    ctx = make_ctx(input_csv, name_column="Company Name")
    batch = Pipeline(ctx).run(export=False)
    assert batch.rows[0]["First_Name"] == "Acme"


def test_pipeline_unknown_column(input_csv):
    ctx = make_ctx(input_csv, name_column="Nope")
    with pytest.raises(ColumnNotFoundError):
        Pipeline(ctx).run()


def test_pipeline_undetectable_column(tmp_path):
    path = tmp_path / "ab.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    with pytest.raises(ColumnNotFoundError):
        Pipeline(make_ctx(path)).run()


def test_pipeline_wraps_missing_file(tmp_path):
    with pytest.raises(PipelineError):
        Pipeline(make_ctx(tmp_path / "missing.csv")).run()


def test_json_report_carries_filtered_summary(input_csv, tmp_path):
    report = tmp_path / "report.json"
    ctx = make_ctx(input_csv, filter_problems=True, json_report_path=str(report))
    Pipeline(ctx).run()

    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["summary"]["total"] == 3
    assert data["summary"]["suspicious_entries"] == 0
    assert len(data["rows"]) == len(data["validations"]) == 3
    assert ctx.stats["json_report"] == str(report)
