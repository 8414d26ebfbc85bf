# tests/test_loader.py

from __future__ import annotations

import pytest

from name_validator.core.exceptions import LoaderError
from name_validator.loader import detect_name_column, load_csv


def write(path, text, encoding="utf-8"):
    path.write_text(text, encoding=encoding)
    return path


def test_load_csv_reads_rows_and_columns(tmp_path):
    path = write(tmp_path / "people.csv", "id,Full Name\n1,John Smith\n2,王小明\n")
    rows, columns = load_csv(path)

    assert columns == ["id", "Full Name"]
    assert rows == [
        {"id": "1", "Full Name": "John Smith"},
        {"id": "2", "Full Name": "王小明"},
    ]


def test_load_csv_strips_bom_and_skips_blank_lines(tmp_path):
    path = write(tmp_path / "bom.csv", "Name\nJohn Smith\n\n,\nMary Jones\n", encoding="utf-8-sig")
    rows, columns = load_csv(path)

    assert columns == ["Name"]
    assert [r["Name"] for r in rows] == ["John Smith", "Mary Jones"]


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "nope.csv")


def test_load_csv_header_only(tmp_path):
    path = write(tmp_path / "empty.csv", "Name\n")
    with pytest.raises(LoaderError):
        load_csv(path)


def test_load_csv_no_header(tmp_path):
    path = write(tmp_path / "blank.csv", "")
    with pytest.raises(LoaderError):
        load_csv(path)


@pytest.mark.parametrize(
    "columns, expected",
    [
        (["id", "Full Name", "Company Name"], "Full Name"),
        (["First Name", "Last Name", "name"], "name"),
        (["Business Name", "Customer Name"], "Customer Name"),
        (["email"], "email"),
        (["a", "b"], None),
        ([], None),
    ],
)
def test_detect_name_column(columns, expected):
    assert detect_name_column(columns) == expected
