import io

import openpyxl
import pytest

from paysync.roster.exceptions import ParseError
from paysync.roster.table_loader import load_table


def _xlsx_bytes(rows: list[list[object]]) -> bytes:
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


class TestLoadCsv:
    def test_returns_header_keyed_rows(self) -> None:
        data = b"name,surname,id_number\nJohn,Smith,ID100001\nJane,Doe,ID100002\n"
        rows = load_table(data, "employees.csv")

        assert rows == [
            {"name": "John", "surname": "Smith", "id_number": "ID100001"},
            {"name": "Jane", "surname": "Doe", "id_number": "ID100002"},
        ]

    def test_strips_utf8_bom(self) -> None:
        rows = load_table("\ufeffid\nX1\n".encode("utf-8"), "keys.CSV")
        assert rows == [{"id": "X1"}]

    def test_skips_blank_rows(self) -> None:
        rows = load_table(b"id\nX1\n,\n\nX2\n", "keys.csv")
        assert [row["id"] for row in rows] == ["X1", "X2"]

    def test_header_only_yields_no_rows(self) -> None:
        assert load_table(b"name,id\n", "employees.csv") == []

    def test_raises_for_invalid_utf8(self) -> None:
        with pytest.raises(ParseError, match="UTF-8"):
            load_table(b"name\n\xff\xfe\xfa", "employees.csv")

    def test_raises_for_empty_file(self) -> None:
        with pytest.raises(ParseError, match="empty"):
            load_table(b"", "employees.csv")


class TestLoadXlsx:
    def test_reads_active_sheet(self) -> None:
        data = _xlsx_bytes([["Name", "Surname", "ID"], ["John", "Smith", 100001]])
        rows = load_table(data, "employees.xlsx")

        assert rows == [{"Name": "John", "Surname": "Smith", "ID": 100001}]

    def test_raises_for_corrupt_workbook(self) -> None:
        with pytest.raises(ParseError, match="Workbook could not be opened"):
            load_table(b"definitely not a zip", "employees.xlsx")


class TestUnsupportedFiles:
    @pytest.mark.parametrize("file_name", ["employees.pdf", "employees", "employees.xls"])
    def test_raises_for_unsupported_suffix(self, file_name: str) -> None:
        with pytest.raises(ParseError, match="Unsupported table file"):
            load_table(b"id\nX1\n", file_name)
