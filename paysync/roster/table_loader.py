"""Decode roster and key-file uploads (CSV/XLSX) into in-memory rows."""

import csv
import io
from pathlib import PurePath
from typing import Any

import openpyxl

from paysync.roster.exceptions import ParseError

SUPPORTED_SUFFIXES = frozenset({".csv", ".xlsx"})


def load_table(data: bytes, file_name: str) -> list[dict[str, object]]:
    """Decode a CSV or XLSX upload into header-keyed rows.

    The first row is the header. Rows whose cells are all empty are skipped.

    Raises:
        ParseError: for unsupported file types, undecodable content or a
            missing header row.
    """
    suffix = PurePath(file_name).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ParseError(
            f"Unsupported table file '{file_name}'. Choose from: {sorted(SUPPORTED_SUFFIXES)}"
        )
    grid = _read_csv(data) if suffix == ".csv" else _read_xlsx(data)
    if not grid:
        raise ParseError(f"Table file '{file_name}' is empty")

    header, *body = grid
    columns = [str(value).strip() if value is not None else "" for value in header]
    if not any(columns):
        raise ParseError(f"Table file '{file_name}' has no header row")

    rows: list[dict[str, object]] = []
    for values in body:
        if all(value is None or str(value).strip() == "" for value in values):
            continue
        rows.append(
            {column: value for column, value in zip(columns, values) if column}
        )
    return rows


def _read_csv(data: bytes) -> list[list[Any]]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"CSV is not valid UTF-8: {exc}") from exc
    try:
        return list(csv.reader(io.StringIO(text, newline="")))
    except csv.Error as exc:
        raise ParseError(f"CSV could not be parsed: {exc}") from exc


def _read_xlsx(data: bytes) -> list[list[Any]]:
    try:
        workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except Exception as exc:
        raise ParseError(f"Workbook could not be opened: {exc}") from exc
    try:
        sheet = workbook.active
        if sheet is None:
            raise ParseError("Workbook has no active worksheet")
        return [list(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()
