from collections.abc import Mapping, Sequence

from paysync.logging.logger import Log
from paysync.roster.columns import ID_NUMBER, NAME, SURNAME, resolve_field
from paysync.roster.exceptions import ParseError
from paysync.roster.identity import normalize_identity
from paysync.roster.models import Employee, KeyFileEntry


def _require_rows(table: object) -> Sequence[Mapping[str, object]]:
    if isinstance(table, (str, bytes)) or not isinstance(table, Sequence):
        raise ParseError(
            f"Tabular input must be a sequence of rows, got {type(table).__name__}"
        )
    for index, row in enumerate(table, start=1):
        if not isinstance(row, Mapping):
            raise ParseError(
                f"Row {index} must be a column-name mapping, got {type(row).__name__}"
            )
    return table


class RosterParser:
    """Converts a decoded roster table into the ordered employee list."""

    def parse(self, table: Sequence[Mapping[str, object]]) -> list[Employee]:
        """Resolve columns per row and keep rows that identify an employee.

        A row is kept when it has an identity key and at least one of
        name or surname. Source order is preserved; it is the page order.

        Raises:
            ParseError: if the input is not a sequence of mappings.
        """
        rows = _require_rows(table)
        employees: list[Employee] = []
        for row_number, row in enumerate(rows, start=1):
            name = resolve_field(row, NAME)
            surname = resolve_field(row, SURNAME)
            id_number = resolve_field(row, ID_NUMBER)
            if not normalize_identity(id_number):
                Log.warning(f"Roster row {row_number} dropped: missing identity key")
                continue
            if not name and not surname:
                Log.warning(f"Roster row {row_number} dropped: missing name and surname")
                continue
            employees.append(
                Employee(
                    id=f"emp-{len(employees) + 1}",
                    name=name,
                    surname=surname,
                    id_number=id_number,
                )
            )
        Log.info(f"Parsed {len(employees)} employees from {len(rows)} roster rows")
        return employees


class KeyFileParser:
    """Reads identity keys from the key file using the roster alias rules."""

    def parse(self, table: Sequence[Mapping[str, object]]) -> list[KeyFileEntry]:
        rows = _require_rows(table)
        entries: list[KeyFileEntry] = []
        for row_number, row in enumerate(rows, start=1):
            identity_key = normalize_identity(resolve_field(row, ID_NUMBER))
            if not identity_key:
                Log.warning(f"Key file row {row_number} dropped: missing identity key")
                continue
            entries.append(
                KeyFileEntry(
                    identity_key=identity_key,
                    name=resolve_field(row, NAME),
                    surname=resolve_field(row, SURNAME),
                )
            )
        Log.info(f"Parsed {len(entries)} identity keys from {len(rows)} key file rows")
        return entries
