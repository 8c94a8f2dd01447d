"""Declarative column alias table and the single resolver that consults it."""

from collections.abc import Mapping

NAME = "name"
SURNAME = "surname"
ID_NUMBER = "id_number"

# Ordered: the first alias with a non-empty value wins for a row.
COLUMN_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (NAME, ("name", "first_name", "firstname", "first name", "employee_name", "given_name")),
    (SURNAME, ("surname", "last_name", "lastname", "last name", "family_name")),
    (
        ID_NUMBER,
        ("id_number", "idnumber", "id_no", "id", "employee_id", "national_id", "staff_id"),
    ),
)

_ALIASES_BY_FIELD: dict[str, tuple[str, ...]] = dict(COLUMN_ALIASES)


def cell_text(value: object) -> str:
    """Render a decoded cell as trimmed text.

    Spreadsheets hand back whole numbers as floats (``100001.0``); those are
    rendered without the fractional part.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def resolve_field(row: Mapping[str, object], field: str) -> str:
    """Return the first non-empty value among the field's aliases.

    Header matching is case-insensitive and ignores surrounding whitespace.
    """
    aliases = _ALIASES_BY_FIELD.get(field)
    if aliases is None:
        raise KeyError(f"Unknown roster field '{field}'")
    by_header = {str(key).strip().lower(): value for key, value in row.items()}
    for alias in aliases:
        text = cell_text(by_header.get(alias))
        if text:
            return text
    return ""
