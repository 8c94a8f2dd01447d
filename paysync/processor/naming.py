from collections import Counter
from collections.abc import Sequence
from datetime import date

from paysync.roster.models import Employee

_SAFE_PUNCTUATION = frozenset(" -_.")


def sanitize_file_part(value: str) -> str:
    """Replace characters that are awkward in file names with underscores."""
    return "".join(ch if ch.isalnum() or ch in _SAFE_PUNCTUATION else "_" for ch in value).strip()


def payslip_file_names(employees: Sequence[Employee], period: date) -> list[str]:
    """Build ``Name_Surname_Month_Year.pdf`` names, unique within the batch.

    Repeated names get ``_2``, ``_3``, ... before the extension.
    """
    suffix = f"{period.strftime('%B')}_{period.year}"
    names: list[str] = []
    seen: Counter[str] = Counter()
    for employee in employees:
        parts = [sanitize_file_part(p) for p in (employee.name, employee.surname)]
        stem = "_".join([p for p in parts if p] + [suffix])
        seen[stem] += 1
        if seen[stem] > 1:
            stem = f"{stem}_{seen[stem]}"
        names.append(f"{stem}.pdf")
    return names
