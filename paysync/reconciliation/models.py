from dataclasses import dataclass, field


@dataclass(frozen=True)
class MissingKey:
    """A page whose identity key is absent from the key file."""

    employee_name: str
    identity_key: str

    @property
    def message(self) -> str:
        return f"Missing encryption key for: {self.employee_name} (ID: {self.identity_key})"


@dataclass(frozen=True)
class ExtraKey:
    """A key-file entry that matches no page."""

    identity_key: str

    @property
    def message(self) -> str:
        return f"Extra key found: {self.identity_key} (no matching payslip)"


@dataclass(frozen=True)
class DuplicateKey:
    """An identity key carried by more than one page."""

    identity_key: str
    occurrences: int

    @property
    def message(self) -> str:
        return f"Duplicate identity key: {self.identity_key} ({self.occurrences} payslips)"


@dataclass(frozen=True)
class ValidationReport:
    """Itemized result of cross-checking page keys against the key file."""

    expected_count: int
    matched_count: int
    missing: list[MissingKey] = field(default_factory=list)
    extra: list[ExtraKey] = field(default_factory=list)
    duplicates: list[DuplicateKey] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        return [
            *(item.message for item in self.missing),
            *(item.message for item in self.extra),
            *(item.message for item in self.duplicates),
        ]

    @property
    def sealing_authorized(self) -> bool:
        return not self.errors and self.matched_count == self.expected_count
