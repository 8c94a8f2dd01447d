from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """One roster row accepted for page assignment."""

    id: str
    name: str
    surname: str
    id_number: str  # trimmed cell text; whitespace inside is kept until normalized

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.name, self.surname) if part)


@dataclass(frozen=True)
class KeyFileEntry:
    """Identity key read from the separately supplied key file."""

    identity_key: str
    name: str = ""
    surname: str = ""
