from dataclasses import dataclass, field
from enum import Enum

from paysync.batch.exceptions import InvalidTransitionError


class PageStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    READY = "ready"
    ENCRYPTED = "encrypted"
    FAILED = "failed"


_TRANSITIONS: dict[PageStatus, frozenset[PageStatus]] = {
    PageStatus.PENDING: frozenset({PageStatus.PROCESSING}),
    PageStatus.PROCESSING: frozenset(
        {PageStatus.READY, PageStatus.ENCRYPTED, PageStatus.FAILED}
    ),
    PageStatus.READY: frozenset({PageStatus.PROCESSING}),
    PageStatus.ENCRYPTED: frozenset(),
    PageStatus.FAILED: frozenset(),
}

# Outcome of a processing step, keyed by the status the step started from.
_PHASE_RESULTS: dict[PageStatus, frozenset[PageStatus]] = {
    PageStatus.PENDING: frozenset({PageStatus.READY, PageStatus.FAILED}),
    PageStatus.READY: frozenset({PageStatus.ENCRYPTED, PageStatus.FAILED}),
}


@dataclass
class PageRecord:
    """One employee's page through partition and sealing."""

    id: str
    file_name: str
    identity_key: str
    employee_name: str
    page_number: int
    status: PageStatus = PageStatus.PENDING
    history: list[PageStatus] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.history:
            self.history.append(self.status)

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self.status]

    def transition(self, status: PageStatus) -> None:
        if status not in _TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"{self.id}: cannot move from {self.status.value} to {status.value}"
            )
        if self.status is PageStatus.PROCESSING and len(self.history) >= 2:
            started_from = self.history[-2]
            if status not in _PHASE_RESULTS.get(started_from, frozenset()):
                raise InvalidTransitionError(
                    f"{self.id}: processing started from {started_from.value} "
                    f"cannot end in {status.value}"
                )
        self.status = status
        self.history.append(status)


@dataclass(frozen=True)
class NamedArtifact:
    """A named output buffer for the host to download or archive."""

    file_name: str
    data: bytes


@dataclass
class BatchOutcome:
    """Aggregate result of one batch run."""

    total: int
    completed_count: int = 0
    failed_count: int = 0
    skipped_count: int = 0
    errors: list[str] = field(default_factory=list)
    results: dict[str, bytes] = field(default_factory=dict)
    cancelled: bool = False
    progress: int = 0

    @property
    def is_success(self) -> bool:
        # Observed rule: fewer failures than successes still counts as done.
        if self.cancelled:
            return False
        return self.failed_count == 0 or self.failed_count < self.completed_count
