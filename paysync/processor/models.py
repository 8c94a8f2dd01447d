from dataclasses import dataclass, field

from paysync.batch.models import BatchOutcome, NamedArtifact, PageRecord
from paysync.document.store import DocumentStore
from paysync.roster.models import Employee


@dataclass(slots=True)
class WorkflowSession:
    """All state of one partition-and-seal workflow, owned by one processor."""

    document: DocumentStore
    roster_file_name: str = ""
    employees: list[Employee] = field(default_factory=list)
    page_records: list[PageRecord] = field(default_factory=list)
    extracted_pages: dict[str, bytes] = field(default_factory=dict)
    sealed_pages: dict[str, bytes] = field(default_factory=dict)

    def clear_partition(self) -> None:
        self.page_records = []
        self.extracted_pages = {}
        self.sealed_pages = {}

    def clear(self) -> None:
        self.document.clear()
        self.roster_file_name = ""
        self.employees = []
        self.clear_partition()


@dataclass
class StageResult:
    """Outcome of a partition or seal stage plus its named outputs."""

    outcome: BatchOutcome
    artifacts: list[NamedArtifact] = field(default_factory=list)
