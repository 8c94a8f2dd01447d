import asyncio
from collections.abc import Mapping, Sequence
from datetime import date

from paysync.batch.models import NamedArtifact, PageRecord, PageStatus
from paysync.batch.orchestrator import BatchOrchestrator
from paysync.batch.progress import ProgressCallback
from paysync.config.settings import Settings
from paysync.document.store import DocumentStore
from paysync.logging.logger import Log
from paysync.pdf.factory import PdfEngineFactory
from paysync.processor.exceptions import PreconditionError
from paysync.processor.models import StageResult, WorkflowSession
from paysync.processor.naming import payslip_file_names
from paysync.reconciliation.exceptions import ReconciliationError
from paysync.reconciliation.models import ValidationReport
from paysync.reconciliation.reconciler import Reconciler
from paysync.roster.identity import normalize_identity
from paysync.roster.models import Employee, KeyFileEntry
from paysync.roster.parser import KeyFileParser, RosterParser
from paysync.roster.table_loader import load_table
from paysync.sealing.base import BasePageSealer
from paysync.sealing.factory import SealerFactory


class Processor:
    """Orchestrates the partition-and-seal workflow for one session.

    Workflow: load roster -> load document -> partition -> reconcile -> seal.
    """

    def __init__(
        self,
        session: WorkflowSession,
        roster_parser: RosterParser,
        key_file_parser: KeyFileParser,
        reconciler: Reconciler,
        sealer: BasePageSealer,
        orchestrator: BatchOrchestrator,
    ) -> None:
        self._session = session
        self._roster_parser = roster_parser
        self._key_file_parser = key_file_parser
        self._reconciler = reconciler
        self._sealer = sealer
        self._orchestrator = orchestrator

    @property
    def session(self) -> WorkflowSession:
        return self._session

    def load_roster(
        self, rows: Sequence[Mapping[str, object]], file_name: str = ""
    ) -> list[Employee]:
        """Parse an in-memory roster table; discards any earlier partition."""
        employees = self._roster_parser.parse(rows)
        self._session.employees = employees
        self._session.roster_file_name = file_name
        self._session.clear_partition()
        Log.info(f"Loaded roster '{file_name}' with {len(employees)} employees")
        return employees

    async def load_roster_file(self, data: bytes, file_name: str) -> list[Employee]:
        rows = await asyncio.to_thread(load_table, data, file_name)
        return self.load_roster(rows, file_name)

    async def load_document(self, pdf_bytes: bytes, file_name: str = "") -> int:
        """Replace the session document; returns its page count."""
        page_count = await asyncio.to_thread(self._session.document.load, pdf_bytes, file_name)
        self._session.clear_partition()
        return page_count

    def load_key_file(self, rows: Sequence[Mapping[str, object]]) -> list[KeyFileEntry]:
        return self._key_file_parser.parse(rows)

    async def load_key_file_bytes(self, data: bytes, file_name: str) -> list[KeyFileEntry]:
        rows = await asyncio.to_thread(load_table, data, file_name)
        return self.load_key_file(rows)

    async def partition(
        self,
        period: date | None = None,
        *,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> StageResult:
        """Split the document into one single-page PDF per employee, by position."""
        self._check_counts(require_records=False)
        records = self._build_page_records(period or date.today())
        self._session.clear_partition()
        self._session.page_records = records
        Log.info(f"Partitioning {len(records)} pages")

        outcome = await self._orchestrator.run_batch(
            records,
            self._extract,
            success_status=PageStatus.READY,
            on_progress=on_progress,
            cancel_event=cancel_event,
        )
        self._session.extracted_pages.update(outcome.results)
        return StageResult(outcome=outcome, artifacts=self._artifacts(outcome.results))

    def reconcile(self, key_entries: Sequence[KeyFileEntry]) -> ValidationReport:
        return self._reconciler.reconcile(self._session.page_records, key_entries)

    async def seal(
        self,
        key_entries: Sequence[KeyFileEntry],
        *,
        on_progress: ProgressCallback | None = None,
    ) -> StageResult:
        """Seal every ready page with its identity key.

        Raises:
            PreconditionError: if counts disagree or partition has not finished.
            ReconciliationError: if the key file does not match one to one.
        """
        self._check_counts(require_records=True)
        unfinished = [
            r for r in self._session.page_records
            if r.status in (PageStatus.PENDING, PageStatus.PROCESSING)
        ]
        if unfinished:
            raise PreconditionError(
                f"Partition has not finished: {len(unfinished)} pages not extracted"
            )
        report = self.reconcile(key_entries)
        if not report.sealing_authorized:
            raise ReconciliationError(report)

        ready = [r for r in self._session.page_records if r.status is PageStatus.READY]
        Log.info(f"Sealing {len(ready)} pages")
        outcome = await self._orchestrator.run_batch(
            ready,
            self._seal,
            success_status=PageStatus.ENCRYPTED,
            on_progress=on_progress,
        )
        self._session.sealed_pages.update(outcome.results)
        return StageResult(outcome=outcome, artifacts=self._artifacts(outcome.results))

    def reset(self) -> None:
        self._session.clear()
        Log.info("Workflow session cleared")

    async def aclose(self) -> None:
        await self._sealer.aclose()

    async def _extract(self, record: PageRecord) -> bytes:
        return await asyncio.to_thread(self._session.document.extract_page, record.page_number)

    async def _seal(self, record: PageRecord) -> bytes:
        page = self._session.extracted_pages[record.id]
        return await self._sealer.seal(
            page,
            normalize_identity(record.identity_key),
            self._session.roster_file_name,
        )

    def _build_page_records(self, period: date) -> list[PageRecord]:
        employees = self._session.employees
        names = payslip_file_names(employees, period)
        return [
            PageRecord(
                id=f"file-{index}",
                file_name=file_name,
                identity_key=normalize_identity(employee.id_number),
                employee_name=employee.full_name,
                page_number=index,
            )
            for index, (employee, file_name) in enumerate(zip(employees, names), start=1)
        ]

    def _check_counts(self, *, require_records: bool) -> None:
        document = self._session.document
        if not document.is_loaded:
            raise PreconditionError("No document loaded")
        employees = len(self._session.employees)
        if employees == 0:
            raise PreconditionError("Roster has no employees")
        if employees != document.page_count:
            raise PreconditionError(
                f"Roster has {employees} employees but document has "
                f"{document.page_count} pages"
            )
        if require_records and len(self._session.page_records) != employees:
            raise PreconditionError(
                f"{len(self._session.page_records)} page records for {employees} employees"
            )

    def _artifacts(self, results: Mapping[str, bytes]) -> list[NamedArtifact]:
        return [
            NamedArtifact(file_name=record.file_name, data=results[record.id])
            for record in self._session.page_records
            if record.id in results
        ]


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    Log.configure(settings.log_level, settings.app_env)
    engine = PdfEngineFactory.create(settings)
    session = WorkflowSession(document=DocumentStore(engine))
    return Processor(
        session=session,
        roster_parser=RosterParser(),
        key_file_parser=KeyFileParser(),
        reconciler=Reconciler(),
        sealer=SealerFactory.create(settings, engine),
        orchestrator=BatchOrchestrator(settings.batch_max_concurrency),
    )
