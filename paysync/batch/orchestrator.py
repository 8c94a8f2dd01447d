import asyncio
from collections import deque
from collections.abc import Awaitable, Callable, Sequence

from paysync.batch.models import BatchOutcome, PageRecord, PageStatus
from paysync.batch.progress import ProgressCallback, ProgressTracker
from paysync.logging.logger import Log

PageOperation = Callable[[PageRecord], Awaitable[bytes]]


class BatchOrchestrator:
    """Runs one async operation per page record with bounded concurrency.

    The driver coroutine is the only writer of record status, results and
    progress. Work runs concurrently, but every settled item is applied
    here one at a time, in whatever order items finish.
    """

    def __init__(self, max_concurrency: int = 4) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._max_concurrency = max_concurrency

    async def run_batch(
        self,
        records: Sequence[PageRecord],
        operation: PageOperation,
        *,
        success_status: PageStatus,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> BatchOutcome:
        """Attempt every record and report the aggregate outcome.

        A failing item is recorded and marked failed; siblings continue.
        Once ``cancel_event`` is set no new items start, in-flight items
        are allowed to finish, and untouched records keep their status.
        """
        outcome = BatchOutcome(total=len(records))
        tracker = ProgressTracker(len(records), on_progress)
        if not records:
            outcome.progress = tracker.finish_empty()
            return outcome

        queue: deque[PageRecord] = deque(records)
        in_flight: dict[asyncio.Future[bytes], PageRecord] = {}
        try:
            while queue or in_flight:
                while (
                    queue
                    and len(in_flight) < self._max_concurrency
                    and not self._is_cancelled(cancel_event)
                ):
                    record = queue.popleft()
                    record.transition(PageStatus.PROCESSING)
                    in_flight[asyncio.ensure_future(operation(record))] = record
                if not in_flight:
                    break
                done, _pending = await asyncio.wait(
                    in_flight, return_when=asyncio.FIRST_COMPLETED
                )
                for task in done:
                    record = in_flight.pop(task)
                    self._settle(record, task, success_status, outcome)
                    outcome.progress = tracker.settle()
        finally:
            if in_flight:
                await self._abandon(in_flight)

        if queue:
            outcome.cancelled = True
            outcome.skipped_count = len(queue)
            Log.warning(f"Batch cancelled: {len(queue)} of {outcome.total} items not started")

        Log.info(
            f"Batch finished: {outcome.completed_count} succeeded, "
            f"{outcome.failed_count} failed, {outcome.skipped_count} skipped"
        )
        return outcome

    @staticmethod
    async def _abandon(in_flight: dict[asyncio.Future[bytes], PageRecord]) -> None:
        """Cancel unsettled work after the driver stopped early; mark it failed."""
        for task in in_flight:
            task.cancel()
        await asyncio.gather(*in_flight, return_exceptions=True)
        for record in in_flight.values():
            record.transition(PageStatus.FAILED)
        Log.warning(f"Batch aborted with {len(in_flight)} items in flight")

    @staticmethod
    def _is_cancelled(cancel_event: asyncio.Event | None) -> bool:
        return cancel_event is not None and cancel_event.is_set()

    @staticmethod
    def _settle(
        record: PageRecord,
        task: asyncio.Future[bytes],
        success_status: PageStatus,
        outcome: BatchOutcome,
    ) -> None:
        if task.cancelled():
            error: BaseException | None = asyncio.CancelledError("operation was cancelled")
        else:
            error = task.exception()

        if error is None:
            outcome.results[record.id] = task.result()
            record.transition(success_status)
            outcome.completed_count += 1
            return

        record.transition(PageStatus.FAILED)
        outcome.failed_count += 1
        outcome.errors.append(f"{record.file_name}: {error}")
        Log.error(f"Page {record.page_number} ({record.file_name}) failed: {error}")
