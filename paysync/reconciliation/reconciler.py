from collections import Counter
from collections.abc import Sequence

from paysync.batch.models import PageRecord
from paysync.logging.logger import Log
from paysync.reconciliation.models import DuplicateKey, ExtraKey, MissingKey, ValidationReport
from paysync.roster.identity import normalize_identity
from paysync.roster.models import KeyFileEntry


class Reconciler:
    """Checks that page identity keys and key-file keys match one to one."""

    def reconcile(
        self,
        page_records: Sequence[PageRecord],
        key_entries: Sequence[KeyFileEntry],
    ) -> ValidationReport:
        """Build an itemized report; never mutates its inputs.

        Sealing is authorized only when there are no discrepancies and
        every page record found its key.
        """
        page_keys = [normalize_identity(record.identity_key) for record in page_records]
        file_keys = [normalize_identity(entry.identity_key) for entry in key_entries]
        page_key_set = set(page_keys)
        file_key_set = set(file_keys)

        missing = [
            MissingKey(employee_name=record.employee_name, identity_key=key)
            for record, key in zip(page_records, page_keys)
            if key not in file_key_set
        ]
        extra = [ExtraKey(identity_key=key) for key in file_keys if key not in page_key_set]
        duplicates = [
            DuplicateKey(identity_key=key, occurrences=count)
            for key, count in Counter(page_keys).items()
            if count > 1
        ]

        report = ValidationReport(
            expected_count=len(page_records),
            matched_count=len(page_key_set & file_key_set),
            missing=missing,
            extra=extra,
            duplicates=duplicates,
        )
        if report.sealing_authorized:
            Log.info(f"All {report.matched_count} identity keys matched")
        else:
            Log.warning(
                f"Key validation failed: {len(report.errors)} errors, "
                f"{report.matched_count}/{report.expected_count} matched"
            )
        return report
