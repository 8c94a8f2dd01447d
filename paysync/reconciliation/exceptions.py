from paysync.reconciliation.models import ValidationReport


class ReconciliationError(Exception):
    """Raised when sealing is requested without a fully matched key file."""

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        count = len(report.errors)
        super().__init__(
            f"Key file does not match payslips: {count} discrepancies, "
            f"{report.matched_count}/{report.expected_count} matched"
        )
