"""Rule-based quality checks and numeric draft evaluation."""

from email_polisher.quality.checks import count_warnings, run_checks
from email_polisher.quality.evaluation import eval_draft

__all__ = [
    "count_warnings",
    "eval_draft",
    "run_checks",
]
