"""Join per-command outcomes into one report."""

from __future__ import annotations

from collections.abc import Sequence

from godoc_mcp.core.config.godoc_config import FailurePolicy
from godoc_mcp.core.models import NOTHING_FOUND, AnalysisResult, LookupOutcome

ENTRY_SEPARATOR = "\n\n"


def format_header(outcome: LookupOutcome) -> str:
    return f"=== {outcome.command.display()} ==="


def format_entry(outcome: LookupOutcome) -> str:
    if outcome.ok:
        return f"{format_header(outcome)}\n{outcome.text}"
    return f"{format_header(outcome)}\nError: {outcome.error}"


def aggregate(
    outcomes: Sequence[LookupOutcome], policy: FailurePolicy = "annotate"
) -> AnalysisResult:
    """Build the final report, preserving the order of `outcomes`.

    Under "drop" failed outcomes are omitted; under "annotate" they are kept
    with their error text. Returns the NOTHING_FOUND sentinel when no entry
    survives.
    """
    succeeded = sum(1 for outcome in outcomes if outcome.ok)
    failed = len(outcomes) - succeeded

    kept = [o for o in outcomes if o.ok or policy == "annotate"]
    if not kept:
        return NOTHING_FOUND

    return AnalysisResult(
        text=ENTRY_SEPARATOR.join(format_entry(o) for o in kept),
        found=succeeded > 0,
        succeeded=succeeded,
        failed=failed,
    )
