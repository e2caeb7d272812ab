"""Results layer: metric derivation, ranking, formatting and exports."""

from cba.results.export import (
    CSV_HEADER,
    EmptyExportError,
    build_results,
    export_csv,
    to_csv,
    to_json,
)
from cba.results.formatting import (
    SummaryCard,
    format_currency,
    format_ratio,
    results_table,
    summary_cards,
)
from cba.results.metrics import (
    TreatmentMetrics,
    derive,
    derive_all,
    ensure_derived,
    rank,
    top_treatments,
)
from cba.results.narrative import EMPTY_PROMPT, summarize

__all__ = [
    "CSV_HEADER",
    "EMPTY_PROMPT",
    "EmptyExportError",
    "SummaryCard",
    "TreatmentMetrics",
    "build_results",
    "derive",
    "derive_all",
    "ensure_derived",
    "export_csv",
    "format_currency",
    "format_ratio",
    "rank",
    "results_table",
    "summarize",
    "summary_cards",
    "to_csv",
    "to_json",
    "top_treatments",
]
