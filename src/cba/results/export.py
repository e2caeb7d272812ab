"""CSV and JSON exports of treatment results.

The CSV export follows the raw data: rows appear in insertion order, not
ranked order, and numbers are written unformatted. The JSON export
carries the ranked view with each treatment's rank.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from cba.core.treatment import Treatment
from cba.results.metrics import ensure_derived, rank

logger = logging.getLogger(__name__)

CSV_HEADER = ["Treatment", "PV benefits", "PV costs", "NPV", "BCR", "ROI", "Notes"]
CSV_LINE_END = "\r\n"


class EmptyExportError(ValueError):
    """Raised when an export is requested with no treatments to export."""

    def __init__(self, message: str = "Add at least one treatment before exporting."):
        super().__init__(message)


def _quote(text: Optional[str]) -> str:
    """Double-quote a text field, doubling embedded quotes."""
    return '"' + (text or "").replace('"', '""') + '"'


def _number(value: Optional[float]) -> str:
    """Raw numeric field; integral floats drop the trailing ".0"."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def to_csv(records: Sequence[Treatment]) -> str:
    """Render treatments as CSV text.

    Records that have not been derived yet are derived first.

    Args:
        records: Treatments in insertion order.

    Returns:
        Header plus one line per treatment, CRLF-separated. Absent BCR or
        ROI values are written as empty fields.
    """
    ensure_derived(records)

    lines = [",".join(CSV_HEADER)]
    for record in records:
        lines.append(
            ",".join(
                [
                    _quote(record.name),
                    _number(record.pv_benefits),
                    _number(record.pv_costs),
                    _number(record.npv),
                    _number(record.bcr),
                    _number(record.roi),
                    _quote(record.notes),
                ]
            )
        )
    return CSV_LINE_END.join(lines)


def export_csv(records: Sequence[Treatment]) -> str:
    """Produce the CSV download for the current treatments.

    Raises:
        EmptyExportError: If there are no treatments. The caller should
            show this as a blocking notice rather than save an empty file.
    """
    if not records:
        logger.warning("CSV export rejected: no treatments")
        raise EmptyExportError()

    csv_text = to_csv(records)
    logger.debug(f"Exported {len(records)} treatments to CSV")
    return csv_text


def build_results(records: Sequence[Treatment]) -> Dict[str, Any]:
    """Ranked results as plain data for serialization."""
    treatments: List[Dict[str, Any]] = []
    for position, record in enumerate(rank(records), start=1):
        entry = {"rank": position}
        entry.update(record.to_dict())
        treatments.append(entry)
    return {"treatments": treatments}


def to_json(records: Sequence[Treatment]) -> str:
    """Ranked results as a JSON document; absent ratios become null."""
    return json.dumps(build_results(records), indent=2)
