"""Investment metrics for treatment comparison.

This module derives net present value, benefit-cost ratio and return on
investment from each treatment's present-value inputs, and ranks the
treatments by NPV. Everything here is a pure calculation over records
supplied by the caller; there is no rendering and no shared state.

Key rules:
- NPV = PV benefits - PV costs, stored unrounded
- BCR = PV benefits / PV costs and ROI = NPV / PV costs, only when
  PV costs > 0; otherwise both are None ("ratio not meaningful")
- Ranking is a stable sort by NPV descending, so equal NPVs keep their
  insertion order
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from cba.core.treatment import Treatment

RANKABLE_METRICS = ("npv", "bcr", "roi")


@dataclass(frozen=True)
class TreatmentMetrics:
    """Derived metrics for a single treatment.

    Attributes:
        npv: Net present value.
        bcr: Benefit-cost ratio, None when there is no cost base.
        roi: Return on investment, None when there is no cost base.
    """

    npv: float
    bcr: Optional[float] = None
    roi: Optional[float] = None


def derive(record: Treatment) -> TreatmentMetrics:
    """Calculate metrics for one treatment.

    Args:
        record: Treatment with present-value inputs.

    Returns:
        TreatmentMetrics computed from the record's current inputs.
    """
    npv = record.pv_benefits - record.pv_costs
    if record.pv_costs > 0:
        return TreatmentMetrics(
            npv=npv,
            bcr=record.pv_benefits / record.pv_costs,
            roi=npv / record.pv_costs,
        )
    return TreatmentMetrics(npv=npv)


def derive_all(records: Iterable[Treatment]) -> None:
    """Write derived metrics onto every record in place.

    Calling this again with unchanged inputs produces identical values.
    """
    for record in records:
        metrics = derive(record)
        record.npv = metrics.npv
        record.bcr = metrics.bcr
        record.roi = metrics.roi


def ensure_derived(records: Iterable[Treatment]) -> None:
    """Derive only the records whose inputs changed since last derived."""
    derive_all(r for r in records if not r.is_derived)


def rank(records: Sequence[Treatment]) -> List[Treatment]:
    """Order treatments by NPV, highest first.

    Records whose inputs changed since they were last derived are derived
    before sorting. Ties keep their original insertion order.

    Args:
        records: Treatments in insertion order.

    Returns:
        New list of the same records in ranked order.
    """
    ensure_derived(records)
    return sorted(records, key=lambda r: r.npv, reverse=True)


def top_treatments(
    records: Sequence[Treatment],
    by: str = "npv",
    n: int = 5,
) -> List[Treatment]:
    """Leaderboard view: the best n treatments by a single metric.

    Treatments where the metric is absent (no cost base) are left out.

    Args:
        records: Treatments in insertion order.
        by: Metric to sort on ("npv", "bcr" or "roi").
        n: Maximum number of treatments to return.

    Returns:
        Up to n treatments, best first, ties in insertion order.

    Raises:
        ValueError: If `by` is not a known metric.
    """
    if by not in RANKABLE_METRICS:
        raise ValueError(
            f"Unknown metric: {by}. Use one of {', '.join(RANKABLE_METRICS)}"
        )

    ensure_derived(records)
    candidates = [r for r in records if getattr(r, by) is not None]
    candidates.sort(key=lambda r: getattr(r, by), reverse=True)
    return candidates[:max(n, 0)]
