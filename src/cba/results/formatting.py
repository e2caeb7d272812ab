"""Display formatting for ranked results.

Rounding happens here and only here: stored metrics stay exact, and the
table and summary cards show currency-like values with 0 decimals and
ratios with 2, with thousands grouping. Absent or non-finite values
render as an empty string.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from cba.config import ReportConfig
from cba.core.treatment import Treatment
from cba.results.metrics import ensure_derived

TABLE_COLUMNS = [
    "Rank",
    "Treatment",
    "PV benefits",
    "PV costs",
    "NPV",
    "BCR",
    "ROI",
    "Notes",
]


def format_currency(value: Optional[float], symbol: str = "", decimals: int = 0) -> str:
    """Format a value as currency string.

    Args:
        value: The monetary value.
        symbol: Currency symbol (default none).
        decimals: Decimal places (default 0 for whole numbers).

    Returns:
        Formatted currency string (e.g., "$1,234" or "-$1,234"), or ""
        for None, NaN and infinities.
    """
    if value is None or not math.isfinite(value):
        return ""
    sign = "-" if value < 0 and round(abs(value), decimals) != 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_ratio(value: Optional[float], decimals: int = 2) -> str:
    """Format a ratio (BCR, ROI) with fixed decimals, "" when absent."""
    if value is None or not math.isfinite(value):
        return ""
    return f"{value:,.{decimals}f}"


@dataclass
class SummaryCard:
    """Display-ready summary of one ranked treatment."""

    rank: int
    treatment_id: int
    name: str
    pv_benefits: str
    pv_costs: str
    npv: str
    bcr: str
    roi: str
    notes: str
    npv_positive: bool


def _config(config: Optional[ReportConfig]) -> ReportConfig:
    return config if config is not None else ReportConfig()


def summary_cards(
    ranked: Sequence[Treatment],
    config: Optional[ReportConfig] = None,
) -> List[SummaryCard]:
    """Build one card per treatment, in ranked order.

    Args:
        ranked: Treatments, already ranked. Stale records are derived first.
        config: Display settings. Uses defaults if None.

    Returns:
        List of SummaryCard, rank 1 first.
    """
    cfg = _config(config)
    ensure_derived(ranked)
    cards = []
    for position, record in enumerate(ranked, start=1):
        cards.append(
            SummaryCard(
                rank=position,
                treatment_id=record.id,
                name=record.name,
                pv_benefits=format_currency(
                    record.pv_benefits, cfg.currency_symbol, cfg.currency_decimals
                ),
                pv_costs=format_currency(
                    record.pv_costs, cfg.currency_symbol, cfg.currency_decimals
                ),
                npv=format_currency(record.npv, cfg.currency_symbol, cfg.currency_decimals),
                bcr=format_ratio(record.bcr, cfg.ratio_decimals),
                roi=format_ratio(record.roi, cfg.ratio_decimals),
                notes=record.notes,
                npv_positive=record.npv is not None and record.npv >= 0,
            )
        )
    return cards


def results_table(
    ranked: Sequence[Treatment],
    config: Optional[ReportConfig] = None,
) -> pd.DataFrame:
    """Ranked results as a display table.

    Args:
        ranked: Treatments, already ranked. Stale records are derived first.
        config: Display settings. Uses defaults if None.

    Returns:
        DataFrame with TABLE_COLUMNS, one row per treatment, every cell
        a formatted string except Rank.
    """
    rows = [
        {
            "Rank": card.rank,
            "Treatment": card.name,
            "PV benefits": card.pv_benefits,
            "PV costs": card.pv_costs,
            "NPV": card.npv,
            "BCR": card.bcr,
            "ROI": card.roi,
            "Notes": card.notes,
        }
        for card in summary_cards(ranked, config)
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
