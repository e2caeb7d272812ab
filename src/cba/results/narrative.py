"""Plain-language summary of ranked results."""

from typing import List, Optional, Sequence

from cba.config import ReportConfig
from cba.core.treatment import Treatment
from cba.results.formatting import format_currency, format_ratio
from cba.results.metrics import ensure_derived

EMPTY_PROMPT = "Add at least one treatment to see a summary of the results."


def _figures(record: Treatment, cfg: ReportConfig) -> str:
    npv, benefits, costs = (
        format_currency(v, cfg.currency_symbol, cfg.currency_decimals)
        for v in (record.npv, record.pv_benefits, record.pv_costs)
    )
    return (
        f"{npv}, with present value (PV) benefits of {benefits} "
        f"and PV costs of {costs}."
    )


def _bcr_clause(record: Treatment, cfg: ReportConfig) -> str:
    # Stored value, so prose always matches the table
    if record.bcr is None:
        return ""
    return f" Its benefit-cost ratio (BCR) is {format_ratio(record.bcr, cfg.ratio_decimals)}."


def _bcr_or_placeholder(record: Treatment, cfg: ReportConfig) -> str:
    if record.bcr is None:
        return cfg.missing_ratio_text
    return format_ratio(record.bcr, cfg.ratio_decimals)


def summarize(
    ranked: Sequence[Treatment],
    config: Optional[ReportConfig] = None,
) -> str:
    """Generate a plain-language summary of the ranking.

    Names the highest-NPV treatment and, when there are at least two,
    contrasts it with the lowest-NPV treatment.

    Args:
        ranked: Treatments, already ranked by NPV. Stale records are
            derived first.
        config: Display settings. Uses defaults if None.

    Returns:
        Narrative text, paragraphs separated by a blank line, or the
        fixed prompt when there are no treatments.
    """
    if not ranked:
        return EMPTY_PROMPT

    cfg = config if config is not None else ReportConfig()
    ensure_derived(ranked)
    best = ranked[0]

    paragraphs: List[str] = [
        f"{best.name} has the highest net present value (NPV) at "
        f"{_figures(best, cfg)}{_bcr_clause(best, cfg)}"
    ]

    if len(ranked) > 1:
        worst = ranked[-1]
        paragraphs.append(
            f"{worst.name} has the lowest NPV at {_figures(worst, cfg)}"
            f"{_bcr_clause(worst, cfg)} Compared with {best.name}, its BCR is "
            f"{_bcr_or_placeholder(worst, cfg)} against "
            f"{_bcr_or_placeholder(best, cfg)}."
        )

    return "\n\n".join(paragraphs)
