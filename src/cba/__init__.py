"""
Treatment CBA - cost-benefit comparison of treatment options.

Derives NPV, benefit-cost ratio and ROI from present-value inputs,
ranks treatments and renders tables, narratives and CSV exports.
"""

__version__ = "0.1.0"

from cba.core.store import TreatmentStore
from cba.core.treatment import Treatment
from cba.results.metrics import derive, derive_all, rank

__all__ = ["Treatment", "TreatmentStore", "derive", "derive_all", "rank", "__version__"]
