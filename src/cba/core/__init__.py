"""Core data layer: treatment records, the record store, input coercion."""

from cba.core.demo import DEMO_TREATMENTS, load_demo
from cba.core.parsing import parse_number
from cba.core.store import TreatmentStore
from cba.core.treatment import Treatment, default_name

__all__ = [
    "DEMO_TREATMENTS",
    "Treatment",
    "TreatmentStore",
    "default_name",
    "load_demo",
    "parse_number",
]
