"""Fixed demo dataset for walkthroughs and tests."""

from typing import Any, Dict, List

from cba.core.store import TreatmentStore

DEMO_TREATMENTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Control / Current practice",
        "pv_benefits": 0.0,
        "pv_costs": 0.0,
        "notes": "",
    },
    {
        "id": 2,
        "name": "Improved fertiliser program",
        "pv_benefits": 480000.0,
        "pv_costs": 260000.0,
        "notes": "",
    },
    {
        "id": 3,
        "name": "Precision irrigation upgrade",
        "pv_benefits": 620000.0,
        "pv_costs": 320000.0,
        "notes": "",
    },
    {
        "id": 4,
        "name": "Drought-resilient seed and soil package",
        "pv_benefits": 560000.0,
        "pv_costs": 300000.0,
        "notes": "",
    },
]


def load_demo(store: TreatmentStore) -> None:
    """Replace the store contents with the demo treatments."""
    store.replace_all(DEMO_TREATMENTS)
