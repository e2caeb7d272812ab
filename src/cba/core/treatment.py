"""Treatment record type."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def default_name(treatment_id: int) -> str:
    """Display label used when a treatment is left unnamed."""
    return f"Treatment {treatment_id}"


@dataclass
class Treatment:
    """One candidate investment or practice option.

    Inputs are present values supplied by the user. The derived fields
    (npv, bcr, roi) are written only by the metrics engine and are None
    until the record has been derived, or after an input has changed.

    Attributes:
        id: Store-assigned identifier, unique within a session.
        name: Display label.
        pv_benefits: Present value of benefits.
        pv_costs: Present value of costs.
        notes: Optional free text.
        npv: Net present value (derived).
        bcr: Benefit-cost ratio (derived, None without a cost base).
        roi: Return on investment (derived, None without a cost base).
    """

    id: int
    name: str = ""
    pv_benefits: float = 0.0
    pv_costs: float = 0.0
    notes: str = ""

    npv: Optional[float] = field(default=None, init=False)
    bcr: Optional[float] = field(default=None, init=False)
    roi: Optional[float] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            self.name = default_name(self.id)

    @property
    def is_derived(self) -> bool:
        """True once derived fields reflect the current inputs."""
        return self.npv is not None

    def clear_derived(self) -> None:
        """Drop derived values that no longer match the inputs."""
        self.npv = None
        self.bcr = None
        self.roi = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "pv_benefits": self.pv_benefits,
            "pv_costs": self.pv_costs,
            "notes": self.notes,
            "npv": self.npv,
            "bcr": self.bcr,
            "roi": self.roi,
        }
