"""Ordered, in-memory store of treatment records.

The store owns the single collection of treatments for a session and is
the only place ids are handed out. It is passed explicitly to the metrics
and export functions; nothing in the package keeps a module-level store.

Operations on an unknown id are silent no-ops: the store is the source of
truth for valid ids, so a missing id means the record was already removed.

Example usage:
    from cba.core.store import TreatmentStore
    from cba.results.metrics import derive_all, rank

    store = TreatmentStore()
    store.add(name="Improved fertiliser program", pv_benefits=480000, pv_costs=260000)
    derive_all(store.list())
    best = rank(store.list())[0]
"""

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Union

from cba.core.treatment import Treatment, default_name

logger = logging.getLogger(__name__)

TreatmentInput = Union[Treatment, Mapping[str, Any]]


class TreatmentStore:
    """Holds treatments in insertion order and assigns their ids.

    Ids are monotonic within a session: a removed id is never handed out
    again. Only clear() resets numbering back to 1.
    """

    def __init__(self) -> None:
        self._records: List[Treatment] = []
        self._next_id: int = 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Treatment]:
        return iter(list(self._records))

    def __contains__(self, treatment_id: object) -> bool:
        return any(r.id == treatment_id for r in self._records)

    @property
    def next_id(self) -> int:
        """Id the next add() will assign."""
        return self._next_id

    def add(
        self,
        name: str = "",
        pv_benefits: float = 0.0,
        pv_costs: float = 0.0,
        notes: str = "",
    ) -> int:
        """Append a new treatment.

        Args:
            name: Display label. Blank becomes "Treatment <id>".
            pv_benefits: Present value of benefits.
            pv_costs: Present value of costs.
            notes: Optional free text.

        Returns:
            The id assigned to the new treatment.
        """
        treatment_id = self._next_id
        self._next_id += 1
        record = Treatment(
            id=treatment_id,
            name=name,
            pv_benefits=float(pv_benefits),
            pv_costs=float(pv_costs),
            notes=notes or "",
        )
        self._records.append(record)
        logger.debug(f"Added treatment {treatment_id}: {record.name}")
        return treatment_id

    def get(self, treatment_id: int) -> Optional[Treatment]:
        """Return the treatment with this id, or None."""
        for record in self._records:
            if record.id == treatment_id:
                return record
        return None

    def remove(self, treatment_id: int) -> None:
        """Remove a treatment.

        Note:
            Silently succeeds if the id is not found.
        """
        record = self.get(treatment_id)
        if record is not None:
            self._records.remove(record)
            logger.debug(f"Removed treatment {treatment_id}")

    def update(
        self,
        treatment_id: int,
        *,
        name: Optional[str] = None,
        pv_benefits: Optional[float] = None,
        pv_costs: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Merge the provided fields into an existing treatment.

        Fields left as None are unchanged. Changing either present value
        clears the record's derived metrics until they are derived again.

        Note:
            Silently succeeds if the id is not found.
        """
        record = self.get(treatment_id)
        if record is None:
            return

        if name is not None:
            record.name = name if name.strip() else default_name(record.id)
        if notes is not None:
            record.notes = notes

        inputs_changed = False
        if pv_benefits is not None and float(pv_benefits) != record.pv_benefits:
            record.pv_benefits = float(pv_benefits)
            inputs_changed = True
        if pv_costs is not None and float(pv_costs) != record.pv_costs:
            record.pv_costs = float(pv_costs)
            inputs_changed = True

        if inputs_changed:
            record.clear_derived()
        logger.debug(f"Updated treatment {treatment_id}")

    def clear(self) -> None:
        """Remove every treatment and restart id numbering at 1."""
        self._records = []
        self._next_id = 1
        logger.info("Cleared treatment store")

    def replace_all(self, records: Iterable[TreatmentInput]) -> None:
        """Replace the whole collection with a fixed list.

        Used to load the demo dataset. Each item is a Treatment or a
        mapping with an "id" key plus any of name, pv_benefits, pv_costs
        and notes. The next id becomes one past the largest id supplied.

        Args:
            records: Treatments to load, in the order they should be kept.

        Raises:
            ValueError: If an id is not positive or appears twice. The
                store is left unchanged.
        """
        loaded = []
        seen = set()
        for item in records:
            if isinstance(item, Treatment):
                data = {
                    "id": item.id,
                    "name": item.name,
                    "pv_benefits": item.pv_benefits,
                    "pv_costs": item.pv_costs,
                    "notes": item.notes,
                }
            else:
                data = dict(item)

            treatment_id = int(data["id"])
            if treatment_id < 1:
                raise ValueError(f"Treatment id must be positive, got {treatment_id}")
            if treatment_id in seen:
                raise ValueError(f"Duplicate treatment id: {treatment_id}")
            seen.add(treatment_id)

            loaded.append(
                Treatment(
                    id=treatment_id,
                    name=data.get("name", ""),
                    pv_benefits=float(data.get("pv_benefits", 0.0)),
                    pv_costs=float(data.get("pv_costs", 0.0)),
                    notes=data.get("notes") or "",
                )
            )

        self._records = loaded
        self._next_id = max((r.id for r in loaded), default=0) + 1
        logger.info(f"Loaded {len(loaded)} treatments (next id {self._next_id})")

    def list(self) -> List[Treatment]:
        """Treatments in insertion order.

        Returns a new list; the records themselves are shared.
        """
        return list(self._records)
