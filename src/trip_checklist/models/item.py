"""Packable entries within a trip."""

from dataclasses import dataclass, field

from trip_checklist.models.category import TripCategory, new_id
from trip_checklist.models.constants import Importance


@dataclass(slots=True)
class TripItem:
    """A single packable entry with checked/unchecked state.

    ``category`` is a snapshot of the category at the time the item was
    added; later edits to the category definition are not propagated.
    """
    title: str
    category: TripCategory
    note: str | None = None
    importance: Importance = Importance.MEDIUM
    weight_kg: float | None = None   # per unit
    quantity: int = 1                # always >= 1
    is_checked: bool = False
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        self.normalize()

    def normalize(self) -> None:
        """Clamp quantity to >= 1 and weight to >= 0."""
        self.quantity = max(1, int(self.quantity))
        if self.weight_kg is not None and self.weight_kg < 0:
            self.weight_kg = 0.0

    @property
    def has_note(self) -> bool:
        return bool(self.note)

    @property
    def line_weight_kg(self) -> float:
        """Weight of all units of this item."""
        return (self.weight_kg or 0.0) * max(1, self.quantity)
