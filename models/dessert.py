from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


def _require_count(value: int, field_name: str) -> None:
    """Reject anything that is not a non-negative int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{field_name} must be a non-negative integer.")


@dataclass(frozen=True)
class Dessert:
    """
    A catalog entry that can be displayed and sold.

    Fields:
        name: Display name.
        price: Revenue earned per click while this dessert is shown.
        start_production_amount: Desserts sold at which this one is shown.
    """
    name: str
    price: int
    start_production_amount: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("name must be a non-empty string.")
        _require_count(self.price, "price")
        _require_count(self.start_production_amount, "start_production_amount")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict (the JSON catalog format)."""
        return {
            "name": self.name,
            "price": self.price,
            "start_production_amount": self.start_production_amount,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Dessert":
        """
        Deserialize from a dict produced by to_dict().

        start_production_amount defaults to 0 when absent.
        """
        missing = {"name", "price"} - set(d.keys())
        if missing:
            raise ValueError(f"Missing fields: {sorted(missing)}")
        return Dessert(
            name=d["name"],
            price=d["price"],
            start_production_amount=d.get("start_production_amount", 0),
        )


@dataclass(frozen=True)
class DessertUiState:
    """Snapshot of the clicker screen. Replaced, never mutated."""
    revenue: int
    desserts_sold: int
    current_dessert: Dessert

    def __post_init__(self) -> None:
        _require_count(self.revenue, "revenue")
        _require_count(self.desserts_sold, "desserts_sold")
        if not isinstance(self.current_dessert, Dessert):
            raise ValueError("current_dessert must be a Dessert.")
