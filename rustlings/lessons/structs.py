"""Plain records, tuple-like records, unit values and records with behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour addressed by position: name first, hex code second."""

    name: str
    hex: str


class UnitStruct:
    """A value that carries no data."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("a package must weigh more than zero grams")

    def is_international(self) -> bool:
        """Whether sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents for this package."""
        return cents_per_gram * self.weight_in_grams