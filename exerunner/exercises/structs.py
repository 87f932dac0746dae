"""Record types: named fields, positional fields, unit types and orders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type with no fields."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass(frozen=True)
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are derived from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )