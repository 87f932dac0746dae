"""Shared behaviour: appending "Bar", licensing information and combined traits."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Return the value with "Bar" appended; strings and lists are supported."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int


@dataclass
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both items report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeBehaviour:
    def some_function(self) -> bool:
        return True


class _OtherBehaviour:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeBehaviour, _OtherBehaviour):
    """A type with both behaviours."""


class OtherStruct(_SomeBehaviour, _OtherBehaviour):
    """Another type with both behaviours."""


def some_func(item: SomeStruct | OtherStruct) -> bool:
    """True when the item's two behaviours both hold."""
    return item.some_function() and item.other_function()