"""A shipping package with a weight and sender and recipient countries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Package:
    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents for the package's weight."""
        return self.weight_in_grams * cents_per_gram