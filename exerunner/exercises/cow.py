"""Clone-on-write: borrow a sequence until it has to be changed."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class Cow:
    """Holds borrowed data, copying it into an owned list on first mutation."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self._data: Sequence[int] = data
        self.is_owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    def to_mut(self) -> list[int]:
        """Mutable access to the data, copying it if it is still borrowed."""
        if not self.is_owned:
            self._data = list(self._data)
            self.is_owned = True
        return self._data  # type: ignore[return-value]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self.is_owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if needed."""
    if any(value < 0 for value in cow):
        data = cow.to_mut()
        data[:] = [abs(value) for value in data]
    return cow