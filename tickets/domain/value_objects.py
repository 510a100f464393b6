"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("AccountId must be an integer")
        if self.value < 1:
            raise ValueError("AccountId must be positive")

    @classmethod
    def from_value(cls, value: "int | AccountId") -> Self:
        if isinstance(value, cls):
            return value
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)
