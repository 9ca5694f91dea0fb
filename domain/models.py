from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Food:
    name: str
    nutrients: int = 0
    cook_time: float = 0.0
    cooked: bool = False

    def as_cooked(self) -> "Food":
        return replace(self, cooked=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "nutrients": self.nutrients,
            "cook_time": self.cook_time,
            "cooked": self.cooked,
        }

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Belly:
    """Running total of what has been eaten."""

    nutrients: int = 0

    def absorb(self, food: Food) -> "Belly":
        return Belly(nutrients=self.nutrients + food.nutrients)

    def to_dict(self) -> dict[str, int]:
        return {"nutrients": self.nutrients}
