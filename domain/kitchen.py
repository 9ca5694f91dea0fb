import asyncio
import logging
from typing import Any, Protocol

from domain.models import Belly, Food


logger = logging.getLogger(__name__)


KITTY_CRUNCH: tuple[Food, ...] = (
    Food(name="salmon", nutrients=12, cook_time=0.3),
    Food(name="chicken", nutrients=10, cook_time=0.1),
    Food(name="tuna", nutrients=8, cook_time=0.2),
    Food(name="kibble", nutrients=3, cook_time=0.05),
)


class KitchenLike(Protocol):
    async def cook(self, food: Food) -> Food:
        ...

    async def gobble_food(self, food: Food, belly: Belly) -> Belly:
        ...


class Chew:
    """Hands control back to the loop either side of a mouthful."""

    async def __aenter__(self) -> None:
        await asyncio.sleep(0)

    async def __aexit__(self, *args: Any, **kwargs: Any) -> None:
        await asyncio.sleep(0)


class Kitchen:
    def __init__(self, *, time_scale: float = 1.0) -> None:
        if time_scale < 0:
            raise ValueError(f"Negative time scale: {time_scale}")
        self.time_scale = time_scale

    async def cook(self, food: Food) -> Food:
        if food.cooked:
            raise ValueError(f"Already cooked: {food.name}")
        logger.debug("Cooking %s", food.to_dict())
        await asyncio.sleep(food.cook_time * self.time_scale)
        return food.as_cooked()

    async def gobble_food(self, food: Food, belly: Belly) -> Belly:
        if not food.cooked:
            raise ValueError(f"Refusing raw food: {food.name}")
        async with Chew():
            belly = belly.absorb(food)
        logger.debug("Gobbled %s, belly %s", food.to_dict(), belly.to_dict())
        return belly
