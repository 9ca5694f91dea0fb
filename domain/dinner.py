"""Cooking and eating.

Three ways to cook the same food and one way to eat it:

- `proper_cook` starts every cook at once and waits for all of them.
- `incomplete_cook` starts every cook at once and forgets to wait. Kept as a
  warning. What comes back is a list of tasks still on the stove.
- `slow_cook` cooks one item at a time.
- `eat_food` eats in order, each mouthful after the last.

Nothing here retries or cancels. The first error out of the kitchen is the
caller's error.
"""

import asyncio
import logging
from typing import Iterable, Sequence

from domain.kitchen import KITTY_CRUNCH, Kitchen, KitchenLike
from domain.models import Belly, Food


logger = logging.getLogger(__name__)


async def proper_cook(
    foods: Iterable[Food] | None = None,
    *,
    kitchen: KitchenLike | None = None,
) -> tuple[Food, ...]:
    foods = KITTY_CRUNCH if foods is None else foods
    kitchen = Kitchen() if kitchen is None else kitchen
    coros = [kitchen.cook(food) for food in foods]
    cooked = await asyncio.gather(*coros)
    return tuple(cooked)


async def incomplete_cook(
    foods: Iterable[Food] | None = None,
    *,
    kitchen: KitchenLike | None = None,
) -> Sequence[Food]:
    """Broken on purpose. Returns the tasks, not the food they will become.

    Nobody awaits the tasks. They keep cooking after this returns, and when a
    cook fails asyncio reports "Task exception was never retrieved" once the
    task is garbage collected. The caller never sees the error.
    """
    foods = KITTY_CRUNCH if foods is None else foods
    kitchen = Kitchen() if kitchen is None else kitchen

    async def cook_and_log(food: Food) -> Food:
        cooked = await kitchen.cook(food)
        logger.info("cooked food %s", cooked)
        return cooked

    tasks = [asyncio.create_task(cook_and_log(food)) for food in foods]
    return tasks  # pyright: ignore[reportReturnType]


async def slow_cook(
    foods: Iterable[Food] | None = None,
    *,
    kitchen: KitchenLike | None = None,
) -> tuple[Food, ...]:
    foods = KITTY_CRUNCH if foods is None else foods
    kitchen = Kitchen() if kitchen is None else kitchen
    cooked: list[Food] = []
    for food in foods:
        done = await kitchen.cook(food)
        logger.info("cooked food %s", done)
        cooked.append(done)
    return tuple(cooked)


async def eat_food(
    foods: Iterable[Food],
    *,
    kitchen: KitchenLike | None = None,
) -> Belly:
    kitchen = Kitchen() if kitchen is None else kitchen
    belly = Belly(nutrients=0)
    # Each mouthful needs the belly from the one before.
    for food in foods:
        belly = await kitchen.gobble_food(food, belly)
    return belly
