import dataclasses
import logging

import pytest

from domain.kitchen import KITTY_CRUNCH, Kitchen
from domain.models import Belly, Food


def test_kitty_crunch_is_raw() -> None:
    assert KITTY_CRUNCH
    assert not any(food.cooked for food in KITTY_CRUNCH)
    assert len({food.cook_time for food in KITTY_CRUNCH}) == len(KITTY_CRUNCH)


def test_food_is_immutable() -> None:
    food = Food(name="egg")
    with pytest.raises(dataclasses.FrozenInstanceError):
        food.cooked = True  # pyright: ignore[reportAttributeAccessIssue]
    cooked = food.as_cooked()
    assert cooked is not food
    assert not food.cooked
    assert cooked.to_dict() == {
        "name": "egg",
        "nutrients": 0,
        "cook_time": 0.0,
        "cooked": True,
    }


def test_belly_absorb() -> None:
    belly = Belly()
    fuller = belly.absorb(Food(name="egg", nutrients=5))
    assert belly.to_dict() == {"nutrients": 0}
    assert fuller.to_dict() == {"nutrients": 5}


@pytest.mark.asyncio
async def test_cook() -> None:
    food = Food(name="egg", nutrients=5, cook_time=10)
    got = await Kitchen(time_scale=0).cook(food)
    assert got == Food(name="egg", nutrients=5, cook_time=10, cooked=True)


@pytest.mark.asyncio
async def test_cook_twice() -> None:
    kitchen = Kitchen(time_scale=0)
    cooked = await kitchen.cook(Food(name="egg"))
    with pytest.raises(ValueError, match="egg"):
        await kitchen.cook(cooked)


@pytest.mark.asyncio
async def test_gobble_food() -> None:
    kitchen = Kitchen(time_scale=0)
    belly = await kitchen.gobble_food(
        Food(name="egg", nutrients=5, cooked=True), Belly(nutrients=2)
    )
    assert belly == Belly(nutrients=7)


@pytest.mark.asyncio
async def test_gobble_raw_food() -> None:
    with pytest.raises(ValueError, match="raw"):
        await Kitchen().gobble_food(Food(name="egg", nutrients=5), Belly())


def test_negative_time_scale() -> None:
    with pytest.raises(ValueError):
        Kitchen(time_scale=-1)


@pytest.mark.asyncio
async def test_kitchen_logs_food(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="domain.kitchen")
    kitchen = Kitchen(time_scale=0)
    cooked = await kitchen.cook(Food(name="egg", nutrients=5))
    await kitchen.gobble_food(cooked, Belly())
    assert [r.getMessage() for r in caplog.records] == [
        "Cooking {'name': 'egg', 'nutrients': 5, 'cook_time': 0.0, 'cooked': False}",
        (
            "Gobbled {'name': 'egg', 'nutrients': 5, 'cook_time': 0.0, 'cooked': True}"
            ", belly {'nutrients': 5}"
        ),
    ]
