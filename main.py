import asyncio
import logging
import sys

from rich import print

import config
from domain.dinner import eat_food, proper_cook
from domain.kitchen import Kitchen, KitchenLike
from domain.models import Belly
from taps import tap


CONFIG = config.Config()


async def main(kitchen: KitchenLike | None = None) -> Belly:
    kitchen = (
        Kitchen(time_scale=CONFIG.cook_time_scale) if kitchen is None else kitchen
    )
    cooked = await proper_cook(kitchen=kitchen)
    belly = await eat_food(cooked, kitchen=kitchen)
    return tap(lambda _: print("All done!"))(belly)


def configure_logging() -> None:
    """Plain messages on stdout, nothing else on the line."""
    logging.basicConfig(
        level=CONFIG.log_level.upper(),
        format="%(message)s",
        stream=sys.stdout,
    )


def run() -> None:
    configure_logging()
    asyncio.run(main(), debug=True if CONFIG.env == config.Env.local else False)


if __name__ == "__main__":
    run()
