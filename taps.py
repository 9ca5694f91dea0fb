"""Taps for pipelines.

A tap runs a side effect on whatever flows past and lets it carry on
untouched. Logging is the usual use.

    belly = tap(lambda b: print("ate", b.nutrients))(belly)
"""

from typing import Callable, TypeVar

A = TypeVar("A")


def tap_value(f: Callable[[A], object], a: A) -> A:
    f(a)
    return a


def tap(f: Callable[[A], object]) -> Callable[[A], A]:
    def tapped(a: A) -> A:
        f(a)
        return a

    return tapped
