"""Deterministic RandomSource implementations for sampler tests."""

from collections.abc import MutableSequence
from typing import Any


class IdentityRandom:
    """Leaves every sequence in its original order."""

    def __init__(self) -> None:
        self.shuffle_calls = 0

    def shuffle(self, x: MutableSequence[Any]) -> None:
        self.shuffle_calls += 1


class ReversingRandom:
    """Reverses every sequence it is asked to shuffle."""

    def shuffle(self, x: MutableSequence[Any]) -> None:
        x.reverse()


class ScriptedRandom:
    """Applies a scripted permutation per call; each order lists source indexes."""

    def __init__(self, orders: list[list[int]]) -> None:
        self._orders = list(orders)

    def shuffle(self, x: MutableSequence[Any]) -> None:
        order = self._orders.pop(0)
        x[:] = [x[i] for i in order]
