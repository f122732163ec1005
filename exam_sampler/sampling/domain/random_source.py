"""RandomSource Protocol: the shuffling the sampler depends on."""

from collections.abc import MutableSequence
from typing import Any, Protocol


class RandomSource(Protocol):
    """Shuffles a sequence in place. ``random.Random`` satisfies this structurally."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...
