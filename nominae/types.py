"""
General type definitions
"""

from typing import Optional, Protocol


class RandomSource(Protocol):
    """
    The subset of `random.Random` used by the generator. The `random` module
    itself, `random.Random` and `random.SystemRandom` all satisfy it.
    """

    def randrange(self, start: int, stop: Optional[int] = None) -> int: ...

    def getrandbits(self, k: int) -> int: ...
