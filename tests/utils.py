class ScriptedRandom:
    """
    A random source that replays predetermined values so that every draw made
    by the generator can be controlled and inspected.

    `randrange` returns the next value from `ranges`, `getrandbits` the next
    value from `bits`. Each call is recorded in `calls`.
    """

    def __init__(self, ranges=(), bits=()):
        self.ranges = list(ranges)
        self.bits = list(bits)
        self.calls = []

    def randrange(self, start, stop=None):
        if stop is None:
            start, stop = 0, start
        self.calls.append(("randrange", start, stop))

        value = self.ranges.pop(0)
        assert start <= value < stop, f"{value} not in [{start}, {stop})"
        return value

    def getrandbits(self, k):
        self.calls.append(("getrandbits", k))

        value = self.bits.pop(0)
        assert 0 <= value < 2 ** k
        return value

    @property
    def exhausted(self) -> bool:
        return not self.ranges and not self.bits
