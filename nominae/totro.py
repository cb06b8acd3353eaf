"""
Reimplementation of the Totro fantasy name generator by David A. Wheeler,
see https://dwheeler.com/totro.html

Name generation steps:
1. Pick the number of fragments between min and max (or use the fixed length
   if min == max).
2. Flip a coin to decide whether the first fragment is a vowel.
3. Alternately draw fragments from the vowel and consonant tables, redrawing
   any fragment that can not be placed at the current position (beginning,
   middle or end of the word).
"""

import random
from typing import Iterator

from .decorators import TRACE, with_logger
from .exceptions import InvalidRange
from .fragments import CONSONANTS, VOWELS, Fragment, Placement
from .types import RandomSource


def required_placement(idx: int, length: int) -> Placement:
    """
    The placement flag a fragment needs in order to be used at `idx`.

    The first position is checked before the last one, so the only fragment
    of a single fragment word only needs to be allowed at the beginning.
    """
    if idx == 0:
        return Placement.BEGIN
    elif idx == length - 1:
        return Placement.END
    return Placement.MIDDLE


@with_logger
class NameGenerator:
    """
    Generates names from the static Totro fragment tables. All randomness
    comes from the `rng` passed in, so a seeded `random.Random` gives
    reproducible names.

    # Examples
    >>> name = NameGenerator.generate(2, 5, random.Random(0))
    >>> name[0].isupper()
    True
    """

    @classmethod
    def generate(
        cls,
        min_length: int,
        max_length: int,
        rng: RandomSource = random
    ) -> str:
        name = "".join(
            fragment.text
            for fragment in cls.generate_fragments(min_length, max_length, rng)
        )
        # Only the very first letter is changed, the tables are lowercase
        name = name[:1].upper() + name[1:]

        cls._logger.debug("Generated name %r", name)
        return name

    @classmethod
    def generate_fragments(
        cls,
        min_length: int,
        max_length: int,
        rng: RandomSource = random
    ) -> list[Fragment]:
        """
        Select the fragments of a single name in order.

        The selection is rejection sampling without a retry limit. Every
        position class has legal entries in both tables so it terminates.
        """
        if min_length < 0 or min_length > max_length:
            raise InvalidRange(min_length, max_length)

        if min_length < max_length:
            length = rng.randrange(min_length, max_length)
        else:
            length = min_length

        vowel = bool(rng.getrandbits(1))
        cls._logger.log(
            TRACE,
            "Building name of %d fragments starting with a %s",
            length,
            "vowel" if vowel else "consonant"
        )

        fragments = []
        for idx in range(length):
            required = required_placement(idx, length)
            table = VOWELS if vowel else CONSONANTS
            while True:
                fragment = table[rng.randrange(len(table))]
                if fragment.allows(required):
                    break

            fragments.append(fragment)
            vowel = not vowel

        return fragments

    @classmethod
    def generate_many(
        cls,
        count: int,
        min_length: int,
        max_length: int,
        rng: RandomSource = random
    ) -> Iterator[str]:
        """Lazily generate `count` names drawn from the same `rng`"""
        if min_length < 0 or min_length > max_length:
            raise InvalidRange(min_length, max_length)

        return (
            cls.generate(min_length, max_length, rng) for _ in range(count)
        )


def generate(
    min_length: int,
    max_length: int,
    rng: RandomSource = random
) -> str:
    return NameGenerator.generate(min_length, max_length, rng)


def generate_fragments(
    min_length: int,
    max_length: int,
    rng: RandomSource = random
) -> list[Fragment]:
    return NameGenerator.generate_fragments(min_length, max_length, rng)
