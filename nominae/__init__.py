"""
Fantasy name generator.

# Overview
Names are built from short syllable-like fragments taken alternately from a
table of consonants and a table of vowels. Every fragment records where in a
word it may appear: at the beginning, in the middle, at the end, or any
combination of those. A fragment that can't be placed at the current position
is simply drawn again.

The algorithm is a reimplementation of the Totro fantasy random name
generator created by David A. Wheeler.

## Usage
All randomness is taken from the source passed in, so seeding a
`random.Random` gives reproducible names:

    >>> import random
    >>> from nominae import generate
    >>> name = generate(2, 5, random.Random(0))

The upper bound is exclusive, unless both bounds are equal in which case the
name has exactly that many fragments.

# Legal
- Totro algorithm copyright © David A. Wheeler

Distributed under the Apache License 2.0
"""

from .exceptions import InvalidRange
from .fragments import CONSONANTS, VOWELS, Fragment, Placement
from .totro import NameGenerator, generate, generate_fragments
from .types import RandomSource

__author__ = "Hans W. Uhlig"
__license__ = "Apache-2.0"
__copyright__ = "Copyright (c) 2020 " + __author__

__all__ = (
    "CONSONANTS",
    "VOWELS",
    "Fragment",
    "InvalidRange",
    "NameGenerator",
    "Placement",
    "RandomSource",
    "generate",
    "generate_fragments",
)
