"""
Fragment tables for the Totro name generator

Each table is an ordered tuple of `Fragment`s. Entries are repeated on
purpose: the generator samples indices uniformly, so more copies of a
fragment means it is picked more often.
"""

from enum import IntFlag, unique
from typing import NamedTuple


@unique
class Placement(IntFlag):
    """Positions in a word where a fragment may be placed"""

    NONE = 0
    END = 1
    MIDDLE = 2
    BEGIN = 4


NOT_END = Placement.BEGIN | Placement.MIDDLE
NOT_MIDDLE = Placement.BEGIN | Placement.END
NOT_BEGIN = Placement.MIDDLE | Placement.END
ANYWHERE = Placement.BEGIN | Placement.MIDDLE | Placement.END


class Fragment(NamedTuple):
    text: str
    placement: Placement

    def allows(self, placement: Placement) -> bool:
        return placement in self.placement


def _table(*entries: tuple[str, Placement]) -> tuple[Fragment, ...]:
    return tuple(Fragment(text, placement) for text, placement in entries)


CONSONANTS = _table(
    # Single letters
    ("b", ANYWHERE), ("c", ANYWHERE), ("d", ANYWHERE), ("f", ANYWHERE),
    ("g", ANYWHERE), ("h", ANYWHERE), ("j", ANYWHERE), ("k", ANYWHERE),
    ("l", ANYWHERE), ("m", ANYWHERE), ("n", ANYWHERE), ("p", ANYWHERE),
    ("qu", NOT_END), ("r", ANYWHERE), ("s", ANYWHERE), ("t", ANYWHERE),
    ("v", ANYWHERE), ("w", ANYWHERE), ("x", ANYWHERE), ("y", ANYWHERE),
    ("z", ANYWHERE),
    ("sc", ANYWHERE),
    # Blends
    ("ch", ANYWHERE), ("gh", ANYWHERE), ("ph", ANYWHERE), ("sh", ANYWHERE),
    ("th", ANYWHERE), ("wh", NOT_END), ("ck", NOT_MIDDLE), ("nk", NOT_MIDDLE),
    ("rk", NOT_MIDDLE), ("sk", ANYWHERE), ("wk", Placement.NONE),
    ("cl", NOT_END), ("fl", NOT_END), ("gl", NOT_END), ("kl", NOT_END),
    ("ll", NOT_END), ("pl", NOT_END), ("sl", NOT_END),
    ("br", NOT_END), ("cr", NOT_END), ("dr", NOT_END), ("fr", NOT_END),
    ("gr", NOT_END), ("kr", NOT_END), ("pr", NOT_END), ("sr", NOT_END),
    ("tr", NOT_END),
    ("ss", NOT_MIDDLE),
    ("st", ANYWHERE),
    ("str", NOT_END),
    # Extra copies of the common letters
    ("b", ANYWHERE), ("c", ANYWHERE), ("d", ANYWHERE), ("f", ANYWHERE),
    ("g", ANYWHERE), ("h", ANYWHERE), ("j", ANYWHERE), ("k", ANYWHERE),
    ("l", ANYWHERE), ("m", ANYWHERE), ("n", ANYWHERE), ("p", ANYWHERE),
    ("r", ANYWHERE), ("s", ANYWHERE), ("t", ANYWHERE), ("v", ANYWHERE),
    ("w", ANYWHERE), ("b", ANYWHERE), ("c", ANYWHERE), ("d", ANYWHERE),
    ("f", ANYWHERE), ("g", ANYWHERE), ("h", ANYWHERE), ("j", ANYWHERE),
    ("k", ANYWHERE), ("l", ANYWHERE), ("m", ANYWHERE), ("n", ANYWHERE),
    ("p", ANYWHERE), ("r", ANYWHERE), ("s", ANYWHERE), ("t", ANYWHERE),
    ("v", ANYWHERE), ("w", ANYWHERE), ("br", NOT_END), ("dr", NOT_END),
    ("fr", NOT_END), ("gr", NOT_END), ("kr", NOT_END),
)

VOWELS = _table(
    *(
        (letter, ANYWHERE)
        for _ in range(12)
        for letter in ("a", "e", "i", "o", "u")
    ),
    # Blends
    ("aa", ANYWHERE), ("ae", ANYWHERE), ("ai", ANYWHERE), ("ao", ANYWHERE),
    ("au", ANYWHERE), ("ea", ANYWHERE), ("ee", ANYWHERE), ("ei", ANYWHERE),
    ("eo", ANYWHERE), ("eu", ANYWHERE), ("ia", ANYWHERE), ("ie", ANYWHERE),
    ("ii", ANYWHERE), ("io", ANYWHERE), ("iu", ANYWHERE), ("oa", ANYWHERE),
    ("oe", ANYWHERE), ("oi", ANYWHERE), ("oo", ANYWHERE), ("ou", ANYWHERE),
    ("eau", ANYWHERE), ("'", NOT_BEGIN), ("y", ANYWHERE),
)
