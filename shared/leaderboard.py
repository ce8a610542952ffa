"""Orders bits for the two leaderboard views."""

from __future__ import annotations

from typing import Iterable, List

from shared.models import Bit, SortMode


def rank(bits: Iterable[Bit], mode: SortMode = SortMode.BY_AVERAGE) -> List[Bit]:
    """Return a new list of bits ordered for ``mode``.

    by average: rating desc, then vote count desc.
    by votes: vote count desc, then rating desc.
    Bits equal on both keys keep their input order (``sorted`` is stable).
    """
    mode = SortMode(mode)
    if mode is SortMode.BY_VOTES:
        key = lambda bit: (bit.votes, bit.rating)
    else:
        key = lambda bit: (bit.rating, bit.votes)
    return sorted(bits, key=key, reverse=True)
