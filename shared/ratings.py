"""Per-rater score updates and the mean rating stored alongside them."""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from shared.models import Bit, MutationRequest


def mean_rating(ratings: Mapping[str, int]) -> float:
    """Arithmetic mean of the scores; 0.0 when nobody has rated yet."""
    if not ratings:
        return 0.0
    return sum(ratings.values()) / len(ratings)


def apply_rating(bit: Bit, rater_id: str, score: int) -> Tuple[Dict[str, int], float]:
    """Return the bit's ratings with ``rater_id`` set to ``score`` and their new mean.

    ``score`` must be an int in 1..5; callers validate it. A rater holds a single
    entry, so rating again replaces the previous score instead of adding one.
    """
    new_ratings = dict(bit.ratings or {})
    new_ratings[rater_id] = score
    return new_ratings, mean_rating(new_ratings)


def rating_mutation(bit: Bit, rater_id: str, score: int) -> MutationRequest:
    new_ratings, new_mean = apply_rating(bit, rater_id, score)
    return MutationRequest(bit_id=bit.id, fields={"ratings": new_ratings, "rating": new_mean})


def my_score(bit: Bit, user_id: str) -> int:
    """Score ``user_id`` gave this bit, 0 when unrated."""
    return int((bit.ratings or {}).get(user_id, 0))
