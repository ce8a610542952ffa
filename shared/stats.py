"""My Stats and Global Stats panels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from shared.identity import index_accounts, normalize, owner_name
from shared.models import Account, Bit
from shared.ownership import my_bits


@dataclass(frozen=True)
class MyStats:
    bits: int
    avg_rating: Optional[float]
    ratings_given: int


@dataclass(frozen=True)
class GlobalStats:
    total_bits: int
    avg_rating: Optional[float]
    users: int


def _avg_of_ratings(bits: List[Bit]) -> Optional[float]:
    if not bits:
        return None
    return sum(bit.rating for bit in bits) / len(bits)


def my_stats(bits: Iterable[Bit], current_user: Optional[Account], accounts: Iterable[Account]) -> MyStats:
    bits = list(bits)
    mine = my_bits(bits, current_user, accounts)
    given = 0
    if current_user is not None:
        given = sum(1 for bit in bits if bit.ratings.get(current_user.id))
    return MyStats(bits=len(mine), avg_rating=_avg_of_ratings(mine), ratings_given=given)


def global_stats(bits: Iterable[Bit], accounts: Iterable[Account]) -> GlobalStats:
    bits = list(bits)
    accounts = index_accounts(accounts)
    owners = {normalize(owner_name(bit, accounts)) for bit in bits}
    return GlobalStats(total_bits=len(bits), avg_rating=_avg_of_ratings(bits), users=len(owners))


def format_avg(value: Optional[float]) -> str:
    return "—" if value is None else f"{value:.1f}"
