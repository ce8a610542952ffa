"""Recomputes every derived view from one snapshot of bits and accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from shared.identity import index_accounts
from shared.leaderboard import rank
from shared.models import Account, Bit, ViewState
from shared.owners import OwnerAggregate, aggregate_by_owner
from shared.ownership import my_bits
from shared.stats import GlobalStats, MyStats, global_stats, my_stats


@dataclass(frozen=True)
class Dashboard:
    view_state: ViewState
    leaderboard: List[Bit]
    my_bits: List[Bit]
    top_by_count: List[OwnerAggregate]
    top_by_average: List[OwnerAggregate]
    my_stats: MyStats
    global_stats: GlobalStats


def build_dashboard(
    bits: Iterable[Bit],
    accounts: Iterable[Account],
    current_user: Optional[Account],
    view_state: ViewState = ViewState(),
) -> Dashboard:
    bits = list(bits)
    accounts = index_accounts(accounts)
    top_by_count, top_by_average = aggregate_by_owner(bits, accounts)
    return Dashboard(
        view_state=view_state,
        leaderboard=rank(bits, view_state.sort_mode),
        my_bits=my_bits(bits, current_user, accounts),
        top_by_count=top_by_count,
        top_by_average=top_by_average,
        my_stats=my_stats(bits, current_user, accounts),
        global_stats=global_stats(bits, accounts),
    )
