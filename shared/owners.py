"""Top Bitters: per-owner item counts and mean-of-means ratings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from shared.identity import index_accounts, normalize, owner_name
from shared.models import Account, Bit

TOP_LIMIT = 5


@dataclass
class OwnerAggregate:
    key: str
    name: str
    count: int = 0
    rating_sum: float = 0.0

    @property
    def avg(self) -> float:
        if self.count == 0:
            return 0.0
        return self.rating_sum / self.count


def group_by_owner(bits: Iterable[Bit], accounts: Iterable[Account]) -> List[OwnerAggregate]:
    """Group bits by normalized owner name, in first-seen order."""
    accounts = index_accounts(accounts)
    groups: Dict[str, OwnerAggregate] = {}
    for bit in bits:
        name = owner_name(bit, accounts)
        key = normalize(name)
        group = groups.get(key)
        if group is None:
            group = groups[key] = OwnerAggregate(key=key, name=name.strip())
        group.count += 1
        group.rating_sum += bit.rating
    return list(groups.values())


def aggregate_by_owner(
    bits: Iterable[Bit],
    accounts: Iterable[Account],
    limit: int = TOP_LIMIT,
) -> Tuple[List[OwnerAggregate], List[OwnerAggregate]]:
    """Return ``(top_by_count, top_by_average)``, each truncated to ``limit``."""
    groups = group_by_owner(bits, accounts)
    top_by_count = sorted(groups, key=lambda g: (g.count, g.avg), reverse=True)[:limit]
    rated = [g for g in groups if g.count > 0]
    top_by_average = sorted(rated, key=lambda g: (g.avg, g.count), reverse=True)[:limit]
    return top_by_count, top_by_average
