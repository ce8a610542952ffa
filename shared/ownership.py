"""Decides which bits belong to the signed-in user, by name rather than by account id."""

from __future__ import annotations

from typing import Iterable, List, Optional

from shared.identity import current_user_name, index_accounts, normalize, owner_name
from shared.models import Account, Bit


def is_owned_by_current_user(
    bit: Bit,
    current_user: Optional[Account],
    accounts: Iterable[Account],
) -> bool:
    if current_user is None:
        return False
    mine = normalize(current_user_name(current_user))
    theirs = normalize(owner_name(bit, accounts))
    # unresolved names never match each other
    if not mine or not theirs:
        return False
    return mine == theirs


def my_bits(
    bits: Iterable[Bit],
    current_user: Optional[Account],
    accounts: Iterable[Account],
) -> List[Bit]:
    accounts = index_accounts(accounts)
    return [bit for bit in bits if is_owned_by_current_user(bit, current_user, accounts)]
