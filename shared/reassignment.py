"""Admin reassignment of a bit's owner from a typed username."""

from __future__ import annotations

from typing import Iterable, List, Union

from shared.errors import RejectionReason
from shared.identity import UNKNOWN, normalize
from shared.models import Account, MutationRequest, Rejected


def matching_accounts(username: str, accounts: Iterable[Account]) -> List[Account]:
    wanted = normalize(username)
    return [account for account in accounts if normalize(account.display_name) == wanted]


def resolve_reassignment(
    bit_id: str,
    username: str,
    accounts: Iterable[Account],
    is_admin: bool,
) -> Union[MutationRequest, Rejected]:
    """Turn a free-text username into an owner update for ``bit_id``.

    No matching account assigns the name alone and clears ``authorId``; one match
    links that account; several accounts sharing the normalized name are rejected
    rather than picked from.
    """
    if not is_admin:
        return Rejected(RejectionReason.NOT_AUTHORIZED, "Only administrators can reassign bits.")
    bit_id = (bit_id or "").strip()
    username = (username or "").strip()
    if not bit_id or not username:
        return Rejected(RejectionReason.MISSING_INPUT, "Bit id and username are required.")

    matches = matching_accounts(username, accounts)
    if not matches:
        return MutationRequest(bit_id=bit_id, fields={"author": username, "authorId": ""})
    if len(matches) > 1:
        return Rejected(
            RejectionReason.AMBIGUOUS_USERNAME,
            f"{len(matches)} accounts are named '{username}'.",
        )
    account = matches[0]
    author = account.display_name or account.email or UNKNOWN
    return MutationRequest(bit_id=bit_id, fields={"author": author, "authorId": account.id})
