"""Display-name resolution and the normalized key used for every name comparison."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from shared.models import Account, Bit

UNKNOWN = "Unknown"


def normalize(text: Optional[str]) -> str:
    """Trim surrounding whitespace and lower-case."""
    return (text or "").strip().lower()


def index_accounts(accounts: Iterable[Account]) -> Mapping[str, Account]:
    """Accounts keyed by id; an existing mapping is returned as is."""
    if isinstance(accounts, Mapping):
        return accounts
    return {account.id: account for account in accounts}


def resolve_display_name(
    account_id: Optional[str],
    fallback: Optional[str],
    accounts: Iterable[Account],
) -> str:
    """Return the account's display name, else its email, else ``fallback``, else "Unknown"."""
    account = index_accounts(accounts).get(account_id) if account_id else None
    if account is not None:
        if account.display_name:
            return account.display_name
        if account.email:
            return account.email
    return fallback or UNKNOWN


def current_user_name(user: Optional[Account]) -> str:
    if user is None:
        return ""
    if user.display_name:
        return user.display_name
    if user.email:
        return user.email.split("@")[0]
    return ""


def owner_name(bit: Bit, accounts: Iterable[Account]) -> str:
    explicit = (bit.author or "").strip()
    if explicit:
        return explicit
    return resolve_display_name(bit.author_id, explicit, accounts)
