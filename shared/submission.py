"""Builds the create request for a new bit."""

from __future__ import annotations

from typing import Optional, Union

from shared.errors import RejectionReason
from shared.identity import current_user_name
from shared.models import Account, MutationRequest, Rejected


def new_bit_request(
    name: str,
    description: str,
    current_user: Optional[Account],
) -> Union[MutationRequest, Rejected]:
    if current_user is None:
        return Rejected(RejectionReason.MISSING_INPUT, "Sign in to add a bit.")
    name = (name or "").strip()
    description = (description or "").strip()
    if not name or not description:
        return Rejected(RejectionReason.MISSING_INPUT, "A bit needs a name and a description.")
    return MutationRequest(
        bit_id="",
        fields={
            "name": name,
            "description": description,
            "author": current_user_name(current_user),
            "authorId": current_user.id,
            "rating": 0,
            "ratings": {},
        },
    )
