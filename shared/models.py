"""Plain records for bits, accounts and the requests the core hands to the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

from shared.errors import RejectionReason


@dataclass(frozen=True)
class Account:
    id: str
    display_name: str = ""
    email: str = ""

    @classmethod
    def from_doc(cls, account_id: str, doc: Mapping[str, Any]) -> "Account":
        return cls(
            id=account_id,
            display_name=doc.get("displayName") or "",
            email=doc.get("email") or "",
        )

    def to_doc(self) -> Dict[str, Any]:
        return {"displayName": self.display_name, "email": self.email}


@dataclass(frozen=True)
class Bit:
    id: str
    name: str
    description: str
    author: str = ""
    author_id: str = ""
    ratings: Mapping[str, int] = field(default_factory=dict)
    rating: float = 0.0

    @property
    def votes(self) -> int:
        return len(self.ratings)

    @classmethod
    def from_doc(cls, bit_id: str, doc: Mapping[str, Any]) -> "Bit":
        """Build a bit from a stored document; missing rating fields read as empty."""
        return cls(
            id=bit_id,
            name=doc.get("name", ""),
            description=doc.get("description", ""),
            author=doc.get("author") or "",
            author_id=doc.get("authorId") or "",
            ratings=dict(doc.get("ratings") or {}),
            rating=float(doc.get("rating") or 0),
        )

    def to_doc(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "author": self.author,
            "authorId": self.author_id,
            "ratings": dict(self.ratings),
            "rating": self.rating,
        }


@dataclass(frozen=True)
class MutationRequest:
    """Fields to write on one bit document. An empty ``bit_id`` means create."""

    bit_id: str
    fields: Dict[str, Any]

    @property
    def is_create(self) -> bool:
        return not self.bit_id


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    detail: str = ""


class SortMode(str, Enum):
    BY_AVERAGE = "average"
    BY_VOTES = "votes"


@dataclass(frozen=True)
class ViewState:
    sort_mode: SortMode = SortMode.BY_AVERAGE
    page: str = "leaderboard"
