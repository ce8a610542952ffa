"""FastAPI entrypoint for the BitHub rating catalog."""

from __future__ import annotations
import os
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from dotenv import load_dotenv

from shared import storage
from shared.dashboard import build_dashboard
from shared.errors import MutationFailed, RejectionReason
from shared.identity import index_accounts, owner_name
from shared.leaderboard import rank
from shared.models import Account, Bit, MutationRequest, Rejected, SortMode, ViewState
from shared.owners import OwnerAggregate, aggregate_by_owner
from shared.ownership import is_owned_by_current_user
from shared.ratings import my_score, rating_mutation
from shared.reassignment import resolve_reassignment
from shared.stats import GlobalStats, MyStats
from shared.submission import new_bit_request

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "../config/.env"))

app = FastAPI(title="BitHub API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

REJECTION_STATUS = {
    RejectionReason.NOT_AUTHORIZED: 403,
    RejectionReason.MISSING_INPUT: 422,
    RejectionReason.AMBIGUOUS_USERNAME: 409,
}


class BitCreateRequest(BaseModel):
    user_id: str
    name: str = ""
    description: str = ""


class RatingRequest(BaseModel):
    user_id: str
    score: int = Field(..., ge=1, le=5)


class ReassignRequest(BaseModel):
    user_id: str
    username: str = ""


class BitEntry(BaseModel):
    id: str
    name: str
    description: str
    author: str
    author_id: str
    owner: str
    rating: float
    votes: int
    my_score: int = 0
    owned: bool = False


class MutationResponse(BaseModel):
    bit_id: str
    fields: dict


class OwnerEntry(BaseModel):
    name: str
    count: int
    avg: float


class TopBittersResponse(BaseModel):
    top_by_count: List[OwnerEntry]
    top_by_average: List[OwnerEntry]


class MyStatsPayload(BaseModel):
    bits: int
    avg_rating: Optional[float] = None
    ratings_given: int


class GlobalStatsPayload(BaseModel):
    total_bits: int
    avg_rating: Optional[float] = None
    users: int


class DashboardResponse(BaseModel):
    sort: SortMode
    leaderboard: List[BitEntry]
    my_bits: List[BitEntry]
    top_by_count: List[OwnerEntry]
    top_by_average: List[OwnerEntry]
    my_stats: MyStatsPayload
    global_stats: GlobalStatsPayload


class AccountEntry(BaseModel):
    id: str
    display_name: str
    email: str


def admin_user_ids() -> set[str]:
    raw = os.getenv("ADMIN_USER_IDS", "")
    return {part.strip() for part in raw.split(",") if part.strip()}


def current_user(user_id: Optional[str], accounts: dict) -> Optional[Account]:
    if not user_id:
        return None
    return accounts.get(user_id)


def require_user(user_id: str, accounts: dict) -> Account:
    user = current_user(user_id, accounts)
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user.")
    return user


def to_entry(bit: Bit, user: Optional[Account], accounts: dict) -> BitEntry:
    return BitEntry(
        id=bit.id,
        name=bit.name,
        description=bit.description,
        author=bit.author,
        author_id=bit.author_id,
        owner=owner_name(bit, accounts),
        rating=bit.rating,
        votes=bit.votes,
        my_score=my_score(bit, user.id) if user else 0,
        owned=is_owned_by_current_user(bit, user, accounts),
    )


def to_owner(group: OwnerAggregate) -> OwnerEntry:
    return OwnerEntry(name=group.name, count=group.count, avg=round(group.avg, 3))


def submit(result: MutationRequest | Rejected) -> MutationResponse:
    """Raise for a rejected request, otherwise hand the mutation to the store."""
    if isinstance(result, Rejected):
        print(f"[bits] rejected reason={result.reason.value} detail={result.detail}")
        raise HTTPException(status_code=REJECTION_STATUS[result.reason], detail=result.reason.value)
    try:
        bit_id = storage.apply_mutation(result)
    except MutationFailed as exc:
        print(f"[bits] mutation failed: {exc}")
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return MutationResponse(bit_id=bit_id, fields=result.fields)


@app.get("/bits", response_model=List[BitEntry])
async def list_bits(user_id: Optional[str] = None, sort: SortMode = SortMode.BY_AVERAGE) -> List[BitEntry]:
    """Leaderboard ordered by average rating or by vote count."""
    accounts = index_accounts(storage.snapshot_users())
    user = current_user(user_id, accounts)
    return [to_entry(bit, user, accounts) for bit in rank(storage.snapshot_bits(), sort)]


@app.post("/bits", response_model=MutationResponse)
async def create_bit(request: BitCreateRequest) -> MutationResponse:
    accounts = index_accounts(storage.snapshot_users())
    user = require_user(request.user_id, accounts)
    print(f"[bits] create by user_id={user.id}: {request.name}")
    return submit(new_bit_request(request.name, request.description, user))


@app.post("/bits/{bit_id}/ratings", response_model=MutationResponse)
async def rate_bit(bit_id: str, request: RatingRequest) -> MutationResponse:
    accounts = index_accounts(storage.snapshot_users())
    user = require_user(request.user_id, accounts)
    bit = storage.get_bit(bit_id)
    if bit is None:
        raise HTTPException(status_code=404, detail="Bit not found.")
    print(f"[bits] rate bit_id={bit_id} user_id={user.id} score={request.score}")
    return submit(rating_mutation(bit, user.id, request.score))


@app.post("/bits/{bit_id}/owner", response_model=MutationResponse)
async def reassign_bit(bit_id: str, request: ReassignRequest) -> MutationResponse:
    """Admin-only: credit a bit to another username."""
    is_admin = request.user_id in admin_user_ids()
    print(f"[bits] reassign bit_id={bit_id} to '{request.username}' admin={is_admin}")
    result = resolve_reassignment(bit_id, request.username, storage.snapshot_users(), is_admin)
    if isinstance(result, MutationRequest) and storage.get_bit(result.bit_id) is None:
        raise HTTPException(status_code=404, detail="Bit not found.")
    return submit(result)


@app.get("/owners/top", response_model=TopBittersResponse)
async def top_bitters() -> TopBittersResponse:
    """Get top bit owners by count and by average rating."""
    top_by_count, top_by_average = aggregate_by_owner(storage.snapshot_bits(), storage.snapshot_users())
    return TopBittersResponse(
        top_by_count=[to_owner(group) for group in top_by_count],
        top_by_average=[to_owner(group) for group in top_by_average],
    )


@app.get("/dashboard", response_model=DashboardResponse)
async def dashboard(user_id: Optional[str] = None, sort: SortMode = SortMode.BY_AVERAGE) -> DashboardResponse:
    accounts = index_accounts(storage.snapshot_users())
    user = current_user(user_id, accounts)
    view = build_dashboard(storage.snapshot_bits(), accounts, user, ViewState(sort_mode=sort))
    mine: MyStats = view.my_stats
    overall: GlobalStats = view.global_stats
    return DashboardResponse(
        sort=view.view_state.sort_mode,
        leaderboard=[to_entry(bit, user, accounts) for bit in view.leaderboard],
        my_bits=[to_entry(bit, user, accounts) for bit in view.my_bits],
        top_by_count=[to_owner(group) for group in view.top_by_count],
        top_by_average=[to_owner(group) for group in view.top_by_average],
        my_stats=MyStatsPayload(bits=mine.bits, avg_rating=mine.avg_rating, ratings_given=mine.ratings_given),
        global_stats=GlobalStatsPayload(
            total_bits=overall.total_bits, avg_rating=overall.avg_rating, users=overall.users
        ),
    )


@app.get("/users", response_model=List[AccountEntry])
async def list_users() -> List[AccountEntry]:
    return [
        AccountEntry(id=account.id, display_name=account.display_name, email=account.email)
        for account in storage.snapshot_users()
    ]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
