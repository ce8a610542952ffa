"""Leaderboard worker: recomputes rankings and Top Bitters whenever the store changes."""

from __future__ import annotations

import os
import time
from typing import Optional, Tuple

from dotenv import load_dotenv

from shared import storage
from shared.dashboard import Dashboard, build_dashboard
from shared.models import SortMode, ViewState
from shared.stats import format_avg

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "../config/.env"))

Signature = Tuple[Tuple[int, int], ...]


def snapshot_signature() -> Signature:
    """Modification time and size of each collection file."""
    signature = []
    for path in (storage.bits_file(), storage.users_file()):
        if not path.exists():
            signature.append((0, 0))
            continue
        stat = path.stat()
        signature.append((stat.st_mtime_ns, stat.st_size))
    return tuple(signature)


def recompute(sort_mode: SortMode = SortMode.BY_AVERAGE) -> Dashboard:
    return build_dashboard(
        storage.snapshot_bits(),
        storage.snapshot_users(),
        None,
        ViewState(sort_mode=sort_mode),
    )


def report(view: Dashboard) -> None:
    stats = view.global_stats
    print(
        f"[leaderboard] bits={stats.total_bits} users={stats.users} "
        f"avg={format_avg(stats.avg_rating)} sort={view.view_state.sort_mode.value}"
    )
    for idx, bit in enumerate(view.leaderboard, start=1):
        rating = f"{bit.rating:.1f}" if bit.ratings else "No ratings"
        print(f"  {idx}. {bit.name} ({rating}, votes={bit.votes})")
    print("[leaderboard] Top Bitters by count:")
    for idx, group in enumerate(view.top_by_count, start=1):
        print(f"  {idx}. {group.name} bits={group.count} avg={group.avg:.1f}")
    print("[leaderboard] Top Bitters by average:")
    for idx, group in enumerate(view.top_by_average, start=1):
        print(f"  {idx}. {group.name} avg={group.avg:.1f} bits={group.count}")


def poll_once(last: Optional[Signature], sort_mode: SortMode = SortMode.BY_AVERAGE) -> Tuple[Signature, Optional[Dashboard]]:
    """Recompute only when the snapshot changed since ``last``."""
    current = snapshot_signature()
    if current == last:
        return current, None
    view = recompute(sort_mode)
    report(view)
    return current, view


def main() -> None:
    interval = float(os.getenv("POLL_INTERVAL", "2"))
    sort_mode = SortMode(os.getenv("LEADERBOARD_SORT", SortMode.BY_AVERAGE.value))
    last: Optional[Signature] = None
    while True:
        last, _ = poll_once(last, sort_mode)
        time.sleep(interval)


if __name__ == "__main__":
    main()
