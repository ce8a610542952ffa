"""Seeds the JSON store with demo accounts and bits."""

from __future__ import annotations

import json
import os
import sys
from typing import Dict

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from shared import storage
from shared.models import Account
from shared.ratings import mean_rating


def load_fixture(name: str) -> Dict[str, dict]:
    data_path = os.path.join(os.path.dirname(__file__), "..", "data", name)
    with open(data_path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def seed_store() -> None:
    users = load_fixture("mock_users.json")
    for user_id, doc in users.items():
        storage.save_user(Account.from_doc(user_id, doc))

    bits = storage.load_bits()
    for bit_id, doc in load_fixture("mock_bits.json").items():
        ratings = doc.get("ratings", {})
        bits[bit_id] = {**doc, "ratings": ratings, "rating": mean_rating(ratings)}
    storage.save_bits(bits)
    print(f"[seed] Seeded {len(users)} users and {len(bits)} bits into {storage.data_dir()}.")


def main() -> None:
    seed_store()


if __name__ == "__main__":
    main()
