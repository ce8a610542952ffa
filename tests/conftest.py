import sys
from pathlib import Path

import pytest

# Add project root to path
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root))

from shared import storage
from shared.models import Account, Bit


@pytest.fixture
def accounts():
    return [
        Account(id="u-amy", display_name="Amy", email="amy@bithub.dev"),
        Account(id="u-bo", display_name="Bo", email="bo@bithub.dev"),
        Account(id="u-cass", display_name="", email="cass@bithub.dev"),
    ]


def make_bit(bit_id="b1", ratings=None, rating=None, author="", author_id="", name=None):
    ratings = dict(ratings or {})
    if rating is None:
        rating = sum(ratings.values()) / len(ratings) if ratings else 0.0
    return Bit(
        id=bit_id,
        name=name or f"Bit {bit_id}",
        description="desc",
        author=author,
        author_id=author_id,
        ratings=ratings,
        rating=rating,
    )


@pytest.fixture
def store(tmp_path, monkeypatch):
    monkeypatch.setattr(storage, "DATA_DIR", tmp_path / "state")
    return storage
