"""Simple JSON-file backed storage for the bits and users collections."""

from __future__ import annotations

import json
import os
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from shared.errors import MutationFailed
from shared.models import Account, Bit, MutationRequest

# set to override the configured directory
DATA_DIR: Optional[Path] = None
LOCK = threading.Lock()


def data_dir() -> Path:
    """Store directory, read from the environment on every call so config/.env applies."""
    if DATA_DIR is not None:
        return DATA_DIR
    return Path(os.getenv("DATA_DIR", "./data/state"))


def bits_file() -> Path:
    return data_dir() / "bits.json"


def users_file() -> Path:
    return data_dir() / "users.json"


def _ensure_files() -> None:
    data_dir().mkdir(parents=True, exist_ok=True)
    for path in (bits_file(), users_file()):
        if not path.exists():
            path.write_text(json.dumps({}, indent=2))


def _read(path: Path) -> Dict[str, Dict[str, Any]]:
    _ensure_files()
    return json.loads(path.read_text())


def _write(path: Path, docs: Dict[str, Dict[str, Any]]) -> None:
    _ensure_files()
    path.write_text(json.dumps(docs, indent=2))


def load_bits() -> Dict[str, Dict[str, Any]]:
    return _read(bits_file())


def load_users() -> Dict[str, Dict[str, Any]]:
    return _read(users_file())


def snapshot_bits() -> List[Bit]:
    return [Bit.from_doc(bit_id, doc) for bit_id, doc in load_bits().items()]


def snapshot_users() -> List[Account]:
    return [Account.from_doc(user_id, doc) for user_id, doc in load_users().items()]


def get_bit(bit_id: str) -> Optional[Bit]:
    doc = load_bits().get(bit_id)
    if doc is None:
        return None
    return Bit.from_doc(bit_id, doc)


def get_user(user_id: str) -> Optional[Account]:
    doc = load_users().get(user_id)
    if doc is None:
        return None
    return Account.from_doc(user_id, doc)


def save_user(account: Account) -> Account:
    with LOCK:
        users = load_users()
        users[account.id] = account.to_doc()
        _write(users_file(), users)
        return account


def create_bit(fields: Dict[str, Any]) -> str:
    """Store a new bit document and return its id."""
    bit_id = uuid.uuid4().hex
    try:
        with LOCK:
            bits = load_bits()
            bits[bit_id] = dict(fields)
            _write(bits_file(), bits)
    except (OSError, ValueError) as exc:
        raise MutationFailed(exc) from exc
    print(f"[storage] created bit_id={bit_id}")
    return bit_id


def update_bit(bit_id: str, **updates: Any) -> Dict[str, Any]:
    """Overwrite the given fields of one bit; last writer wins."""
    try:
        with LOCK:
            bits = load_bits()
            if bit_id not in bits:
                raise MutationFailed(f"No bit with id '{bit_id}'.")
            bit = bits[bit_id]
            bit.update(updates)
            _write(bits_file(), bits)
    except (OSError, ValueError) as exc:
        raise MutationFailed(exc) from exc
    print(f"[storage] updated bit_id={bit_id} fields={sorted(updates)}")
    return bit


def apply_mutation(request: MutationRequest) -> str:
    """Send a mutation to the store and return the id of the written bit."""
    if request.is_create:
        return create_bit(request.fields)
    update_bit(request.bit_id, **request.fields)
    return request.bit_id


def save_bits(bits: Dict[str, Dict[str, Any]]) -> None:
    """Replace the whole bits collection (used by the seed script)."""
    with LOCK:
        _write(bits_file(), bits)
