"""
Process-local cache with expiry.
Shared by every request handled by this worker; entries expire lazily.
"""
import threading
import time
from typing import Any, Dict, Iterable, Tuple

from sqlalchemy.orm import Session

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY

NAME_MAP_TTL = 6 * HOUR

_store: Dict[str, Tuple[float, Any]] = {}
_lock = threading.Lock()


def _get_entry(key: str):
    # Caller must hold _lock
    entry = _store.get(key)
    if entry is None:
        return None
    expires_at, _ = entry
    if expires_at <= time.monotonic():
        del _store[key]
        return None
    return entry


def exists(key: str) -> bool:
    with _lock:
        return _get_entry(key) is not None


def read(key: str, default: Any = None) -> Any:
    with _lock:
        entry = _get_entry(key)
        return entry[1] if entry else default


def write(key: str, value: Any, ttl: float):
    with _lock:
        _store[key] = (time.monotonic() + ttl, value)


def forget(key: str):
    with _lock:
        _store.pop(key, None)


def clear():
    with _lock:
        _store.clear()


def load_steam_player_name_map(db: Session, identifiers: Iterable[str]) -> Dict[str, str]:
    """
    Map steam identifiers to player names.
    Only identifiers without a cached name are loaded, in a single query.
    """
    from database.models.players.player import Player

    result = {}
    missing = []
    for identifier in dict.fromkeys(i for i in identifiers if i):
        name = read("name_" + identifier)
        if name is None:
            missing.append(identifier)
        else:
            result[identifier] = name

    if missing:
        rows = db.query(Player.steam_identifier, Player.player_name) \
                 .filter(Player.steam_identifier.in_(missing)) \
                 .all()
        for steam_identifier, player_name in rows:
            write("name_" + steam_identifier, player_name, NAME_MAP_TTL)
            result[steam_identifier] = player_name

    return result
