"""
Player resolution.
Fake identities (steam:1100002...) are aliases staff use while playing under
an identity override; they resolve to a snapshot of the real player.
"""
import logging
from typing import Optional, Union, Dict

from sqlalchemy.orm import Session

from app.helpers import cache
from app.resources import character_resource
from app.services import steam_service
from app.services.opfw.player_status import PlayerStatus, get_online_status
from database.models.players.player import Player
from database.models.players.character import Character

logger = logging.getLogger(__name__)

FAKE_PREFIX = "steam:1100002"
REAL_PREFIX = "steam:1100001"


def get_player(db: Session, steam_identifier: str) -> Optional[Player]:
    return db.query(Player).filter(Player.steam_identifier == steam_identifier).first()


def is_fake_identifier(identifier: str) -> bool:
    return identifier.startswith(FAKE_PREFIX)


def resolve_player(db: Session, identifier: str) -> Union[Player, Dict, None]:
    """
    Resolve a route identifier to a Player row, or for fake identities, to a
    cached payload shaped like the player page data.
    """
    if not is_fake_identifier(identifier):
        return get_player(db, identifier)

    steam = identifier.replace(FAKE_PREFIX, REAL_PREFIX, 1)
    key = "fake_" + steam

    status = get_online_status(steam, use_cache=False, true_status=True)

    if status.is_online() and status.fake_name and status.character:
        resolved = get_player(db, steam)
        if resolved is None:
            return None

        characters = db.query(Character).filter(Character.character_id == status.character).all()
        profile_url = steam_service.get_steam_profile_url(steam)

        online = status.to_dict()
        online["fakeName"] = None

        data = {
            "player": {
                "id": resolved.user_id,
                "avatar": None,
                "discord": None,
                "steamIdentifier": identifier,
                "overrideSteam": steam,
                "steam36": steam_service.steam36(identifier),
                "playerName": status.fake_name,
                "playTime": resolved.playtime,
                "lastConnection": resolved.last_connection.isoformat() if resolved.last_connection else None,
                "steamProfileUrl": profile_url + "f" if profile_url else None,
                "isTrusted": False,
                "isDebugger": False,
                "isPanelTrusted": False,
                "isStaff": False,
                "isSuperAdmin": False,
                "isRoot": False,
                "isBanned": False,
                "warnings": 0,
                "ban": None,
                "status": online,
            },
            "characters": [character_resource(c) for c in characters],
            "warnings": [],
            "panelLogs": [],
            "discord": None,
            "kickReason": "",
            "screenshots": [],
            "whitelisted": False,
        }
        cache.write(key, data, 3 * cache.MONTH)
    elif cache.exists(key):
        data = cache.read(key)
        data["player"]["status"]["status"] = PlayerStatus.STATUS_OFFLINE
        data["player"]["status"]["character"] = 0
        cache.write(key, data, 3 * cache.MONTH)

    return cache.read(key)
