"""
Online status of players across every configured game server.
"""
from typing import Optional, Dict

from app import config
from app.services.opfw import opfw_client
from app.services.opfw.opfw_client import get_server_name


class PlayerStatus:
    STATUS_ONLINE = "online"
    STATUS_OFFLINE = "offline"
    STATUS_UNAVAILABLE = "unavailable"

    def __init__(self, status: str, server_ip: str = "", server_id: int = 0,
                 character: Optional[int] = None, fake_name: Optional[str] = None):
        self.status = status
        self.server_ip = server_ip
        self.server_id = server_id
        self.server_name = get_server_name(server_ip) if server_ip else None
        self.character = character
        self.fake_name = fake_name

    def is_online(self) -> bool:
        return self.status == self.STATUS_ONLINE

    def to_dict(self) -> Dict:
        return {
            "status": self.status,
            "serverIp": self.server_ip,
            "serverId": self.server_id,
            "serverName": self.server_name,
            "character": self.character,
            "fakeName": self.fake_name,
        }

    def __repr__(self):
        return f"<PlayerStatus {self.status} {self.server_ip}#{self.server_id}>"


def get_all_online_players(use_cache: bool = True) -> Optional[Dict[str, Dict]]:
    """
    Map steam identifier -> {id, character, server, fakeDisconnected, fakeName}
    for every player on any configured server.

    The first server reporting an identifier wins. Returns None as soon as
    one server cannot be queried.
    """
    result = {}
    for server in config.op_fw_servers():
        players = opfw_client.client.fetch_steam_identifiers(server, use_cache)
        if players is None:
            return None

        for steam_identifier, player in players.items():
            if steam_identifier in result:
                continue
            result[steam_identifier] = {
                "id": int(player["source"] or 0),
                "character": player["character"],
                "server": server,
                "fakeDisconnected": player["fakeDisconnected"],
                "fakeName": player["name"] if player["identityOverride"] else None,
            }

    return result


def get_online_status(steam_identifier: str, use_cache: bool = True, true_status: bool = False) -> PlayerStatus:
    """
    Resolve a player's status. Staff hidden behind a fake disconnect or an
    identity override show as offline unless true_status is requested.
    """
    if not config.op_fw_servers():
        return PlayerStatus(PlayerStatus.STATUS_UNAVAILABLE)

    players = get_all_online_players(use_cache)
    if players is None:
        return PlayerStatus(PlayerStatus.STATUS_UNAVAILABLE)

    player = players.get(steam_identifier)
    if player is None:
        return PlayerStatus(PlayerStatus.STATUS_OFFLINE)

    if not true_status and (player["fakeDisconnected"] or player["fakeName"]):
        return PlayerStatus(PlayerStatus.STATUS_OFFLINE)

    return PlayerStatus(
        PlayerStatus.STATUS_ONLINE,
        player["server"],
        player["id"],
        player["character"],
        player["fakeName"],
    )
