"""
Steam identity helpers.
Converts `steam:<hex>` identifiers to SteamID64 values, renders invite codes
and looks up public profile data through the Steam Web API.
"""
import hashlib
import logging
from typing import Optional, Dict

import requests

from app import config
from app.helpers import cache

logger = logging.getLogger(__name__)

STEAM_INVITE_URL = "http://s.team/p/"
STEAM_SUMMARIES_URL = "https://api.steampowered.com/ISteamUser/GetPlayerSummaries/v2/"
BLANK_AVATAR_URL = "https://cdn.pixabay.com/photo/2015/10/05/22/37/blank-profile-picture-973460_960_720.png"

ACCOUNT_TYPE_INVALID = 0
ACCOUNT_TYPE_INDIVIDUAL = 1

_INVITE_DICTIONARY = str.maketrans("0123456789abcdef", "bcdfghjkmnpqrtvw")
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def get_steam_id(identifier: str) -> Optional[int]:
    """Resolve the SteamID64 behind a `steam:` identifier, or None."""
    if not identifier or "steam:" not in identifier:
        return None
    try:
        steam_id = int(identifier.split("steam:")[1], 16)
    except ValueError:
        return None
    return steam_id or None


def account_id(steam_id: int) -> int:
    return steam_id & 0xFFFFFFFF


def account_type(steam_id: int) -> int:
    return (steam_id >> 52) & 0xF


def render_steam_invite(steam_id: int) -> str:
    """
    Render the short invite code used by s.team/p/ links.

    Raises:
        ValueError: For account types other than individual/invalid.
    """
    if account_type(steam_id) not in (ACCOUNT_TYPE_INVALID, ACCOUNT_TYPE_INDIVIDUAL):
        raise ValueError("Invite codes are only supported for individual accounts")

    code = format(account_id(steam_id), "x").translate(_INVITE_DICTIONARY)
    if len(code) > 3:
        middle = len(code) // 2
        code = code[:middle] + "-" + code[middle:]
    return code


def get_steam_profile_url(steam_identifier: str) -> Optional[str]:
    steam_id = get_steam_id(steam_identifier)
    if steam_id is None:
        return None
    try:
        return STEAM_INVITE_URL + render_steam_invite(steam_id)
    except ValueError:
        return None


def steam36(identifier: str) -> Optional[str]:
    """Base 36 rendering of the identifier's hex part, or None if it isn't hex."""
    try:
        value = int(identifier.replace("steam:", "", 1), 16)
    except ValueError:
        return None
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def get_steam_user(steam_identifier: str) -> Optional[Dict]:
    """
    Fetch the public Steam profile summary, cached for a day.
    Returns None when no API key is configured or the lookup fails.
    """
    steam_id = get_steam_id(steam_identifier)
    if steam_id is None:
        return None

    key = "steam_user_" + hashlib.md5(str(steam_id).encode()).hexdigest()
    if cache.exists(key):
        return cache.read(key, {})

    api_key = config.steam_api_key()
    if not api_key:
        return None

    try:
        response = requests.get(
            STEAM_SUMMARIES_URL,
            params={"key": api_key, "steamids": str(steam_id)},
            timeout=5,
        )
        response.raise_for_status()
        players = response.json().get("response", {}).get("players", [])
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning(f"Steam profile lookup for {steam_identifier} failed: {e}")
        return None

    if not players:
        return None

    summary = players[0]
    info = {
        "steamid": summary.get("steamid"),
        "name": summary.get("personaname"),
        "avatar": summary.get("avatarfull") or summary.get("avatar"),
        "profile_url": summary.get("profileurl"),
    }
    cache.write(key, info, cache.DAY)
    return info


def get_avatar(steam_identifier: str) -> str:
    steam = get_steam_user(steam_identifier)
    return steam["avatar"] if steam and steam.get("avatar") else BLANK_AVATAR_URL
