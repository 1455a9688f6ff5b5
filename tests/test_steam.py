import pytest
import requests

from app.services import steam_service


def test_get_steam_id():
    assert steam_service.get_steam_id("steam:110000100000001") == 76561197960265729
    assert steam_service.get_steam_id("license:abc") is None
    assert steam_service.get_steam_id("steam:zzz") is None
    assert steam_service.get_steam_id("") is None


def test_account_parts():
    steam_id = steam_service.get_steam_id("steam:110000100012345")
    assert steam_service.account_id(steam_id) == 0x12345
    assert steam_service.account_type(steam_id) == steam_service.ACCOUNT_TYPE_INDIVIDUAL


def test_render_steam_invite():
    assert steam_service.render_steam_invite(0x0110000100000001) == "c"
    assert steam_service.render_steam_invite(0x0110000100000fff) == "www"
    assert steam_service.render_steam_invite(0x0110000100012345) == "cd-fgh"


def test_render_steam_invite_rejects_other_account_types():
    clan = (1 << 56) | (7 << 52) | 1
    with pytest.raises(ValueError):
        steam_service.render_steam_invite(clan)


def test_profile_url():
    assert steam_service.get_steam_profile_url("steam:110000100012345") == "http://s.team/p/cd-fgh"
    assert steam_service.get_steam_profile_url("license:abc") is None


def test_steam36_matches_hex_value():
    identifier = "steam:110000100000001"
    assert int(steam_service.steam36(identifier), 36) == int("110000100000001", 16)
    assert steam_service.steam36("steam:0") == "0"


def test_steam36_rejects_non_hex():
    assert steam_service.steam36("steam:not-hex") is None
    assert steam_service.steam36("license:abc") is None


def test_steam_user_requires_api_key(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("Steam API must not be called without a key")

    monkeypatch.setattr(steam_service.requests, "get", fail)
    assert steam_service.get_steam_user("steam:110000100000001") is None
    assert steam_service.get_avatar("steam:110000100000001") == steam_service.BLANK_AVATAR_URL


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


def test_steam_user_lookup_is_cached(monkeypatch):
    monkeypatch.setenv("STEAM_API_KEY", "key")
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(params)
        return FakeResponse({"response": {"players": [{
            "steamid": params["steamids"],
            "personaname": "Admin",
            "avatarfull": "https://avatars.example/full.jpg",
            "profileurl": "https://steamcommunity.com/id/admin",
        }]}})

    monkeypatch.setattr(steam_service.requests, "get", fake_get)

    info = steam_service.get_steam_user("steam:110000100000001")
    assert info["name"] == "Admin"
    assert steam_service.get_avatar("steam:110000100000001") == "https://avatars.example/full.jpg"
    assert len(calls) == 1
    assert calls[0]["steamids"] == "76561197960265729"


def test_steam_user_lookup_failure_returns_none(monkeypatch):
    monkeypatch.setenv("STEAM_API_KEY", "key")

    def fake_get(*args, **kwargs):
        raise requests.exceptions.ConnectionError("down")

    monkeypatch.setattr(steam_service.requests, "get", fake_get)
    assert steam_service.get_steam_user("steam:110000100000001") is None
