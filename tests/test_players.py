import datetime

import pytest

from database.models import Player, Character, Vehicle, Ban, Warning, PanelLog

TARGET = "steam:110000100000002"


@pytest.fixture
def target(db_session):
    player = Player(
        steam_identifier=TARGET,
        player_name="Troublemaker",
        identifiers=[TARGET, "license:def", "discord:99", "ip:10.0.0.2"],
        playtime=7200,
        last_connection=datetime.datetime(2024, 5, 1, 20, 0, 0),
    )
    db_session.add(player)
    db_session.flush()
    character = Character(
        character_id=10, steam_identifier=TARGET, character_slot=2,
        first_name="Tony", last_name="Cipriani", date_of_birth=datetime.date(1990, 4, 2),
        cash=100, bank=900, money=1000,
    )
    db_session.add(character)
    db_session.add(Character(character_id=11, steam_identifier=TARGET, character_slot=1,
                             first_name="Lucia", last_name="Reyes"))
    db_session.add(Vehicle(owner_cid=10, model_name="sultan", plate="12OPF345"))
    db_session.commit()
    return player


def test_list_players(client, auth_headers, target):
    resp = client.get("/api/players/", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert {p["steamIdentifier"] for p in data["players"]} == {TARGET, "steam:110000100000001"}
    assert data["links"]["prev"] is None


@pytest.mark.parametrize("params", [
    {"name": "trouble"},
    {"steam": TARGET},
    {"identifier": "license:def"},
])
def test_list_players_filters(client, auth_headers, target, params):
    resp = client.get("/api/players/", params=params, headers=auth_headers)
    players = resp.json()["players"]
    assert [p["steamIdentifier"] for p in players] == [TARGET]


def test_player_resource(client, auth_headers, target):
    resp = client.get("/api/players/", params={"name": "Trouble"}, headers=auth_headers)
    player = resp.json()["players"][0]
    assert player["playerName"] == "Troublemaker"
    assert player["playTime"] == 7200
    assert player["discord"] == "99"
    assert player["isStaff"] is False
    assert player["isBanned"] is False
    assert player["warnings"] == 0
    assert player["steamProfileUrl"] == "http://s.team/p/d"


def test_show_player(client, auth_headers, target, monkeypatch, fake_servers, make_connection):
    monkeypatch.setenv("OP_FW_SERVERS", "c3s1.example.com")
    fake_servers.servers = {"c3s1.example.com": {TARGET: make_connection(source=31, character=10)}}

    resp = client.get(f"/api/players/{TARGET}", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["player"]["status"]["status"] == "online"
    assert data["player"]["status"]["serverName"] == "c3s1"
    assert [c["slot"] for c in data["characters"]] == [1, 2]
    assert data["discord"] == "99"
    assert data["warnings"] == []
    assert data["bans"] == []


def test_show_player_status_unavailable(client, auth_headers, target):
    resp = client.get(f"/api/players/{TARGET}", headers=auth_headers)
    assert resp.json()["player"]["status"]["status"] == "unavailable"


def test_show_unknown_player(client, auth_headers):
    resp = client.get("/api/players/steam:110000100000fff", headers=auth_headers)
    assert resp.status_code == 404


def test_player_status_endpoint(client, auth_headers, monkeypatch, fake_servers, make_connection):
    monkeypatch.setenv("OP_FW_SERVERS", "s1.example.com")
    fake_servers.servers = {"s1.example.com": {TARGET: make_connection(fake_disconnected=True)}}

    resp = client.get(f"/api/players/{TARGET}/status", headers=auth_headers)
    assert resp.json()["status"] == "offline"

    resp = client.get(f"/api/players/{TARGET}/status", params={"true": 1}, headers=auth_headers)
    assert resp.json()["status"] == "online"


def test_warnings(client, auth_headers, target, staff_player, db_session):
    resp = client.post(f"/api/players/{TARGET}/warnings", json={"message": "Random deathmatch"}, headers=auth_headers)
    assert resp.status_code == 200
    warning = resp.json()
    assert warning["message"] == "Random deathmatch"
    assert warning["issuer"]["steamIdentifier"] == staff_player.steam_identifier

    data = client.get(f"/api/players/{TARGET}", headers=auth_headers).json()
    assert [w["id"] for w in data["warnings"]] == [warning["id"]]
    assert data["player"]["warnings"] == 1
    assert data["panelLogs"][0]["action"] == "Issued Warning"

    resp = client.delete(f"/api/players/{TARGET}/warnings/{warning['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert db_session.query(Warning).count() == 0
    assert db_session.query(PanelLog).filter(PanelLog.action == "Removed Warning").count() == 1


def test_warning_validation_and_404(client, auth_headers, target):
    resp = client.post(f"/api/players/{TARGET}/warnings", json={"message": ""}, headers=auth_headers)
    assert resp.status_code == 422

    resp = client.post("/api/players/steam:110000100000fff/warnings", json={"message": "x"}, headers=auth_headers)
    assert resp.status_code == 404

    resp = client.delete(f"/api/players/{TARGET}/warnings/999", headers=auth_headers)
    assert resp.status_code == 404


def test_ban_and_unban(client, auth_headers, target, db_session):
    resp = client.post(f"/api/players/{TARGET}/ban", json={"reason": "Cheating"}, headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()

    identifiers = {b["identifier"] for b in data["bans"]}
    assert identifiers == {TARGET, "license:def", "discord:99"}
    assert {b["banHash"] for b in data["bans"]} == {data["banHash"]}
    assert all(b["creatorName"] == "Admin" for b in data["bans"])

    resp = client.post(f"/api/players/{TARGET}/ban", json={"reason": "Again"}, headers=auth_headers)
    assert resp.status_code == 400

    player = client.get(f"/api/players/{TARGET}", headers=auth_headers).json()
    assert player["player"]["isBanned"] is True
    assert player["player"]["ban"]["reason"] == "Cheating"
    assert len(player["bans"]) == 3

    resp = client.delete(f"/api/players/{TARGET}/ban", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["removed"] == 3
    assert db_session.query(Ban).count() == 0

    resp = client.delete(f"/api/players/{TARGET}/ban", headers=auth_headers)
    assert resp.status_code == 404


def test_fake_identity_page(client, auth_headers, target, monkeypatch, fake_servers, make_connection):
    monkeypatch.setenv("OP_FW_SERVERS", "s1.example.com")
    fake_servers.servers = {"s1.example.com": {
        TARGET: make_connection(character=10, identity_override=True, name="Undercover"),
    }}

    resp = client.get("/api/players/steam:110000200000002", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["player"]["playerName"] == "Undercover"
    assert data["characters"][0]["firstName"] == "Tony"


def test_characters(client, auth_headers, target):
    resp = client.get("/api/characters/", params={"name": "tony"}, headers=auth_headers)
    assert [c["id"] for c in resp.json()["characters"]] == [10]

    resp = client.get("/api/characters/", params={"steam": TARGET}, headers=auth_headers)
    assert len(resp.json()["characters"]) == 2

    resp = client.get("/api/characters/10", headers=auth_headers)
    assert resp.status_code == 200
    character = resp.json()
    assert character["name"] == "Tony Cipriani"
    assert character["dateOfBirth"] == "1990-04-02"
    assert character["money"] == 1000
    assert character["vehicles"][0]["plate"] == "12OPF345"
    assert character["player"]["steamIdentifier"] == TARGET

    assert client.get("/api/characters/999", headers=auth_headers).status_code == 404


def test_bans_listing(client, auth_headers, target):
    client.post(f"/api/players/{TARGET}/ban", json={"reason": "Cheating", "expire": 3600}, headers=auth_headers)

    data = client.get("/api/bans/", headers=auth_headers).json()
    assert len(data["bans"]) == 3
    assert all(b["expire"] == 3600 for b in data["bans"])
    assert data["playerMap"] == {TARGET: "Troublemaker"}


def test_servers(client, auth_headers, monkeypatch, fake_servers, make_connection):
    monkeypatch.setenv("OP_FW_SERVERS", "c3s1.example.com,c3s2.example.com")
    fake_servers.servers = {"c3s1.example.com": {TARGET: make_connection()}}

    servers = client.get("/api/servers/", headers=auth_headers).json()["servers"]
    assert servers[0] == {
        "server": "c3s1.example.com",
        "name": "c3s1",
        "apiUrl": "https://c3s1.example.com/op-framework/",
        "online": True,
        "onlineCount": 1,
    }
    assert servers[1]["online"] is False
    assert servers[1]["onlineCount"] is None


def test_panel_logs_filters(client, auth_headers, target, staff_player):
    client.post(f"/api/players/{TARGET}/warnings", json={"message": "First"}, headers=auth_headers)
    client.post(f"/api/players/{TARGET}/ban", json={"reason": "Cheating"}, headers=auth_headers)

    data = client.get("/api/panel-logs/", params={"target": TARGET}, headers=auth_headers).json()
    assert [log["action"] for log in data["logs"]] == ["Banned Player", "Issued Warning"]
    assert data["playerMap"] == {TARGET: "Troublemaker", staff_player.steam_identifier: "Admin"}

    data = client.get("/api/panel-logs/", params={"source": "steam:110000100000fff"}, headers=auth_headers).json()
    assert data["logs"] == []
    assert data["playerMap"] == {"empty": "empty"}


def test_player_identifiers_carry_labels(client, auth_headers, target):
    resp = client.get(f"/api/players/{TARGET}", headers=auth_headers)
    assert resp.json()["player"]["identifiers"] == [
        {"identifier": TARGET, "label": "Steam Account"},
        {"identifier": "license:def", "label": "Rockstar Account"},
        {"identifier": "discord:99", "label": "Discord Account"},
        {"identifier": "ip:10.0.0.2", "label": "IP-Address"},
    ]


@pytest.mark.parametrize("identifier", ["license", "unknown:1", "license:a:b"])
def test_list_players_rejects_invalid_identifier(client, auth_headers, identifier):
    resp = client.get("/api/players/", params={"identifier": identifier}, headers=auth_headers)
    assert resp.status_code == 400


def test_malformed_steam_identifier_still_lists(client, auth_headers, db_session):
    db_session.add(Player(steam_identifier="steam:not-hex", player_name="Broken"))
    db_session.commit()

    resp = client.get("/api/players/", params={"name": "Broken"}, headers=auth_headers)
    assert resp.status_code == 200
    player = resp.json()["players"][0]
    assert player["steam36"] is None
    assert player["steamProfileUrl"] is None
