def test_login(client, admin_user):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "secret"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]


def test_login_wrong_password(client, admin_user):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "wrong"})
    assert resp.status_code == 401


def test_login_unknown_user(client):
    resp = client.post("/api/auth/login", json={"username": "nobody", "password": "secret"})
    assert resp.status_code == 401


def test_login_writes_panel_log(client, admin_user, auth_headers):
    client.post("/api/auth/login", json={"username": "admin", "password": "secret"})
    resp = client.get("/api/panel-logs/", headers=auth_headers)
    assert resp.status_code == 200
    logs = resp.json()["logs"]
    assert logs[0]["action"] == "Logged In"
    assert logs[0]["sourceIdentifier"] == admin_user.steam_identifier


def test_me(client, auth_headers):
    resp = client.get("/api/auth/me", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["username"] == "admin"
    assert resp.json()["steam_identifier"] == "steam:110000100000001"


def test_api_requires_token(client):
    assert client.get("/api/players/").status_code == 401
    assert client.get("/api/logs/", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
