import pytest


def test_register_returns_account_with_id(client):
    response = client.post("/register", json={"username": "bob", "password": "pass1"})

    assert response.status_code == 200
    assert response.json() == {"account_id": 1, "username": "bob", "password": "pass1"}


def test_register_assigns_distinct_ids(client):
    first = client.post("/register", json={"username": "alice", "password": "secret"}).json()
    second = client.post("/register", json={"username": "carol", "password": "secret"}).json()

    assert first["account_id"] != second["account_id"]


@pytest.mark.parametrize(
    "body",
    [
        {"username": "", "password": "pass1"},
        {"username": "bob", "password": "abc"},
        {"username": "bob", "password": ""},
        {"password": "pass1"},
        {"username": "bob"},
    ],
)
def test_register_rejects_invalid_candidates(client, body):
    response = client.post("/register", json=body)

    assert response.status_code == 400
    assert response.text == ""


def test_register_accepts_password_of_exactly_four_characters(client):
    response = client.post("/register", json={"username": "dave", "password": "abcd"})

    assert response.status_code == 200


def test_register_rejects_duplicate_username(client, account):
    response = client.post("/register", json={"username": "bob", "password": "another"})

    assert response.status_code == 400
    assert response.text == ""


def test_login_returns_registered_account(client, account):
    response = client.post("/login", json={"username": "bob", "password": "pass1"})

    assert response.status_code == 200
    assert response.json() == account


@pytest.mark.parametrize(
    "body",
    [
        {"username": "bob", "password": "wrong"},
        {"username": "nobody", "password": "pass1"},
        {"username": "BOB", "password": "pass1"},
        {},
    ],
)
def test_login_rejects_mismatched_credentials(client, account, body):
    response = client.post("/login", json=body)

    assert response.status_code == 401
    assert response.text == ""


def test_account_messages_empty_for_account_without_messages(client, account):
    response = client.get(f"/accounts/{account['account_id']}/messages")

    assert response.status_code == 200
    assert response.json() == []


def test_account_messages_empty_for_unknown_account(client):
    response = client.get("/accounts/999/messages")

    assert response.status_code == 200
    assert response.json() == []


def test_account_messages_only_lists_own_messages(client, account):
    other = client.post("/register", json={"username": "eve", "password": "pass2"}).json()
    client.post("/messages", json={"posted_by": account["account_id"], "message_text": "mine", "time_posted_epoch": 1})
    client.post("/messages", json={"posted_by": other["account_id"], "message_text": "theirs", "time_posted_epoch": 2})

    response = client.get(f"/accounts/{account['account_id']}/messages")

    assert response.status_code == 200
    assert [m["message_text"] for m in response.json()] == ["mine"]


def test_malformed_body_is_rejected_with_400(client):
    response = client.post(
        "/register",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.text == ""


def test_account_messages_with_id_beyond_64_bits_is_empty_list(client):
    response = client.get(f"/accounts/{2**64}/messages")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize(
    "content",
    ['{"username": 12345, "password": "pass1"}', "{not json"],
)
def test_undecodable_login_body_is_401(client, account, content):
    response = client.post("/login", content=content, headers={"Content-Type": "application/json"})

    assert response.status_code == 401
    assert response.text == ""
