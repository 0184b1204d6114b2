"""Friend routes — envelope shape, status codes and end-to-end friendship flow."""

JOHN = "john@example.com"
JANE = "jane@example.com"
BOB = "bob@example.com"


async def test_create_user_returns_201_with_id(client):
    res = await client.post("/api/v1/users", json={"email": "  john@example.com "})

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["data"]["email"] == JOHN
    assert isinstance(body["data"]["id"], int)


async def test_duplicate_user_returns_409(client, register):
    await register(JOHN)

    res = await client.post("/api/v1/users", json={"email": JOHN})

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "USER_ALREADY_EXISTS"


async def test_create_friendship_success_envelope(client, register):
    await register(JOHN, JANE)

    res = await client.post("/api/v1/friends", json={"friends": [JOHN, JANE]})

    assert res.status_code == 200
    assert res.json() == {"success": True}


async def test_reversed_duplicate_friendship_returns_409(client, register):
    await register(JOHN, JANE)
    await client.post("/api/v1/friends", json={"friends": [JOHN, JANE]})

    res = await client.post("/api/v1/friends", json={"friends": [JANE, JOHN]})

    assert res.status_code == 409
    body = res.json()
    assert body["success"] is False
    assert body["error_message"] == "They are already friends"
    assert body["error"]["code"] == "ALREADY_FRIENDS"


async def test_friendship_with_unknown_user_returns_404(client, register):
    await register(JOHN)

    res = await client.post(
        "/api/v1/friends", json={"friends": [JOHN, "ghost@example.com"]},
    )

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "USER_NOT_FOUND"


async def test_friendship_needs_exactly_two_emails(client):
    res = await client.post("/api/v1/friends", json={"friends": [JOHN]})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_malformed_email_is_rejected(client):
    res = await client.post("/api/v1/friends", json={"friends": [JOHN, "not-an-email"]})

    assert res.status_code == 400


async def test_self_friendship_returns_400(client, register):
    await register(JOHN)

    res = await client.post("/api/v1/friends", json={"friends": [JOHN, JOHN]})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_RELATIONSHIP"


async def test_list_friends(client, register):
    await register(JOHN, JANE, BOB)
    await client.post("/api/v1/friends", json={"friends": [JOHN, JANE]})
    await client.post("/api/v1/friends", json={"friends": [BOB, JOHN]})

    res = await client.post("/api/v1/friends/list", json={"email": JOHN})

    assert res.status_code == 200
    assert res.json()["data"] == {"friends": [BOB, JANE], "count": 2}


async def test_common_friends(client, register):
    await register(JOHN, JANE, BOB)
    await client.post("/api/v1/friends", json={"friends": [JOHN, BOB]})
    await client.post("/api/v1/friends", json={"friends": [JANE, BOB]})

    res = await client.post("/api/v1/friends/common", json={"friends": [JOHN, JANE]})

    assert res.status_code == 200
    assert res.json()["data"] == {"friends": [BOB], "count": 1}


async def test_common_friends_without_relations_is_empty(client, register):
    await register(JOHN, JANE)

    res = await client.post("/api/v1/friends/common", json={"friends": [JOHN, JANE]})

    assert res.json()["data"] == {"friends": [], "count": 0}
