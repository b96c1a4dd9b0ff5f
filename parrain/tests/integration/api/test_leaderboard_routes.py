"""
Integration tests for leaderboard and stats routes.
"""


async def _register(client, wallet_address, referred_by=None):
    payload = {"walletAddress": wallet_address}
    if referred_by:
        payload["referredBy"] = referred_by
    response = await client.post("/api/user", json=payload)
    return response.json()["user"]


async def _seed(client):
    """A refers B and C; B refers D."""
    a = await _register(client, "LeaderWalletA0000001")
    b = await _register(client, "LeaderWalletB0000002", a["referralCode"])
    await _register(client, "LeaderWalletC0000003", a["referralCode"])
    await _register(client, "LeaderWalletD0000004", b["referralCode"])


class TestLeaderboardRoutes:
    """Tests for GET /api/leaderboard."""

    async def test_empty_leaderboard(self, client):
        """Test empty store returns empty list."""
        response = await client.get("/api/leaderboard")

        assert response.status_code == 200
        assert response.json() == {"success": True, "leaderboard": []}

    async def test_leaderboard_order(self, client):
        """Test users ranked by referral count with stable ties."""
        await _seed(client)

        response = await client.get("/api/leaderboard")

        board = response.json()["leaderboard"]
        assert [u["walletAddress"] for u in board] == [
            "LeaderWalletA0000001",
            "LeaderWalletB0000002",
            "LeaderWalletC0000003",
            "LeaderWalletD0000004",
        ]
        assert board[0]["referralCount"] == 2
        assert board[0]["totalRewards"] == 200
        assert board[0]["level"] == "bronze"

    async def test_leaderboard_limit(self, client):
        """Test limit query parameter."""
        await _seed(client)

        response = await client.get("/api/leaderboard", params={"limit": 1})

        assert len(response.json()["leaderboard"]) == 1

    async def test_leaderboard_invalid_limit(self, client):
        """Test out-of-range limit is a 400 error envelope."""
        response = await client.get("/api/leaderboard", params={"limit": 0})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestStatsRoutes:
    """Tests for GET /api/stats."""

    async def test_stats_empty(self, client):
        """Test zero stats."""
        response = await client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "stats": {"totalUsers": 0, "totalReferrals": 0},
        }

    async def test_stats_after_referrals(self, client):
        """Test totals match registered users and credited referrals."""
        await _seed(client)
        await _register(client, "LeaderWalletE0000005", "NOSUCH99")

        stats = (await client.get("/api/stats")).json()["stats"]

        assert stats == {"totalUsers": 5, "totalReferrals": 3}

    async def test_corrupt_store_returns_500(self, client, store_path):
        """Test unreadable store surfaces as STORE_ERROR envelope."""
        store_path.parent.mkdir(parents=True, exist_ok=True)
        store_path.write_text("{not json")

        response = await client.get("/api/stats")

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["code"] == "STORE_ERROR"
