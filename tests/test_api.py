"""Tests for the Flask API."""


def _create_game(client, player_count=2):
    response = client.post("/api/games", json={"player_count": player_count})
    assert response.status_code == 201
    return response.get_json()["game_id"]


class TestGamesApi:
    """Test suite for game lifecycle routes."""

    def test_create_game(self, api_client):
        """Test creating a game returns its state."""
        response = api_client.post("/api/games", json={"player_count": 3})
        assert response.status_code == 201
        data = response.get_json()
        assert data["success"] is True
        state = data["state"]
        assert state["game_id"] == data["game_id"]
        assert [player["name"] for player in state["players"]] == ["Player 1", "Player 2", "Player 3"]
        assert state["is_game_started"] is False
        assert state["can_add_player"] is True
        assert state["status"] == ""

    def test_create_game_default_count(self, api_client):
        """Test a body-less request creates the default game."""
        response = api_client.post("/api/games")
        assert response.status_code == 201
        assert len(response.get_json()["state"]["players"]) == 2

    def test_create_game_invalid_count(self, api_client):
        """Test out-of-range counts are rejected."""
        for player_count in (0, 9, "four", True):
            response = api_client.post("/api/games", json={"player_count": player_count})
            assert response.status_code == 400
            assert response.get_json()["error"] == "Invalid player count"

    def test_list_and_delete_games(self, api_client):
        """Test listing and deleting games."""
        game_id = _create_game(api_client, 4)
        games = api_client.get("/api/games").get_json()["games"]
        assert games == [{"game_id": game_id, "player_count": 4, "status": ""}]

        assert api_client.delete(f"/api/games/{game_id}").status_code == 200
        assert api_client.get("/api/games").get_json()["games"] == []
        assert api_client.delete(f"/api/games/{game_id}").status_code == 404

    def test_unknown_game(self, api_client):
        """Test routes for a missing game return 404."""
        assert api_client.get("/api/games/missing/state").status_code == 404
        assert api_client.get("/api/games/missing/history").status_code == 404
        assert api_client.post("/api/games/missing/players").status_code == 404
        response = api_client.post("/api/games/missing/players/0/life", json={"amount": -1})
        assert response.status_code == 404

    def test_unknown_route_is_json(self, api_client):
        """Test HTTP errors on API paths render as JSON."""
        response = api_client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.content_type == "application/json"
        assert response.get_json()["code"] == 404


class TestPlayersApi:
    """Test suite for roster and life routes."""

    def test_add_player(self, api_client):
        """Test adding a player before the game starts."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players")
        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["state"]["players"][-1]["name"] == "Player 3"

    def test_add_player_refused_is_not_error(self, api_client):
        """Test a refused add returns success false with status 200."""
        game_id = _create_game(api_client, 8)
        response = api_client.post(f"/api/games/{game_id}/players")
        assert response.status_code == 200
        assert response.get_json()["success"] is False
        assert len(response.get_json()["state"]["players"]) == 8

    def test_adjust_life_amount(self, api_client):
        """Test a quick-adjust amount changes life and logs history."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players/0/life", json={"amount": -5})
        assert response.status_code == 200
        data = response.get_json()
        assert data["adjusted"] is True
        assert data["state"]["players"][0]["life_total"] == 15
        assert data["state"]["is_game_started"] is True

        history = api_client.get(f"/api/games/{game_id}/history").get_json()["history"]
        assert [(entry["player_name"], entry["life_change"]) for entry in history] == [("Player 1", -5)]
        assert history[0]["label"] == "Player 1 -5"

    def test_adjust_life_lethal(self, api_client):
        """Test the status message after lethal damage."""
        game_id = _create_game(api_client)
        api_client.post(f"/api/games/{game_id}/players/1/life", json={"amount": -25})
        state = api_client.get(f"/api/games/{game_id}/state").get_json()["state"]
        assert state["players"][1]["life_total"] == 0
        assert state["players"][1]["is_defeated"] is True
        assert state["status"] == "Player 2 LOSES!"

    def test_adjust_life_custom_amount(self, api_client):
        """Test custom text amounts are parsed."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players/1/life", json={"custom_amount": " +7 "})
        assert response.get_json()["state"]["players"][1]["life_total"] == 27

    def test_adjust_life_large_custom_amount(self, api_client):
        """Test a custom amount beyond the life range is applied and clamped."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players/0/life", json={"custom_amount": "-1000000"})
        data = response.get_json()
        assert data["adjusted"] is True
        assert data["state"]["players"][0]["life_total"] == 0
        history = api_client.get(f"/api/games/{game_id}/history").get_json()["history"]
        assert [entry["life_change"] for entry in history] == [-1000000]

    def test_adjust_life_unparseable_custom_amount(self, api_client):
        """Test unusable custom text changes nothing and logs nothing."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players/0/life", json={"custom_amount": "lots"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["adjusted"] is False
        assert data["reason"]
        assert data["state"]["players"][0]["life_total"] == 20
        assert api_client.get(f"/api/games/{game_id}/history").get_json()["history"] == []

    def test_adjust_life_zero_not_logged(self, api_client):
        """Test a zero amount is accepted without history."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players/0/life", json={"amount": 0})
        assert response.get_json()["adjusted"] is False
        assert api_client.get(f"/api/games/{game_id}/history").get_json()["history"] == []

    def test_adjust_life_bad_requests(self, api_client):
        """Test malformed life requests."""
        game_id = _create_game(api_client)
        url = f"/api/games/{game_id}/players/0/life"
        assert api_client.post(url, data="-5").status_code == 400
        assert api_client.post(url, json={}).status_code == 400
        assert api_client.post(url, json={"amount": "5"}).status_code == 400
        assert api_client.post(url, json={"amount": 1.5}).status_code == 400
        assert api_client.post(url, json={"other": 1}).status_code == 400

    def test_adjust_life_bad_index(self, api_client):
        """Test a missing player index returns 404."""
        game_id = _create_game(api_client)
        response = api_client.post(f"/api/games/{game_id}/players/5/life", json={"amount": -1})
        assert response.status_code == 404
        assert response.get_json()["error"] == "Player not found"

    def test_adjust_life_by_id(self, api_client):
        """Test addressing a player by stable id."""
        game_id = _create_game(api_client)
        state = api_client.get(f"/api/games/{game_id}/state").get_json()["state"]
        player_id = state["players"][1]["player_id"]

        response = api_client.post(f"/api/games/{game_id}/players/by-id/{player_id}/life", json={"amount": 2})
        assert response.get_json()["state"]["players"][1]["life_total"] == 22

        response = api_client.post(f"/api/games/{game_id}/players/by-id/missing/life", json={"amount": 2})
        assert response.status_code == 404

    def test_game_unstarts_and_accepts_players(self, api_client):
        """Test bringing all totals back to 20 reopens the roster."""
        game_id = _create_game(api_client)
        url = f"/api/games/{game_id}/players/0/life"
        api_client.post(url, json={"amount": -3})
        assert api_client.post(f"/api/games/{game_id}/players").get_json()["success"] is False
        api_client.post(url, json={"amount": 3})
        assert api_client.post(f"/api/games/{game_id}/players").get_json()["success"] is True


class TestRulesApi:
    """Test suite for rules config route."""

    def test_get_rules(self, api_client):
        """Test rule constants are exposed."""
        rules = api_client.get("/api/config/rules").get_json()["rules"]
        assert rules["starting_life"] == 20
        assert rules["max_life"] == 999
        assert rules["max_players"] == 8
        assert rules["quick_adjust_amounts"] == [-5, -1, 1, 5]
