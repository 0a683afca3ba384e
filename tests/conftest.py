"""Pytest configuration and fixtures."""

import pytest

from lifecounter.engine.game import Game


@pytest.fixture
def two_player_game():
    """Fresh two-player game."""
    return Game.create(2)


@pytest.fixture
def full_game():
    """Eight-player game, nobody has taken damage yet."""
    return Game.create(8)


@pytest.fixture
def api_client():
    """Flask test client with an empty game store."""
    from lifecounter.api import app as app_module

    app_module._games.clear()
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as client:
        yield client
    app_module._games.clear()
