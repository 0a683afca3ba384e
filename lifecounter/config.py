"""Central configuration defaults and constants for LifeCounter."""

import os

# Game rules (fixed, the engine invariants depend on them)
STARTING_LIFE = 20
MIN_LIFE = 0
MAX_LIFE = 999
MIN_PLAYERS = 1
MAX_PLAYERS = 8

# Status sentinel when no player has lost
NO_STATUS = ""

# Game Defaults
DEFAULT_PLAYER_COUNT = int(os.getenv("LIFECOUNTER_DEFAULT_PLAYER_COUNT", "2"))
# Quick-adjust buttons - parse from comma-separated env var or use default set
_quick_adjust_env = os.getenv("LIFECOUNTER_QUICK_ADJUST_AMOUNTS")
DEFAULT_QUICK_ADJUST_AMOUNTS = (
    [int(amount) for amount in _quick_adjust_env.split(",") if amount.strip()] if _quick_adjust_env
    else [-5, -1, 1, 5]
)

# Custom amount input
DEFAULT_MAX_AMOUNT_INPUT_LENGTH = int(os.getenv("LIFECOUNTER_MAX_AMOUNT_INPUT_LENGTH", "32"))  # garbage guard only, adjust_life clamps the value

# Logging
DEFAULT_LOG_LEVEL = os.getenv("LIFECOUNTER_LOG_LEVEL", "INFO").upper()

# API
DEFAULT_API_HOST = os.getenv("LIFECOUNTER_API_HOST", "127.0.0.1")
DEFAULT_API_PORT = int(os.getenv("LIFECOUNTER_API_PORT", "5000"))
