"""LifeCounter: multiplayer life tracking for tabletop card games."""
