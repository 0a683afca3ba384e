"""User input parsing for LifeCounter."""

from lifecounter.parsing.amount_parser import AmountParser

__all__ = ["AmountParser"]
