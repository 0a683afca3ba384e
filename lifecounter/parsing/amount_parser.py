"""Parsing of the free-text custom life amount."""

import re
import unicodedata
from typing import Optional

from lifecounter.config import DEFAULT_MAX_AMOUNT_INPUT_LENGTH


class AmountParser:
    """Turns custom-amount text into a life delta.

    Any whole number is accepted, however large; the engine clamps the
    resulting life total.

    Text that is not a plain signed integer is not an error: it yields no
    amount, and callers skip the adjustment.
    """

    AMOUNT_PATTERN = re.compile(r"^[+-]?\d+$")

    def __init__(self, max_length: int = DEFAULT_MAX_AMOUNT_INPUT_LENGTH) -> None:
        """Initialize parser with configurable input length."""
        self.max_length = max_length

    def normalize(self, input_text: str) -> str:
        """
        Normalize input text by:
        1. Normalizing unicode (full-width digits become ASCII)
        2. Removing control characters
        3. Stripping whitespace
        """
        if not isinstance(input_text, str):
            raise TypeError(f"Input must be a string, got {type(input_text)}")

        normalized = unicodedata.normalize("NFKC", input_text)
        normalized = re.sub(r"[\x00-\x1F\x7F]", "", normalized)
        return normalized.strip()

    def is_valid(self, input_text: object) -> tuple[bool, Optional[str]]:
        """
        Check if input is a usable amount.
        Returns (is_valid, reason).
        """
        if not isinstance(input_text, str):
            return False, "Amount must be text"

        text = self.normalize(input_text)
        if not text:
            return False, "Amount is empty"

        if len(text) > self.max_length:
            return False, f"Amount exceeds maximum length of {self.max_length} characters"

        if not self.AMOUNT_PATTERN.match(text):
            return False, f"Amount is not a whole number: {text}"

        return True, None

    def parse(self, input_text: object) -> Optional[int]:
        """
        Parse custom amount text.

        Returns:
            Signed integer amount, or None if the text cannot be used
        """
        is_valid, _ = self.is_valid(input_text)
        if not is_valid:
            return None
        return int(self.normalize(input_text))
