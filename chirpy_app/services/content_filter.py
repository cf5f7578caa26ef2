"""
Profanity masking for chirp bodies.
"""

from typing import FrozenSet

BANNED_WORDS: FrozenSet[str] = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def clean_body(text: str, banned_words: FrozenSet[str] = BANNED_WORDS) -> str:
    """
    Replace banned words with ****.

    The text is split on single spaces and every token is compared
    lowercased against banned_words. Only whole tokens match, so
    "Kerfuffle!" is left alone. Token count and spacing are preserved.
    """
    words = text.split(" ")
    return " ".join(MASK if word.lower() in banned_words else word for word in words)
