"""
Tests for profanity masking and chirp length validation.
"""
import pytest

from chirpy_app.errors import ChirpTooLongError
from chirpy_app.services.content_filter import BANNED_WORDS, MASK, clean_body
from chirpy_app.services.validation import chirp_length, validate_chirp_body


class TestCleanBody:
    """Test word-replacement filtering"""

    def test_masks_banned_word(self):
        """Test the canonical example from the API docs"""
        body = "This is a kerfuffle opinion I need to share with the world"

        assert clean_body(body) == "This is a **** opinion I need to share with the world"

    def test_matching_is_case_insensitive(self):
        """Test that any casing of a banned word is masked"""
        assert clean_body("I hear Mastodon is better than Chirpy. sharbert I need to migrate") == \
            "I hear Mastodon is better than Chirpy. **** I need to migrate"
        assert clean_body("I really need a KERFUFFLE to go to bed sooner, Fornax !") == \
            "I really need a **** to go to bed sooner, **** !"

    def test_punctuation_adjacent_words_are_not_masked(self):
        """Test that only whole tokens are compared"""
        assert clean_body("Sharbert! kerfuffle, fornax.") == "Sharbert! kerfuffle, fornax."

    def test_clean_text_is_unchanged(self):
        """Test that text without banned words passes through"""
        body = "I had something interesting for breakfast"
        assert clean_body(body) == body

    @pytest.mark.parametrize("body", [
        "",
        "fornax",
        "a  double  space kerfuffle",
        " leading and trailing sharbert ",
    ])
    def test_token_count_is_preserved(self, body):
        """Test that every token maps to exactly one output token"""
        original = body.split(" ")
        cleaned = clean_body(body).split(" ")

        assert len(cleaned) == len(original)
        for before, after in zip(original, cleaned):
            if before.lower() in BANNED_WORDS:
                assert after == MASK
            else:
                assert after == before

    def test_custom_banned_words(self):
        """Test that the banned word set can be supplied"""
        assert clean_body("well golly gee", frozenset({"golly"})) == "well **** gee"


class TestValidateChirpBody:
    """Test the length cap"""

    def test_accepts_exactly_max_length(self):
        body = "a" * 140
        assert validate_chirp_body(body, 140) == body

    def test_rejects_over_max_length(self):
        with pytest.raises(ChirpTooLongError) as exc_info:
            validate_chirp_body("a" * 141, 140)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Chirp is too long"

    def test_length_is_measured_in_bytes(self):
        """Test that multi-byte characters count by their UTF-8 size"""
        body = "é" * 71  # 71 characters, 142 bytes

        assert len(body) < 140
        assert chirp_length(body) == 142
        with pytest.raises(ChirpTooLongError):
            validate_chirp_body(body, 140)

    def test_default_limit_from_settings(self):
        """Test that the configured limit (140) is used by default"""
        validate_chirp_body("a" * 140)
        with pytest.raises(ChirpTooLongError):
            validate_chirp_body("a" * 141)
