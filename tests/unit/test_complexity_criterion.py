"""Unit tests for the character complexity criterion."""

import pytest

from pwstrength.evaluator.criteria import SPECIAL_CHARACTERS, CharacterComplexityCriterion
from pwstrength.evaluator.criteria.complexity import classify


class TestClassify:
    @pytest.mark.parametrize(
        "char,expected",
        [
            ("A", "Uppercase"),
            ("z", "Lowercase"),
            ("7", "Digit"),
            ("!", "Special Char"),
            ("\\", "Special Char"),
            ("`", "Special Char"),
            (" ", None),
            ("_", None),
            ("é", None),
            ("Ä", None),
            ("٣", None),
        ],
    )
    def test_classify(self, char, expected):
        assert classify(char) == expected

    def test_special_set_contents(self):
        assert SPECIAL_CHARACTERS == frozenset("!@#$%^&*()-+={}[]|\\:;\"'<>,.?/`~")
        assert len(SPECIAL_CHARACTERS) == 31


class TestCharacterComplexityCriterion:
    def setup_method(self):
        self.criterion = CharacterComplexityCriterion()

    @pytest.mark.parametrize(
        "password,score",
        [
            ("", 0),
            ("   ", 0),
            ("abcdefg", 12),
            ("ABC", 12),
            ("abcABC", 25),
            ("abc123", 25),
            ("abcABC123", 37),
            ("aA1!", 50),
        ],
    )
    def test_partial_credit(self, password, score):
        assert self.criterion.evaluate(password).score == score

    def test_all_four_types_pass(self):
        result = self.criterion.evaluate("Passw0rd!")
        assert result.passed is True
        assert result.score == 50
        assert result.message == "Excellent! All 4 character types are present."

    def test_partial_score_still_fails(self):
        result = self.criterion.evaluate("Password1")
        assert result.passed is False
        assert result.score == 37
        assert result.message == "Missing: Special Char."

    def test_missing_listed_in_fixed_order(self):
        result = self.criterion.evaluate("!")
        assert result.message == "Missing: Uppercase, Lowercase, Digit."

    def test_nothing_present(self):
        result = self.criterion.evaluate(" ")
        assert result.score == 0
        assert result.message == "Missing: Uppercase, Lowercase, Digit, Special Char."

    def test_non_ascii_letters_do_not_count(self):
        result = self.criterion.evaluate("ÉÉé")
        assert result.score == 0
        assert result.passed is False
