"""Tests for the Levenshtein scorer."""

import pytest

from evalrun.core.errors import ConfigurationError
from evalrun.scorer.infrastructure.errors import InvalidScorerInputError
from evalrun.scorer.infrastructure.levenshtein import levenshtein


class TestLevenshteinScore:
    """score = 1 - distance / max(len(output), len(expected))."""

    @pytest.mark.parametrize(
        ("output", "expected", "score"),
        [
            ("abc", "", 0.0),
            ("", "abc", 0.0),
            ("kitten", "sitting", 1 - 3 / 7),
            ("flaw", "lawn", 0.5),
            ("abc", "abcdef", 0.5),
        ],
    )
    def test_known_distances(self, output: str, expected: str, score: float) -> None:
        assert levenshtein(output=output, expected=expected).score == pytest.approx(
            score
        )

    def test_score_is_symmetric(self) -> None:
        forward = levenshtein(output="sunday", expected="saturday").score
        backward = levenshtein(output="saturday", expected="sunday").score

        assert forward == backward

    def test_exact_match_scores_one(self) -> None:
        result = levenshtein(output="abcdef", expected="abcdef")

        assert result.name == "Levenshtein"
        assert result.score == 1.0

    def test_both_empty_scores_one(self) -> None:
        assert levenshtein(output="", expected="").score == 1.0

    def test_partial_match(self) -> None:
        result = levenshtein(output="abc", expected="abcdef")

        assert result.score == pytest.approx(0.5)

    def test_completely_different_strings_score_zero(self) -> None:
        assert levenshtein(output="abc", expected="xyz").score == 0.0

    def test_score_decreases_as_distance_grows(self) -> None:
        expected = "abcdefgh"
        outputs = ["abcdefgh", "abcdefgX", "abcdefXX", "abcdeXXX", "XXXXXXXX"]

        scores = [levenshtein(output=o, expected=expected).score for o in outputs]

        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == len(scores)

    def test_non_string_values_are_stringified(self) -> None:
        assert levenshtein(output=123, expected="123").score == 1.0

    def test_integral_float_matches_integer(self) -> None:
        assert levenshtein(output=1.0, expected=1).score == 1.0

    def test_fractional_float_keeps_its_digits(self) -> None:
        assert levenshtein(output=1.5, expected="1.5").score == 1.0

    def test_booleans_use_json_spelling(self) -> None:
        assert levenshtein(output=True, expected="true").score == 1.0
        assert levenshtein(output=False, expected="false").score == 1.0

    def test_none_output_is_spelled_null(self) -> None:
        assert levenshtein(output=None, expected="null").score == 1.0

    def test_missing_expected_raises_invalid_scorer_input(self) -> None:
        with pytest.raises(InvalidScorerInputError):
            levenshtein(output="abc", expected=None)

    def test_invalid_input_is_a_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            levenshtein(output="abc", expected=None)
