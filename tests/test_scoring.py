import sys
import unittest
import warnings
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_insight.analysis.scoring import (  # noqa: E402
    SUGGEST_MORE_EXPERIENCE,
    SUGGEST_MORE_SKILLS,
    SUGGEST_PHONE,
    SUGGEST_RESTRUCTURE,
    calculate_score,
    coerce_score,
    generate_suggestions,
)
from resume_insight.errors import ScoreCoercionWarning  # noqa: E402
from resume_insight.schemas.analysis import ContactInfo  # noqa: E402


class ScoreTests(unittest.TestCase):
    def test_weights_and_cap(self):
        contact = ContactInfo(email="a@b.io", phone="555-123-4567")
        self.assertEqual(calculate_score(["a", "b"], ["x"], ["y"], contact), 10 + 3 + 2 + 10)
        self.assertEqual(calculate_score([str(i) for i in range(30)], [], [], ContactInfo()), 100)
        self.assertEqual(calculate_score([], [], [], ContactInfo()), 0)

    def test_score_is_monotonic_in_each_count(self):
        full_contact = ContactInfo(email="a@b.io", phone="1", location="Remote")
        previous = -1
        for n in range(0, 25):
            score = calculate_score(["s"] * n, ["e"] * min(n, 5), ["d"] * min(n, 3), full_contact)
            self.assertGreaterEqual(score, previous)
            self.assertTrue(0 <= score <= 100)
            previous = score


class SuggestionTests(unittest.TestCase):
    def test_rules_fire_in_fixed_order(self):
        contact = ContactInfo(email="a@b.io")
        suggestions = generate_suggestions(["python"], [], contact, 20)
        self.assertEqual(suggestions, [SUGGEST_MORE_SKILLS, SUGGEST_MORE_EXPERIENCE, SUGGEST_PHONE, SUGGEST_RESTRUCTURE])

    def test_no_suggestions_for_complete_resume(self):
        contact = ContactInfo(email="a@b.io", phone="555-123-4567")
        suggestions = generate_suggestions(["a", "b", "c", "d", "e"], ["1", "2", "3"], contact, 60)
        self.assertEqual(suggestions, [])


class CoerceScoreTests(unittest.TestCase):
    def test_in_range_int_passes_without_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ScoreCoercionWarning)
            self.assertEqual(coerce_score(72), 72)

    def test_numeric_strings_are_parsed(self):
        for raw, expected in (("85", 85), (" 85 ", 85), ("85%", 85), ("85/100", 85), ("72.6", 73)):
            with self.assertWarns(ScoreCoercionWarning):
                self.assertEqual(coerce_score(raw), expected)

    def test_out_of_range_values_are_clamped(self):
        with self.assertWarns(ScoreCoercionWarning):
            self.assertEqual(coerce_score(140), 100)
        with self.assertWarns(ScoreCoercionWarning):
            self.assertEqual(coerce_score("-5"), 0)

    def test_non_numeric_values_use_fallback(self):
        for raw in ("excellent", None, True, {"value": 3}, float("nan")):
            with self.assertWarns(ScoreCoercionWarning):
                self.assertEqual(coerce_score(raw, fallback=41), 41)


if __name__ == "__main__":
    unittest.main()
