from __future__ import annotations

import unittest

from activity_posts.activity import ACTIVITY_ALIASES, KM_PER_MILE, extract_activity

COMPLETED = "completed_event"


class TestActivityType(unittest.TestCase):
    def test_table_order_breaks_ties(self) -> None:
        res = extract_activity("Just completed a 5k run and bike ride", COMPLETED)
        self.assertEqual(res.activity_type, "running")

        res = extract_activity("Just completed a walk then a jog", COMPLETED)
        self.assertEqual(res.activity_type, "running")

    def test_aliases_map_to_canonical_labels(self) -> None:
        cases = {
            "Just completed a 2.5 mi hike": "walking",
            "Just completed a 20.0 km bike ride": "cycling",
            "I just biked to work": "cycling",
            "Just completed a 1.00 km swim": "swimming",
            "Just completed a 30 minute elliptical session": "elliptical",
            "Just completed a 2000 m row": "rowing",
            "Just completed a 45 min yoga session": "yoga",
        }
        for text, label in cases.items():
            self.assertEqual(extract_activity(text, COMPLETED).activity_type, label, msg=text)

    def test_fallback_word_is_verbatim(self) -> None:
        res = extract_activity("Just completed a strength workout", COMPLETED)
        self.assertEqual(res.activity_type, "strength")

    def test_unknown_when_nothing_matches(self) -> None:
        res = extract_activity("Just completed something", COMPLETED)
        self.assertEqual(res.activity_type, "unknown")

    def test_table_labels_in_priority_order(self) -> None:
        self.assertEqual(
            [label for label, _ in ACTIVITY_ALIASES],
            ["running", "walking", "cycling", "swimming", "elliptical", "rowing", "yoga"],
        )


class TestDistance(unittest.TestCase):
    def test_miles_are_returned_as_is(self) -> None:
        self.assertEqual(extract_activity("completed a 3 mile run", COMPLETED).distance_miles, 3.0)
        self.assertEqual(extract_activity("Just completed a 5.0 miles run", COMPLETED).distance_miles, 5.0)
        self.assertEqual(extract_activity("Just completed a 3.1mi run", COMPLETED).distance_miles, 3.1)

    def test_kilometers_are_converted(self) -> None:
        res = extract_activity("completed a 10 km run", COMPLETED)
        self.assertAlmostEqual(res.distance_miles, 10 / KM_PER_MILE, places=9)
        self.assertAlmostEqual(res.distance_miles, 6.214, delta=0.002)

    def test_miles_take_precedence_over_km(self) -> None:
        res = extract_activity("Just completed a 5 km (3.1 mi) run", COMPLETED)
        self.assertEqual(res.distance_miles, 3.1)

    def test_minutes_are_not_miles(self) -> None:
        res = extract_activity("Just completed a 45 min yoga session", COMPLETED)
        self.assertEqual(res.distance_miles, 0.0)

    def test_no_distance(self) -> None:
        res = extract_activity("Just completed a 5k run", COMPLETED)
        self.assertEqual(res.distance_miles, 0.0)


class TestShortCircuit(unittest.TestCase):
    def test_non_completed_posts_are_unknown(self) -> None:
        for category in ("live_event", "achievement", "miscellaneous"):
            res = extract_activity("is running a marathon today! 26.2 mi", category)
            self.assertEqual(res.activity_type, "unknown")
            self.assertEqual(res.distance_miles, 0.0)


if __name__ == "__main__":
    unittest.main()
