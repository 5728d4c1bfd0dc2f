import unittest

from src.functions.moderation_adapter import label_normalizer
from src.functions.moderation_adapter.label_normalizer import (
    MODERATION_CATEGORIES,
    convert_labels_to_result,
    get_confidence_for_label,
)

# Sample Rekognition ModerationLabels (parent and child labels mixed, as returned by the API)
SAMPLE_MODERATION_LABELS = [
    {"Confidence": 79.2, "Name": "Suggestive", "ParentName": ""},
    {"Confidence": 79.2, "Name": "Female Swimwear Or Underwear", "ParentName": "Suggestive"},
    {"Confidence": 12.5, "Name": "Hate Symbols", "ParentName": ""},
    {"Confidence": 55.49, "Name": "Visually Disturbing", "ParentName": ""},
]


class TestLabelNormalizer(unittest.TestCase):

    def test_result_has_five_fields_in_category_order(self):
        """Output is always five integers in the fixed category order."""
        result = convert_labels_to_result(SAMPLE_MODERATION_LABELS)
        self.assertEqual(result, "0,79,0,55,13")
        fields = result.split(",")
        self.assertEqual(len(fields), len(MODERATION_CATEGORIES))
        for field in fields:
            self.assertTrue(field.isdigit())
            self.assertTrue(0 <= int(field) <= 100)

    def test_order_is_not_sorted_by_confidence(self):
        labels = [
            {"Name": "Hate Symbols", "Confidence": 99.0},
            {"Name": "Explicit Nudity", "Confidence": 1.0},
        ]
        self.assertEqual(convert_labels_to_result(labels), "1,0,0,0,99")

    def test_empty_labels_score_zero(self):
        """A category absent from the moderation output scores exactly 0."""
        self.assertEqual(convert_labels_to_result([]), "0,0,0,0,0")
        self.assertEqual(convert_labels_to_result(None), "0,0,0,0,0")

    def test_name_matching_is_case_insensitive(self):
        labels = [{"Name": "explicit nudity", "Confidence": 88.1}, {"Name": "VIOLENCE", "Confidence": 40}]
        self.assertEqual(get_confidence_for_label(labels, "Explicit Nudity"), 88)
        self.assertEqual(convert_labels_to_result(labels), "88,0,40,0,0")

    def test_partial_name_does_not_match(self):
        labels = [{"Name": "Graphic Violence Or Gore", "Confidence": 90.0}]
        self.assertEqual(get_confidence_for_label(labels, "Violence"), 0)

    def test_first_matching_label_wins(self):
        labels = [
            {"Name": "Violence", "Confidence": 10.0},
            {"Name": "violence", "Confidence": 90.0},
        ]
        self.assertEqual(get_confidence_for_label(labels, "Violence"), 10)

    def test_confidence_is_rounded_to_nearest_integer(self):
        labels = [{"Name": "Suggestive", "Confidence": 66.6}]
        self.assertEqual(get_confidence_for_label(labels, "Suggestive"), 67)
        self.assertEqual(get_confidence_for_label([{"Name": "Suggestive", "Confidence": 66.4}], "Suggestive"), 66)

    def test_half_values_round_up(self):
        self.assertEqual(label_normalizer.round_confidence(2.5), 3)
        self.assertEqual(label_normalizer.round_confidence(0.5), 1)
        self.assertEqual(label_normalizer.round_confidence(99.5), 100)

    def test_string_confidence_is_parsed_as_float(self):
        labels = [{"Name": "Violence", "Confidence": "95.8"}]
        self.assertEqual(get_confidence_for_label(labels, "Violence"), 96)

    def test_unparseable_confidence_raises(self):
        with self.assertRaises(ValueError):
            get_confidence_for_label([{"Name": "Violence", "Confidence": "high"}], "Violence")
        with self.assertRaises(ValueError):
            label_normalizer.round_confidence(float("nan"))

    def test_labels_without_name_are_skipped(self):
        labels = [{"Confidence": 50.0}, {"Name": None, "Confidence": 60.0}, {"Name": "Violence", "Confidence": 70.0}]
        self.assertEqual(convert_labels_to_result(labels), "0,0,70,0,0")


if __name__ == '__main__':
    unittest.main()
