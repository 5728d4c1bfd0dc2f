# Converts Rekognition moderation labels into the oracle's fixed result format
import math

# Fixed output order; never sorted by confidence
MODERATION_CATEGORIES = (
    "Explicit Nudity",
    "Suggestive",
    "Violence",
    "Visually Disturbing",
    "Hate Symbols",
)

RESULT_SEPARATOR = ","


def round_confidence(confidence):
    """Rounds a confidence to the nearest integer, halves rounding up."""
    value = float(confidence)
    if math.isnan(value):
        raise ValueError(f"Confidence is not a number: {confidence!r}")
    return int(math.floor(value + 0.5))


def get_confidence_for_label(labels, label_name):
    """Returns the rounded confidence of the first label named label_name.

    Rekognition reports every category in the result format when it sees it,
    so a missing label scores 0 rather than being left out.
    """
    wanted = label_name.lower()
    for label in labels:
        if (label.get("Name") or "").lower() == wanted:
            return round_confidence(label.get("Confidence"))
    return 0


def convert_labels_to_result(labels):
    """Maps moderation labels to "n1,n2,n3,n4,n5" in MODERATION_CATEGORIES order.

    Args:
        labels (list): Rekognition ModerationLabels entries ({Name, Confidence, ...}).

    Returns:
        str: Five comma-separated integer confidences.
    """
    labels = labels or []
    return RESULT_SEPARATOR.join(
        str(get_confidence_for_label(labels, category))
        for category in MODERATION_CATEGORIES
    )
