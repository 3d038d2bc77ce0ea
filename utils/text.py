"""
Text Processing Utilities
"""


def shorten(text, max_length=50):
    """
    Shorten text for logging

    Args:
        text: Text to shorten
        max_length: Maximum length

    Returns:
        Shortened text with ellipsis if needed
    """
    if not isinstance(text, str):
        text = str(text)
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def normalize_search_text(text):
    """
    Trim and lowercase free text for substring matching

    Args:
        text: Query or label (None is treated as empty)

    Returns:
        Normalized string
    """
    if not text:
        return ""
    return text.strip().lower()


def split_csv(text):
    """
    Split a comma-separated parameter, dropping blanks

    "Showers, , Sauna" -> ["Showers", "Sauna"]
    """
    if not text:
        return []
    return [part.strip() for part in text.split(',') if part.strip()]
