"""String helpers used to carve keys and values out of configuration lines."""
import re

_WHITESPACE = re.compile(r"\s+")


def strip_whitespace(text: str) -> str:
    """Remove every run of whitespace from text."""
    return _WHITESPACE.sub("", text)


def strip_leftmost(text: str, substring: str) -> str:
    """Remove the leftmost occurrence of substring and everything before it.

    Args:
        text: Text to trim
        substring: Marker to search for

    Returns:
        The remainder after the marker, or text unchanged if it is absent
    """
    if not substring:
        return text
    position = text.find(substring)
    if position == -1:
        return text
    return text[position + len(substring) :]


def strip_rightmost(text: str, substring: str) -> str:
    """Remove the rightmost occurrence of substring and everything after it.

    Args:
        text: Text to trim
        substring: Marker to search for

    Returns:
        The text before the marker, or text unchanged if it is absent
    """
    if not substring:
        return text
    position = text.rfind(substring)
    if position == -1:
        return text
    return text[:position]


def rightmost_segment(text: str, separator: str) -> str:
    """Return the part of text after the last separator (all of it if absent)."""
    position = text.rfind(separator)
    if position == -1:
        return text
    return text[position + len(separator) :]
