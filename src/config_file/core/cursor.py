"""Key lookup over a block of lines with "continue from last match" state."""
import logging
from typing import NamedTuple, Optional

from ..formats.profiles import FormatProfile
from .strings import strip_leftmost, strip_rightmost, strip_whitespace

logger = logging.getLogger(__name__)


class MatchContext(NamedTuple):
    """The key most recently searched for and where it was found.

    ``key`` is None until a key has been searched for or set; ``index`` is
    None when that key is not present in the block.
    """

    key: Optional[str] = None
    index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.index is not None


NO_MATCH = MatchContext()


def scan_for_key(
    key: str, lines: list[str], profile: FormatProfile
) -> Optional[int]:
    """Find the first line that starts with a key, commented or not.

    Whitespace is removed from both the line and the search text before
    comparing, so alignment and indentation never matter.

    Args:
        key: Configuration key to look for
        lines: Lines to scan
        profile: Dialect used to spell the key and its comment

    Returns:
        Index of the first matching line, or None
    """
    target = strip_whitespace(profile.key_token(key))
    commented = strip_whitespace(profile.comment_prefix + target)
    for index, line in enumerate(lines):
        line = strip_whitespace(line)
        if line.startswith(target) or line.startswith(commented):
            return index
    return None


class FindCursor:
    """State behind repeated ``find`` calls for duplicate keys.

    While the same key is searched for again, scanning runs against a shadow
    copy of the block in which earlier matches were blanked, so each call
    surfaces the next duplicate. A new key, or a failed search, starts over
    from the live block.
    """

    def __init__(self):
        self.match = NO_MATCH
        self.shadow: Optional[list[str]] = None

    def find(self, key: str, block: list[str], profile: FormatProfile) -> MatchContext:
        if key == self.match.key and self.shadow is not None:
            working = self.shadow
        else:
            working = list(block)

        index = scan_for_key(key, working, profile)
        self.match = MatchContext(key, index)
        if index is None:
            self.shadow = None
            logger.debug(f"Key {key!r} not found")
        else:
            working[index] = ""
            self.shadow = working
            logger.debug(f"Key {key!r} found at line {index}")
        return self.match

    def forget_line(self, index: int):
        """Keep the shadow aligned after a line is deleted from the block."""
        if self.shadow is not None and index < len(self.shadow):
            del self.shadow[index]
        self.match = MatchContext(self.match.key, None)

    def reset(self):
        self.match = NO_MATCH
        self.shadow = None


def read_value(
    block: list[str], match: MatchContext, profile: FormatProfile
) -> Optional[str]:
    """Extract the value from the matched line, or None without a match."""
    if not match.found:
        return None
    line = strip_leftmost(block[match.index], profile.key_token(match.key))
    line = strip_leftmost(line, profile.value_prefix)
    return strip_rightmost(line, profile.value_suffix)


def write_value(
    block: list[str], match: MatchContext, profile: FormatProfile, value: str
) -> MatchContext:
    """Overwrite the matched line, or append one when the key is missing.

    Nothing happens unless a key has been established.

    Returns:
        The context pointing at the written line
    """
    if match.key is None:
        return match
    line = profile.key_line(match.key, value)
    if match.found:
        block[match.index] = line
        return match
    block.append(line)
    return MatchContext(match.key, len(block) - 1)


def is_commented(
    block: list[str], match: MatchContext, profile: FormatProfile
) -> bool:
    if not match.found:
        return False
    return block[match.index].strip().startswith(profile.comment_prefix.strip())


def comment_line(block: list[str], match: MatchContext, profile: FormatProfile):
    """Disable the matched line by prefixing the dialect's comment marker."""
    if not match.found or is_commented(block, match, profile):
        return
    block[match.index] = profile.comment_prefix + block[match.index]


def uncomment_line(block: list[str], match: MatchContext, profile: FormatProfile):
    """Re-enable the matched line by dropping its leftmost comment marker.

    Falls back to the trimmed marker when the line was commented with
    different spacing (``#key`` rather than ``# key``).
    """
    if not match.found or not is_commented(block, match, profile):
        return
    line = block[match.index]
    marker = profile.comment_prefix
    if marker not in line:
        marker = marker.strip()
    block[match.index] = strip_leftmost(line, marker)
