"""Splitting a document into before/block/after around marker lines."""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def find_line_indexes(value: str, lines: list[str]) -> list[int]:
    """Return the positions of every line exactly equal to value."""
    return [index for index, line in enumerate(lines) if line == value]


class IsolationCursor:
    """Remembers the last marker pair so repeated isolation walks forward.

    Calling ``advance`` with the same begin/end pair as last time moves to
    the next occurrence; any other pair starts over at the first one.
    """

    def __init__(self):
        self.signature: Optional[tuple[str, str]] = None
        self.count = 0

    def advance(self, begin: str, end: str) -> int:
        """Record a marker pair and return the occurrence it selects."""
        signature = (begin, end)
        if signature == self.signature:
            self.count += 1
        else:
            self.count = 0
        self.signature = signature
        return self.count

    def step_back(self):
        """Undo one advance, used after the selected region is deleted."""
        self.count -= 1

    def reset(self):
        self.signature = None
        self.count = 0


class Partition:
    """Three ordered runs of lines: before, block, and after.

    Unisolated, ``block`` holds the whole document and the other two are
    empty. Isolated, ``before`` ends with the begin marker line, ``after``
    starts with the end marker line and ``block`` is what lies between.
    Edits to ``block`` reach the document only once ``merge`` is called.
    """

    def __init__(self, lines: Optional[list[str]] = None):
        self.before: list[str] = []
        self.block: list[str] = list(lines) if lines is not None else [""]
        self.after: list[str] = []
        self.isolated = False

    @property
    def lines(self) -> list[str]:
        """The full document as it would look after a merge."""
        return self.before + self.block + self.after

    def merge(self):
        """Fold before and after back into the block."""
        self.block = self.lines
        self.before = []
        self.after = []
        self.isolated = False

    def isolate(self, begin: str, end: str, occurrence: int = 0) -> bool:
        """Narrow the block to the lines between two marker lines.

        Args:
            begin: Exact text of the line opening the region
            end: Exact text of the line closing the region
            occurrence: Which begin marker to use (0-based)

        Returns:
            True if a region was isolated; False leaves the document merged
        """
        self.merge()
        if not begin and not end:
            return False

        begin_indexes = find_line_indexes(begin, self.block)
        end_indexes = find_line_indexes(end, self.block)
        if not begin_indexes or not end_indexes:
            logger.debug(f"Markers {begin!r}/{end!r} not present")
            return False
        if occurrence > len(begin_indexes) - 1:
            logger.debug(
                f"Only {len(begin_indexes)} region(s) open with {begin!r}, "
                f"occurrence {occurrence} requested"
            )
            return False

        begin_index = begin_indexes[occurrence]
        end_index = next((i for i in end_indexes if i > begin_index), None)
        if end_index is None:
            logger.debug(f"No {end!r} after line {begin_index}")
            return False

        lines = self.block
        self.before = lines[: begin_index + 1]
        self.block = lines[begin_index + 1 : end_index]
        self.after = lines[end_index:]
        self.isolated = True
        logger.debug(f"Isolated lines {begin_index + 1}..{end_index - 1}")
        return True

    def create(self, begin: str, end: str):
        """Append an empty region wrapped in new marker lines and isolate it."""
        self.merge()
        self.before = self.block + [begin]
        self.block = []
        self.after = [end]
        self.isolated = True

    def remove(self) -> bool:
        """Delete the isolated region together with both of its markers.

        Returns:
            False if nothing was isolated
        """
        if not self.isolated:
            return False
        self.before.pop()
        self.block = []
        self.after.pop(0)
        self.merge()
        return True
