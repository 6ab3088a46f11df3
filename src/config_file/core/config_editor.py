"""Key-based editing of ini, Apache, MySQL and PHP style configuration files."""
import logging
from pathlib import Path
from typing import Optional, Union

from ..formats.profiles import (
    DEFAULT_PROFILE,
    FormatProfile,
    profile_for_path,
    resolve_profile,
)
from .cursor import (
    FindCursor,
    MatchContext,
    comment_line,
    is_commented,
    read_value,
    uncomment_line,
    write_value,
)
from .regions import IsolationCursor, Partition
from .safety import write_text_atomically

logger = logging.getLogger(__name__)


def split_lines(contents: str) -> list[str]:
    """Normalize CRLF to LF and split into lines."""
    return contents.replace("\r\n", "\n").split("\n")


class ConfigFile:
    """Query and update configuration files by key.

    The file is held as a list of lines. ``isolate`` narrows every key
    operation to the lines between two marker lines; ``find`` locates a key
    (repeat it to walk through duplicates) and ``get``, ``set``, ``remove``,
    ``comment`` and ``uncomment`` act on whatever ``find`` matched last.
    Nothing here parses the file: keys are matched by line prefix using the
    dialect's :class:`FormatProfile`, ignoring whitespace.

    Most callers only need ``load``, ``get_key``, ``set_key`` and ``save``::

        config = ConfigFile("wp-config.php")
        config.set_key("DB_NAME", "wordpress")
        config.save("wp-config.php")
    """

    def __init__(
        self,
        file_path: Optional[Union[str, Path]] = None,
        file_type: Optional[str] = None,
        encoding: str = "utf-8",
        lock_timeout: float = 30,
    ):
        """Initialize the editor, loading file_path if given.

        Args:
            file_path: Configuration file to load
            file_type: Profile token overriding the file extension
                (``ini``, ``php``, ``php-define``, ``php-unquoted``, ``conf``,
                ``cnf``, ``php-variable``)
            encoding: Text encoding for load and save
            lock_timeout: Seconds to wait for the file lock when saving
        """
        self.encoding = encoding
        self.lock_timeout = lock_timeout
        self.profile: FormatProfile = (
            resolve_profile(file_type) if file_type else DEFAULT_PROFILE
        )
        self._partition = Partition()
        self._isolation = IsolationCursor()
        self._finder = FindCursor()

        if file_path is not None:
            self.load(file_path, file_type)

    @property
    def match(self) -> MatchContext:
        """The key and line index targeted by get/set/remove/comment."""
        return self._finder.match

    @property
    def block(self) -> list[str]:
        """Lines currently in scope for key operations."""
        return self._partition.block

    @property
    def lines(self) -> list[str]:
        """The whole document including any isolated region's surroundings."""
        return self._partition.lines

    def set_type(self, file_type: str):
        """Switch the dialect used to match and write key lines."""
        self.profile = resolve_profile(file_type)
        logger.debug(f"Using {self.profile.name} profile for '{file_type}'")

    # Persistence

    def load(self, file_path: Union[str, Path], file_type: Optional[str] = None) -> bool:
        """Read a configuration file, replacing the current document.

        A missing file loads as an empty document. Bytes that are not valid
        in the encoding are kept as surrogate escapes and written back
        unchanged by ``save``.

        Args:
            file_path: File to read
            file_type: Profile token overriding the file extension

        Returns:
            False if the file exists but could not be read
        """
        file_path = Path(file_path)
        if file_type:
            self.set_type(file_type)
        else:
            self.profile = profile_for_path(file_path)

        self._isolation.reset()
        self._finder.reset()
        self._partition = Partition()

        if not file_path.exists():
            logger.info(f"{file_path} does not exist, starting empty")
            return True

        try:
            with open(
                file_path, encoding=self.encoding, errors="surrogateescape", newline=""
            ) as f:
                contents = f.read()
        except OSError as e:
            logger.error(f"Failed to load {file_path}: {e}")
            return False

        self._partition = Partition(split_lines(contents))
        logger.info(f"Loaded {len(self._partition.block)} lines from {file_path}")
        return True

    def save(self, file_path: Union[str, Path]) -> bool:
        """Merge any isolated region and write the document to file_path.

        Lines are joined with LF; no trailing newline is added. The target is
        replaced in one step under a lock held on ``<file_path>.lock``, which
        stays behind next to the file after the save.

        Returns:
            True if the file was written
        """
        self.merge()
        data = "\n".join(self._partition.block)

        try:
            write_text_atomically(file_path, data, self.encoding, self.lock_timeout)

        except Exception as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

        logger.info(f"Saved {len(self._partition.block)} lines to {file_path}")
        return True

    # Block contents

    def get_block(self) -> str:
        """Return the lines in scope joined with LF."""
        return "\n".join(self._partition.block)

    def set_block(self, contents: str):
        """Replace the lines in scope with the given text."""
        self._partition.block = split_lines(contents)
        self._finder.reset()

    def replace_within_block(self, search: str, replace: str):
        """Plain text search and replace over the lines in scope."""
        self.set_block(self.get_block().replace(search, replace))

    # Regions

    def merge(self):
        """Fold any isolated region back into the document."""
        self._partition.merge()
        self._finder.reset()

    def isolate(self, begin: str = "", end: str = "") -> bool:
        """Narrow key operations to the lines between two marker lines.

        Markers match whole lines exactly. Calling again with the same pair
        moves on to the next region opened by ``begin``. Calling with no
        markers, or with markers that are not found, leaves the whole
        document in scope.

        Args:
            begin: Line that opens the region
            end: Line that closes the region

        Returns:
            True if a region was isolated
        """
        self._finder.reset()
        if not begin and not end:
            self._partition.merge()
            self._isolation.reset()
            return False

        occurrence = self._isolation.advance(begin, end)
        if self._partition.isolate(begin, end, occurrence):
            return True

        self._isolation.reset()
        return False

    def create_region(self, begin: str, end: str):
        """Append a new empty region at the end of the file and isolate it."""
        self._partition.create(begin, end)
        self._isolation.reset()
        self._finder.reset()

    def remove_region(self):
        """Delete the isolated region and its marker lines.

        Does nothing unless a region is isolated. Repeating the ``isolate``
        call that selected it afterwards reaches the region that followed.
        """
        if self._partition.remove():
            self._isolation.step_back()
            self._finder.reset()

    # Keys

    def find(self, key: str) -> bool:
        """Locate a key in scope, commented or not.

        Calling again with the same key finds its next occurrence.

        Returns:
            True if the key was found
        """
        return self._finder.find(key, self._partition.block, self.profile).found

    def get(self) -> Optional[str]:
        """Value of the key matched by the last find, or None.

        Markers are stripped as literal text, so a line spaced differently
        from the profile (``define( 'A', 'b' );`` for ``php``) is found but
        comes back with its key markers still attached.
        """
        return read_value(self._partition.block, self.match, self.profile)

    def get_key(self, key: str, default: str = "") -> str:
        """Return the value of the first occurrence of key in scope, or default.

        Every call searches from the top, so repeated calls on a duplicated
        key keep returning the first value; use ``find`` and ``get`` to walk
        the duplicates.
        """
        self._finder.reset()
        if self.find(key):
            return self.get()
        return default

    def set(self, value: str):
        """Write value for the key of the last find.

        Overwrites the matched line, or appends a new line to the scope if
        the key was not found. Ignored if no key was ever searched for.
        """
        self._finder.match = write_value(
            self._partition.block, self.match, self.profile, value
        )

    def set_key(self, key: str, value: str):
        """Create or update key with value."""
        self._finder.reset()
        self.find(key)
        self.set(value)

    def remove(self):
        """Delete the line matched by the last find."""
        if not self.match.found:
            return
        index = self.match.index
        del self._partition.block[index]
        self._finder.forget_line(index)

    def is_commented(self) -> bool:
        """Whether the line matched by the last find is commented out."""
        return is_commented(self._partition.block, self.match, self.profile)

    def comment(self):
        comment_line(self._partition.block, self.match, self.profile)

    def uncomment(self):
        uncomment_line(self._partition.block, self.match, self.profile)
