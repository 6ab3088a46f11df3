"""Locked, atomic rewrites of configuration files."""
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock

logger = logging.getLogger(__name__)


class LockedFileWriter:
    """Context manager that replaces one file's contents in a single step.

    While active it holds ``<file>.lock`` so two editors never interleave
    writes. ``write`` stages the new text in a temp file beside the target
    and ``commit`` moves it over the target with ``os.replace``, carrying
    over the old file's permission bits. Until ``commit`` the target is
    untouched, so a failure anywhere earlier leaves it as it was. An
    uncommitted temp file is deleted on exit.

    The lock file itself is left in place after release; deleting it would
    let a waiting process and a newcomer lock different inodes.
    """

    def __init__(self, file_path: Union[str, Path], timeout: float = 30):
        """Initialize the writer.

        Args:
            file_path: File to rewrite; it need not exist yet
            timeout: Seconds to wait for the lock
        """
        self.file_path = Path(file_path)
        self.lock = FileLock(f"{self.file_path}.lock", timeout=timeout)
        self.temp_path: Optional[Path] = None

    def __enter__(self):
        self.lock.acquire()
        logger.debug(f"Locked {self.file_path}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if self.temp_path is not None and self.temp_path.exists():
                os.remove(self.temp_path)
                logger.debug(f"Discarded uncommitted {self.temp_path}")
        finally:
            self.lock.release()
            logger.debug(f"Unlocked {self.file_path}")

    def write(self, data: str, encoding: str = "utf-8") -> Path:
        """Stage data in a temp file next to the target.

        Text goes out without newline translation, and undecodable bytes
        captured on read as surrogate escapes are written back unchanged.

        Returns:
            Path of the staged file
        """
        with tempfile.NamedTemporaryFile(
            "w",
            dir=self.file_path.parent,
            prefix=f".{self.file_path.name}.",
            suffix=".tmp",
            delete=False,
            encoding=encoding,
            errors="surrogateescape",
            newline="",
        ) as tmp:
            self.temp_path = Path(tmp.name)
            tmp.write(data)
        return self.temp_path

    def commit(self):
        """Move the staged file over the target."""
        if self.temp_path is None or not self.temp_path.exists():
            raise FileNotFoundError(f"Nothing staged for {self.file_path}")

        if self.file_path.exists():
            shutil.copymode(self.file_path, self.temp_path)
        os.replace(self.temp_path, self.file_path)
        logger.info(f"Replaced {self.file_path}")
        self.temp_path = None


@contextmanager
def safe_edit_context(file_path: Union[str, Path], timeout: float = 30):
    """Lock file_path for a rewrite.

    Yields:
        LockedFileWriter instance
    """
    with LockedFileWriter(file_path, timeout) as writer:
        yield writer


def write_text_atomically(
    file_path: Union[str, Path], data: str, encoding: str = "utf-8", timeout: float = 30
):
    """Replace file_path with data under its lock, all or nothing."""
    with safe_edit_context(file_path, timeout) as writer:
        writer.write(data, encoding)
        writer.commit()
