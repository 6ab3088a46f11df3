"""Core configuration editing modules."""

from .config_editor import ConfigFile
from .cursor import FindCursor, MatchContext, scan_for_key
from .regions import IsolationCursor, Partition, find_line_indexes
from .safety import LockedFileWriter, safe_edit_context, write_text_atomically

__all__ = [
    # Editor
    'ConfigFile',

    # Key lookup
    'FindCursor',
    'MatchContext',
    'scan_for_key',

    # Regions
    'IsolationCursor',
    'Partition',
    'find_line_indexes',

    # Safety mechanisms
    'LockedFileWriter',
    'safe_edit_context',
    'write_text_atomically',
]
