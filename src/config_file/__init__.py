"""Key-based editing of structured text configuration files."""

from .core import ConfigFile, MatchContext, safe_edit_context
from .formats import FormatProfile, profile_for_path, resolve_profile

__version__ = "0.1.0"

__all__ = [
    # Editor
    "ConfigFile",
    "MatchContext",
    "safe_edit_context",
    # Dialects
    "FormatProfile",
    "resolve_profile",
    "profile_for_path",
]
