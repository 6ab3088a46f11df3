"""Configuration dialect profiles."""

from .profiles import (
    DEFAULT_PROFILE,
    PROFILES,
    FormatProfile,
    profile_for_path,
    resolve_profile,
)

__all__ = [
    "FormatProfile",
    "DEFAULT_PROFILE",
    "PROFILES",
    "resolve_profile",
    "profile_for_path",
]
