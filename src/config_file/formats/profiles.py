"""Format profiles describing how each configuration dialect spells a key line."""
import logging
from pathlib import Path
from typing import NamedTuple, Union

from ..core.strings import rightmost_segment

logger = logging.getLogger(__name__)


class FormatProfile(NamedTuple):
    """Marker templates for one configuration dialect.

    A key line has the shape
    ``key_prefix + key + key_suffix + value_prefix + value + value_suffix``
    and is disabled by prepending ``comment_prefix``.
    """

    name: str
    comment_prefix: str
    key_prefix: str
    key_suffix: str
    value_prefix: str
    value_suffix: str

    def key_token(self, key: str) -> str:
        """Text that introduces the given key on its line."""
        return self.key_prefix + key + self.key_suffix

    def key_line(self, key: str, value: str) -> str:
        """Synthesize a full, uncommented key line."""
        return self.key_token(key) + self.value_prefix + value + self.value_suffix


INI = FormatProfile("ini", "# ", "", " =", " ", "")
PHP_DEFINE = FormatProfile("php-define", "// ", "define('", "',", "'", "');")
PHP_UNQUOTED = FormatProfile("php-unquoted", "// ", "define('", "',", " ", ");")
APACHE = FormatProfile("conf", "#", "", " ", "", "")
MYSQL = FormatProfile("cnf", "# ", "", " =", " ", "")
PHP_VARIABLE = FormatProfile("php-variable", "// ", "$", " =", " '", "';")

# key='value'; with // comments
DEFAULT_PROFILE = FormatProfile("default", "// ", "", "=", "'", "';")

PROFILES: dict[str, FormatProfile] = {
    "ini": INI,
    "php": PHP_DEFINE,
    "php-define": PHP_DEFINE,
    "php-unquoted": PHP_UNQUOTED,
    "conf": APACHE,
    "cnf": MYSQL,
    "php-variable": PHP_VARIABLE,
}


def resolve_profile(token: str) -> FormatProfile:
    """Look up the profile for a file-type token.

    Unknown tokens fall back to the generic quoted-assignment profile;
    resolution never fails.
    """
    profile = PROFILES.get(token)
    if profile is None:
        logger.debug(f"No profile for '{token}', using {DEFAULT_PROFILE.name}")
        return DEFAULT_PROFILE
    return profile


def profile_for_path(file_path: Union[str, Path]) -> FormatProfile:
    """Pick a profile from the text after the last '.' in a path."""
    return resolve_profile(rightmost_segment(str(file_path), "."))
