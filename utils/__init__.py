"""Utility modules for passtype."""

from .deps import check_command_exists, get_missing_commands
from .fuzzy_search import entry_matches, normalize

__all__ = [
    "check_command_exists",
    "get_missing_commands",
    "entry_matches",
    "normalize",
]
