# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""
Password store scanning.

Walks the store root and turns every encrypted file into an entry name:
the path relative to the root with the extension stripped, e.g.
``email/work.gpg`` becomes ``email/work``.
"""

import logging
import os
from typing import List

from .exceptions import EntryNameDecodeError, StoreNotFoundError, StoreReadError

logger = logging.getLogger("StoreScanner")


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_entry_file(path: str, name: str, extension: str) -> bool:
    """True for regular (non-symlink) files with exactly the store extension."""
    if os.path.splitext(name)[1] != extension:
        return False
    return os.path.isfile(path) and not os.path.islink(path)


def entry_name(store_dir: str, path: str, extension: str) -> str:
    relative = os.path.relpath(path, store_dir)
    name = relative[: -len(extension)]
    if os.sep != "/":
        name = name.replace(os.sep, "/")
    try:
        # os.walk smuggles undecodable bytes through as lone surrogates
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EntryNameDecodeError(
            f"Entry path is not valid UTF-8: {relative!r}"
        ) from e
    return name


def scan_store(store_dir: str, extension: str = ".gpg") -> List[str]:
    """Collect the names of all entries in the password store.

    Hidden directories are pruned before descending, so nothing below them
    is ever looked at. Hidden files are skipped as well. Visible directories
    are walked but never returned.

    Raises:
        StoreNotFoundError: the store root does not exist
        StoreReadError: the root or one of its subdirectories cannot be listed
        EntryNameDecodeError: an entry path is not valid text
    """
    if not os.path.isdir(store_dir):
        raise StoreNotFoundError(f"Password store not found at {store_dir}")

    logger.debug("Collecting password store entries")

    def on_error(error: OSError):
        raise StoreReadError(
            f"Unable to read password store directory {error.filename}: "
            f"{error.strerror}"
        ) from error

    choices: List[str] = []
    skipped = 0
    for dirpath, dirnames, filenames in os.walk(store_dir, onerror=on_error):
        # Prune in place so os.walk never enters hidden directories
        dirnames[:] = sorted(d for d in dirnames if not is_hidden(d))

        for filename in sorted(filenames):
            path = os.path.join(dirpath, filename)
            if is_hidden(filename) or not is_entry_file(path, filename, extension):
                skipped += 1
                continue
            choices.append(entry_name(store_dir, path, extension))

    logger.info("Found %d password store entries", len(choices))
    logger.debug("Skipped %d files that are not %s entries", skipped, extension)
    return choices
