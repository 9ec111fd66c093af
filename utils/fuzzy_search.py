# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""
Fuzzy matching of typed text against password store entry names.
Used as the completion match function so that "work" finds "email/work"
and small typos still find their entry.
"""

import logging
from functools import lru_cache

from rapidfuzz import fuzz, utils

logger = logging.getLogger("FuzzySearch")


def normalize(text: str) -> str:
    """Case- and punctuation-insensitive form of an entry name or query."""
    return utils.default_process(text) if text else ""


@lru_cache(maxsize=4096)
def score_entry(query: str, entry: str) -> float:
    """Similarity of ``query`` to the best matching part of ``entry``, 0-100."""
    return fuzz.partial_ratio(query, entry, processor=normalize)


def entry_matches(query: str, entry: str, fuzzy: bool = True, threshold: float = 75) -> bool:
    """
    Decide whether ``entry`` should be offered for ``query``.

    Prefix and substring matches (case-insensitive) always count. With
    ``fuzzy`` enabled, entries scoring at least ``threshold`` count too.
    """
    if not query:
        return True

    query_folded = query.casefold()
    entry_folded = entry.casefold()
    if entry_folded.startswith(query_folded) or query_folded in entry_folded:
        return True

    if not fuzzy:
        return False

    return score_entry(query, entry) >= threshold
