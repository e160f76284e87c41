"""
"kw1 OR kw2" search over the keyword index.

Both occurrence lists are sorted by descending frequency, so the result is a
plain two-pointer merge: the list with the higher current frequency
contributes its document, ties go to kw1, and documents already in the
result are skipped.
"""

from __future__ import annotations

from typing import List, Optional

from .occurrence import KeywordIndex, Occurrence

# Maximum number of documents returned by a search
TOP_K = 5


def merge_occurrences_or(
    occs1: List[Occurrence],
    occs2: List[Occurrence],
    k: int = TOP_K,
) -> List[str]:
    """
    Merge two descending-frequency occurrence lists (OR query).
    Returns up to k distinct document names, highest frequency first.
    On equal frequency the entry from occs1 is taken first.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    result: List[str] = []
    i = j = 0
    while len(result) < k and (i < len(occs1) or j < len(occs2)):
        if j >= len(occs2) or (i < len(occs1) and occs1[i].frequency >= occs2[j].frequency):
            doc = occs1[i].document
            i += 1
        else:
            doc = occs2[j].document
            j += 1
        if doc not in result:
            result.append(doc)
    return result


def top_k_search(
    index: KeywordIndex,
    kw1: str,
    kw2: str,
    k: int = TOP_K,
) -> Optional[List[str]]:
    """
    Documents in which kw1 or kw2 occurs, in descending order of frequency,
    at most k of them. A document appears once. Returns None if neither
    keyword is in the index.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    occs1, occs2 = index.lookup(kw1, kw2)
    if occs1 is None and occs2 is None:
        return None
    return merge_occurrences_or(occs1 or [], occs2 or [], k)


def top5search(index: KeywordIndex, kw1: str, kw2: str) -> Optional[List[str]]:
    """Top five documents for "kw1 OR kw2", or None if neither is indexed."""
    return top_k_search(index, kw1, kw2, TOP_K)
