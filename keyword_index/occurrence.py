"""
Occurrence and keyword index data structures.

An occurrence records how often a keyword appears in one document.
The keyword index maps each keyword to its occurrences across the corpus,
kept in descending order of frequency after every merge.
"""

import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document name (typically a file path)
    - frequency: number of times the keyword occurs in the document
    """

    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of occs into its place by descending frequency.

    occs[0..n-2] must already be in descending order. The spot is found by
    binary search; an entry whose frequency equals existing ones goes after
    them, so earlier documents keep their rank.

    Returns the midpoint indexes examined by the search, in order, or None
    when occs holds a single entry. The midpoints are only a diagnostic.
    """
    if not occs:
        raise ValueError("cannot insert into an empty occurrence list")
    if len(occs) == 1:
        return None

    last = len(occs) - 1
    freq = occs[last].frequency
    lo, hi = 0, last - 1
    mids: list[int] = []
    idx = None
    while lo <= hi:
        mid = (lo + hi) // 2
        mids.append(mid)
        if freq > occs[mid].frequency:
            hi = mid - 1
        elif freq < occs[mid].frequency:
            lo = mid + 1
        else:
            # Skip past the run of equal frequencies
            idx = mid + 1
            while idx < last and occs[idx].frequency == freq:
                idx += 1
            break
    if idx is None:
        idx = lo

    if idx != last:
        occs.insert(idx, occs.pop())
    return mids


class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrences in descending frequency.
    Each merge inserts one document's occurrences via binary search, so every
    list stays sorted between merges. Merges and queries are serialized by a lock.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._documents: set[str] = set()
        self._lock = threading.Lock()

    def merge(
        self,
        keywords: dict[str, Occurrence],
        document: str | None = None,
    ) -> None:
        """
        Merge one document's keyword occurrences into the index.
        Pass document to record a document even when it has no keywords.
        A document may only be merged once.
        """
        documents = {occ.document for occ in keywords.values()}
        if document is not None:
            documents.add(document)
        with self._lock:
            already = documents & self._documents
            if already:
                raise ValueError(f"document already merged: {sorted(already)[0]}")
            for keyword, occ in keywords.items():
                if keyword not in self._index:
                    self._index[keyword] = [occ]
                    continue
                occs = self._index[keyword]
                occs.append(occ)
                mids = insert_last_occurrence(occs)
                logger.debug("Inserted %r for %r, midpoints %s", occ, keyword, mids)
            self._documents.update(documents)

    def get_occurrences(self, keyword: str) -> list[Occurrence]:
        """Return a copy of the occurrence list for a keyword, or empty list."""
        with self._lock:
            return list(self._index.get(keyword, []))

    def lookup(self, *keywords: str) -> list[list[Occurrence] | None]:
        """
        Return copies of the occurrence lists for several keywords, read
        together under the lock. An absent keyword yields None.
        """
        with self._lock:
            return [
                list(self._index[kw]) if kw in self._index else None
                for kw in keywords
            ]

    def has_document(self, document: str) -> bool:
        with self._lock:
            return document in self._documents

    @property
    def documents(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._documents)

    def num_occurrences(self) -> int:
        with self._lock:
            return sum(len(occs) for occs in self._index.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        with self._lock:
            return keyword in self._index
