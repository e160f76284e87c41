"""
Interactive search over a keyword index built from a document list.

Each query line holds two words; the top documents containing either word
are printed, highest frequency first. Query words go through the same
keyword test as document words.

Usage (from repo root):
    python -m keyword_index.search_cli \
        --docs docs.txt \
        --noise-words noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .index_builder import make_index
from .occurrence import KeywordIndex
from .search import TOP_K, top_k_search
from .tokenizer import get_keyword

LOG_FORMAT = "%(asctime)s [%(levelname)s] [Search] %(message)s"


def parse_query(raw_query: str) -> Optional[List[str]]:
    """
    Split a query line into two words. Returns None unless there are exactly two.
    """
    words = raw_query.split()
    if len(words) != 2:
        return None
    return words


def run_query(
    index: KeywordIndex,
    raw_query: str,
    top_k: int = TOP_K,
) -> Optional[List[str]]:
    """
    Answer one "word1 word2" query line. A word that fails the keyword
    test matches nothing; noise words are never indexed, so
    they match nothing either.
    """
    words = parse_query(raw_query)
    if words is None:
        raise ValueError("Enter exactly two words.")
    kw1, kw2 = (get_keyword(w) or "" for w in words)
    return top_k_search(index, kw1, kw2, top_k)


def run_search_loop(index: KeywordIndex, top_k: int = TOP_K) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {len(index.documents)} documents, {len(index)} keywords.")
    print("Enter two words per query (OR semantics). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        try:
            results = run_query(index, raw_query, top_k=top_k)
        except ValueError as e:
            print(e)
            continue
        if not results:
            print("No documents matched the query.")
            continue

        for rank, doc in enumerate(results, start=1):
            print(f"{rank:2d}. {doc}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Keyword OR search CLI.")
    parser.add_argument(
        "--docs",
        type=Path,
        required=True,
        help="File listing the documents to index, one per line.",
    )
    parser.add_argument(
        "--noise-words",
        type=Path,
        default=None,
        help="Noise word file (default: NLTK English stopwords).",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=TOP_K,
        help="Number of top results to show.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug detail.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        index = make_index(args.docs, args.noise_words)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    run_search_loop(index, top_k=args.top)


if __name__ == "__main__":
    main()
