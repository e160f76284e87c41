"""
Build the keyword index for a document list and print index analytics.

Usage:
    python build_index.py --docs docs.txt [--noise-words noisewords.txt]

The document list names one document file per line; relative names resolve
against the working directory, then against the list file's directory.

Output:
  - Analytics table printed to console
  - Occurrence lists of any --keyword given, highest frequency first
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from keyword_index.index_builder import make_index
from keyword_index.tokenizer import get_keyword

LOG_FORMAT = "%(asctime)s [%(levelname)s] [Indexer] %(message)s"


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Build keyword index and show analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        required=True,
        help="File listing the documents to index, one per line",
    )
    parser.add_argument(
        "--noise-words",
        type=Path,
        default=None,
        help="Noise word file, one word per line (default: NLTK English stopwords)",
    )
    parser.add_argument(
        "--keyword",
        action="append",
        default=[],
        help="Print the occurrence list of this keyword (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each indexed document and insertion",
    )
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

    if len(index) == 0:
        print("No keywords found in the listed documents.")
        sys.exit(1)

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                        | Value |")
    print("|-------------------------------|-------|")
    print(f"| Number of indexed documents   | {len(index.documents)} |")
    print(f"| Number of unique keywords     | {len(index)} |")
    print(f"| Total keyword occurrences     | {index.num_occurrences()} |")
    print()
    print("=" * 50)

    for word in args.keyword:
        kw = get_keyword(word)
        occs = index.get_occurrences(kw) if kw else []
        print(f"\n{word}: {occs if occs else 'not indexed'}")
    print()


if __name__ == "__main__":
    main()
