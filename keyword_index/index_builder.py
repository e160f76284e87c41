"""
Index builder: constructs the keyword index from a corpus of documents.
Each document is counted into its own keyword map, then merged into the
index before the next document is read.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable

from .occurrence import KeywordIndex, Occurrence
from .tokenizer import (
    get_keyword,
    iter_file_tokens,
    load_noise_words,
    nltk_noise_words,
    noise_word_set,
    read_word_list,
)

logger = logging.getLogger(__name__)

TokenSource = Callable[[str], Iterable[str]]


def load_keywords(
    document: str,
    tokens: Iterable[str],
    noise_words: Iterable[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Count the keywords of one document.
    Returns keyword -> Occurrence(document, frequency), one entry per keyword.
    Tokens that are not keywords are skipped; noise words match in any case.
    """
    noise = noise_word_set(noise_words)
    keywords: dict[str, Occurrence] = {}
    for token in tokens:
        kw = get_keyword(token, noise)
        if kw is None:
            continue
        if kw in keywords:
            keywords[kw].frequency += 1
        else:
            keywords[kw] = Occurrence(document, 1)
    return keywords


def build_index(
    document_ids: Iterable[str],
    noise_words: Iterable[str],
    token_source: TokenSource,
) -> KeywordIndex:
    """
    Build a keyword index from documents, in the order given.
    - token_source(document_id) yields the raw tokens of a document.
    - noise_words are compared case-insensitively.
    A document listed more than once is indexed only the first time.
    Errors raised by token_source propagate.
    """
    index = KeywordIndex()
    noise = noise_word_set(noise_words)

    for doc_id in document_ids:
        if index.has_document(doc_id):
            logger.warning("Skipping %s: already indexed", doc_id)
            continue
        keywords = load_keywords(doc_id, token_source(doc_id), noise)
        index.merge(keywords, document=doc_id)
        logger.debug("Indexed %s (%d keywords)", doc_id, len(keywords))

    logger.info(
        "Index holds %d keywords over %d documents", len(index), len(index.documents)
    )
    return index


def _resolve_document(name: str, base_dir: Path) -> Path:
    """Resolve a listed document name: as given, else next to the list file."""
    path = Path(name)
    if path.is_absolute() or path.exists():
        return path
    candidate = base_dir / path
    return candidate if candidate.exists() else path


def make_index(
    docs_file: Path,
    noise_words_file: Path | None = None,
) -> KeywordIndex:
    """
    Index every document named in docs_file (one name per line).
    Noise words come from noise_words_file, or from the NLTK stopwords
    corpus when no file is given. Missing files raise FileNotFoundError.
    Occurrences are recorded under the document names as listed.
    """
    docs_file = Path(docs_file)
    document_ids = read_word_list(docs_file)
    if noise_words_file is not None:
        noise = load_noise_words(noise_words_file)
    else:
        noise = nltk_noise_words()
    base_dir = docs_file.parent

    def token_source(doc_id: str) -> Iterable[str]:
        return iter_file_tokens(_resolve_document(doc_id, base_dir))

    return build_index(document_ids, noise, token_source)
