"""
Keyword extraction and token sources for the keyword index.
Reads word lists and documents, splits them into whitespace-delimited tokens,
and turns tokens into keywords (trailing punctuation stripped, lower case,
alphabetic only, not a noise word).
"""

import warnings
from pathlib import Path
from typing import Iterable, Iterator
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk import download as _nltk_download
from nltk.corpus import stopwords as _nltk_stopwords

# Trailing characters stripped from a word before the keyword test
PUNCTUATION = frozenset(".,?:;!")

DEFAULT_NOISE_LANGUAGE = "english"

HTML_SUFFIXES = {".html", ".htm"}


class NoiseWords(frozenset):
    """Noise word set, lower-cased."""


def noise_word_set(words: Iterable[str]) -> NoiseWords:
    """Lower-case noise words for keyword tests; a NoiseWords set is returned as is."""
    if isinstance(words, NoiseWords):
        return words
    return NoiseWords(w.lower() for w in words)


def get_keyword(word: str, noise_words: Iterable[str] = NoiseWords()) -> str | None:
    """
    Return word as a keyword, or None if it fails the keyword test.

    Trailing punctuation (. , ? : ; !) is stripped repeatedly, never leaving
    an empty word. The rest must be alphabetic letters only and must not be a
    noise word. Comparison is case-insensitive; the keyword is lower case.
    """
    word = word.strip()
    while len(word) > 1 and word[-1] in PUNCTUATION:
        word = word[:-1]
    word = word.lower()
    if not word or not word.isalpha():
        return None
    if word in noise_word_set(noise_words):
        return None
    return word


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_word_list(filepath: Path) -> list[str]:
    """
    Read a list file (document names or noise words), one entry per line.
    Entries are split on whitespace like the document tokens are.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"List file not found: {filepath}")
    return read_text_file(filepath).split()


def load_noise_words(filepath: Path) -> NoiseWords:
    """Load noise words from a file, lower-cased."""
    return noise_word_set(read_word_list(filepath))


def nltk_noise_words(language: str = DEFAULT_NOISE_LANGUAGE) -> NoiseWords:
    """Noise words from the NLTK stopwords corpus (downloaded if missing)."""
    _nltk_download("stopwords", quiet=True)
    return noise_word_set(_nltk_stopwords.words(language))


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def iter_file_tokens(filepath: Path) -> Iterator[str]:
    """
    Yield the whitespace-delimited tokens of a document file, in order.
    HTML documents are reduced to their visible text first.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Document not found: {filepath}")
    text = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        text = extract_text_from_html(text)
    yield from text.split()
