"""Keyword index package."""

from .occurrence import Occurrence, KeywordIndex, insert_last_occurrence
from .index_builder import build_index, load_keywords, make_index
from .search import top5search, top_k_search
from .tokenizer import get_keyword, iter_file_tokens, load_noise_words, noise_word_set
