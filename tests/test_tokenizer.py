import pytest

from keyword_index.tokenizer import (
    extract_text_from_html,
    get_keyword,
    iter_file_tokens,
    load_noise_words,
    noise_word_set,
    read_text_file,
    read_word_list,
)

NOISE = frozenset({"the", "is"})


@pytest.mark.parametrize(
    "word, expected",
    [
        ("Cat", "cat"),
        ("sat.", "sat"),
        ("dogs!!!", "dogs"),
        ("what?!", "what"),
        ("  Hello,  ", "hello"),
        ("end.;:", "end"),
    ],
)
def test_keyword_accepted(word, expected):
    assert get_keyword(word, NOISE) == expected


@pytest.mark.parametrize(
    "word",
    ["The", "IS", "is.", "", "   ", "don't", "abc123", "e-mail", "(word)", "!!!", "."],
)
def test_keyword_rejected(word):
    assert get_keyword(word, NOISE) is None


def test_leading_punctuation_is_kept_and_rejected():
    assert get_keyword(",word") is None


def test_keyword_is_stable():
    for word in ["Cat", "sat.", "dogs!!!", "Hello,"]:
        kw = get_keyword(word, NOISE)
        assert get_keyword(kw, NOISE) == kw


def test_read_word_list_splits_lines(tmp_path):
    path = tmp_path / "docs.txt"
    path.write_text("a.txt\nb.txt\n\n  c.txt  \n", encoding="utf-8")
    assert read_word_list(path) == ["a.txt", "b.txt", "c.txt"]


def test_read_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_word_list(tmp_path / "missing.txt")


def test_load_noise_words_lowercases(tmp_path):
    path = tmp_path / "noise.txt"
    path.write_text("The\nIS\na\n", encoding="utf-8")
    assert load_noise_words(path) == {"the", "is", "a"}


def test_read_text_file_falls_back_to_latin1(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes("caf\xe9 au lait".encode("latin-1"))
    assert read_text_file(path) == "caf\xe9 au lait"


def test_iter_file_tokens_plain_text(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("The Cat\nsat.  on\tthe mat", encoding="utf-8")
    assert list(iter_file_tokens(path)) == ["The", "Cat", "sat.", "on", "the", "mat"]


def test_iter_file_tokens_html(tmp_path):
    path = tmp_path / "doc.html"
    path.write_text(
        "<html><head><title>Dogs</title><script>var x = 1;</script></head>"
        "<body><p>Good <b>dogs</b> bark.</p></body></html>",
        encoding="utf-8",
    )
    tokens = list(iter_file_tokens(path))
    assert tokens == ["Dogs", "Good", "dogs", "bark."]


def test_iter_file_tokens_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(iter_file_tokens(tmp_path / "missing.txt"))


def test_extract_text_from_html_drops_style():
    html = "<html><style>p { color: red; }</style><p>hello world</p></html>"
    assert extract_text_from_html(html) == "hello world"


def test_noise_words_match_in_any_case():
    assert get_keyword("The", {"The"}) is None
    assert get_keyword("the", ["THE"]) is None
    assert get_keyword("Cat.", {"cAT"}) is None
    assert get_keyword("dog", {"The"}) == "dog"


def test_noise_word_set_lowercases_once():
    noise = noise_word_set(["The", "IS"])
    assert noise == {"the", "is"}
    assert noise_word_set(noise) is noise
