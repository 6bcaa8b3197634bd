import pytest
from hangman.datasets import build_wordset, load_words, save_words

DESCRIPTION = (
    "A young brewer inherits a crumbling brewery in the mountains. "
    "Brewing, bottling and bargaining: her_first season is chaotic!! "
    "Brewing again (2nd edition, 123456)."
)


def test_build_wordset_min_length_and_dedupe():
    words = build_wordset(DESCRIPTION, 6)
    assert words == {
        "brewer", "inherits", "crumbling", "brewery", "mountains", "Brewing",
        "bottling", "bargaining", "her_first", "season", "chaotic",
        "edition", "123456",
    }
    assert all(len(w) >= 6 for w in words)


def test_build_wordset_is_case_sensitive():
    assert build_wordset("Brewing brewing BREWING brewing", 6) == {"Brewing", "brewing", "BREWING"}


@pytest.mark.parametrize("min_len", [1, 4, 6, 9, 30])
def test_build_wordset_respects_min_length(min_len):
    assert all(len(w) >= min_len for w in build_wordset(DESCRIPTION, min_len))


def test_build_wordset_idempotent():
    assert build_wordset(DESCRIPTION, 6) == build_wordset(DESCRIPTION, 6)


def test_build_wordset_empty_text():
    assert build_wordset("", 6) == set()
    assert build_wordset("!!! ... ???", 1) == set()


def test_save_and_load_words(tmp_path):
    p = tmp_path / "cache" / "hangman_X.txt"
    save_words(p, {"planet", "garden"})
    assert p.read_text(encoding="utf-8") == "garden\nplanet\n"
    assert load_words(p) == {"planet", "garden"}


def test_load_words_keeps_blank_lines(tmp_path):
    p = tmp_path / "w.txt"
    p.write_text("planet\r\n\n   \ngarden\n", encoding="utf-8")
    assert load_words(p) == {"planet", "", "   ", "garden"}


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")
