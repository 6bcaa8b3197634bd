from dataclasses import replace

from apps.cli import play as cli
from hangman import DEFAULT_CONFIG
from hangman.datasets import DictionaryStore, save_words
from hangman.engine import Round
from hangman.harness import Player

LONG = ["adventure", "bookshelf", "character", "happiness", "wonderful"]
SHORT = ["planet", "garden", "bright", "silver", "forest", "castle", "dragon",
         "winter", "summer", "meadow", "stream", "island", "harbor", "valley",
         "candle", "mirror", "shadow", "spirit"]


def _feeder(answers):
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return ask


def test_play_loop_reveals_word(capsys):
    rnd = Round("planet", SHORT)
    player = Player()
    # bad position, out-of-range position, blank char, then the real guesses
    answers = ["x", "9", "0", ""]
    for pos, ch in enumerate("planet"):
        answers += [str(pos), ch]
    assert cli.play(rnd, player, ask=_feeder(answers), show_probs=True) is True
    out = capsys.readouterr().out
    assert "Not a number" in out
    assert "Solved: planet" in out


def test_play_loop_stops_on_eof():
    rnd = Round("planet", SHORT)
    assert cli.play(rnd, Player(), ask=_feeder(["0", "p"])) is False
    assert rnd.revealed[0] is True


def test_pick_word_is_deterministic():
    words = set(SHORT)
    assert cli.pick_word(words, 7) == cli.pick_word(set(reversed(SHORT)), 7)
    assert cli.pick_word(words, 7) in words


def test_main_reports_setup_failure(tmp_path, capsys):
    cache = tmp_path / "cache"
    store = DictionaryStore(replace(DEFAULT_CONFIG, cache_dir=cache))
    save_words(store.path_for("BAD"), ["planet"])
    assert cli.main(["--book-id", "BAD", "--cache-dir", str(cache)]) == 1
    assert "Could not set up dictionary" in capsys.readouterr().err


def test_main_plays_from_cache(tmp_path, monkeypatch, capsys):
    cache = tmp_path / "cache"
    store = DictionaryStore(replace(DEFAULT_CONFIG, cache_dir=cache))
    save_words(store.path_for("OK"), LONG + SHORT)
    answers = []
    for pos, ch in enumerate("garden"):
        answers += [str(pos), ch]
    monkeypatch.setattr("builtins.input", _feeder(answers))
    assert cli.main(["--book-id", "OK", "--cache-dir", str(cache), "--word", "garden"]) == 0
    out = capsys.readouterr().out
    assert "(cache)" in out and "Solved: garden" in out
