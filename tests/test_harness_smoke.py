from hangman.engine import Round
from hangman.harness import Player, play_turn, run_moves

WORDS = ["BREWING", "BROWSER", "BREEZES", "BRIDGES", "BALLOON", "CABINET"]


def test_player_points_clamp_to_zero():
    p = Player()
    p.update_points(10)
    assert p.points == 10
    p.update_points(-15)
    assert p.points == 0   # reset to zero, not left at 10
    p.update_points(-15)
    assert p.points == 0
    p.update_points(5)
    assert p.points == 5


def test_player_lives():
    p = Player(lives=2)
    assert p.is_alive()
    p.reduce_lives()
    assert p.is_alive()
    p.reduce_lives()
    assert not p.is_alive()
    assert Player().lives == 6


def test_play_turn_miss_costs_a_life():
    rnd = Round("BREWING", WORDS)
    player = Player()
    r = play_turn(rnd, player, 0, "C")
    assert r.points == -15 and r.total_points == 0 and r.lives == 5
    assert not r.solved and r.alive


def test_run_moves_solves_word():
    rnd = Round("BREWING", WORDS)
    player = Player()
    moves = list(enumerate("BREWING")) + [(0, "B")]
    results = run_moves(rnd, player, moves)
    assert len(results) == 7            # trailing move ignored once solved
    assert results[-1].solved
    assert player.points == sum(r.points for r in results)
    assert player.lives == 6


def test_run_moves_stops_when_out_of_lives():
    rnd = Round("BREWING", WORDS)
    player = Player(lives=2)
    results = run_moves(rnd, player, [(0, "X"), (0, "Y"), (0, "B")])
    assert len(results) == 2
    assert not results[-1].alive
    assert not rnd.end_of_game()
    assert player.points == 0
