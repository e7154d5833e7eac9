"""Tests for the command-line collaborators."""

import io
import json

import pytest

from hsv_guesser import play as play_cli
from hsv_guesser import plot_seed_stream, preview
from hsv_guesser.color_deriver import Difficulty, HSVColor, derive_hsv
from hsv_guesser.round_session import new_session
from hsv_guesser.seed_stepper import seed_stream


def run_play(lines, difficulty=Difficulty.EASY, seed=0, debug_rows=0):
    out = []
    session, round_ = play_cli.play(new_session(difficulty, seed), lines, emit=out.append, debug_rows=debug_rows)
    return session, round_, out


def test_parse_guess_builds_grid_color():
    assert play_cli.parse_guess("3, 1 2", Difficulty.EASY) == HSVColor(180.0, 25.0, 50.0)


@pytest.mark.parametrize("line", ["1 2", "a b c", "9 0 0"])
def test_parse_guess_rejects_bad_input(line):
    with pytest.raises(ValueError):
        play_cli.parse_guess(line, Difficulty.EASY)


def test_play_scores_two_rounds():
    session, round_, out = run_play(["0 0 0", "n", "3 0 0", "q", "0 0 0"])
    assert out[0] == "Difficulty easy: hue 0-5, saturation 0-3, value 0-3"
    assert sum(line.startswith("Correct!") for line in out) == 2
    assert (session.guessed, session.score) == (2, 2)
    assert round_.checking


def test_play_reports_protocol_slips_and_continues():
    session, _, out = run_play(["n", "0 0 0", "1 1 1", "n", "2 2 2"])
    assert out[1].startswith("! Round has not been checked")
    assert any(line.startswith("! Round has already been checked") for line in out)
    assert session.guessed == 2


def test_play_reports_bad_guesses():
    session, round_, out = run_play(["x y z", "9 0 0"])
    assert [line[0] for line in out[1:]] == ["?", "?"]
    assert session.guessed == 0
    assert not round_.checking


def test_play_shows_upcoming_rows():
    _, _, out = run_play([], debug_rows=2)
    assert len(out) == 3
    assert out[1].split()[0] == "32771"


def test_play_main_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0 0\nq\n"))
    play_cli.main(["--seed", "0"])
    out = capsys.readouterr().out
    summary = json.loads(out[out.index("{"):])
    assert summary == {"guessed": 1, "score": 1, "difficulty": "easy", "seed": 0}


def test_play_main_rejects_unknown_difficulty():
    with pytest.raises(SystemExit):
        play_cli.main(["--difficulty", "extreme", "--seed", "0"])


def test_preview_report():
    report = preview.build_report("hard", 0x7F0F, 3)
    assert report["grid"] == {"hue": 64, "saturation": 16, "value": 16}
    assert report["sliderIncrements"] == {"hue": 360 / 65, "saturationValue": 100 / 17}
    assert [row["seed"] for row in report["rows"]] == list(seed_stream(0x7F0F, 3))


def test_preview_main(capsys):
    preview.main(["--difficulty", "hard", "--seed", "32527", "--rows", "2"])
    report = json.loads(capsys.readouterr().out)
    assert report["rows"][0] == {"seed": 32527, "hue": 354.375, "saturation": 0.0, "value": 93.75}


def test_preview_main_rejects_negative_rows():
    with pytest.raises(SystemExit):
        preview.main(["--rows", "-1"])


def test_to_rgb():
    assert plot_seed_stream.to_rgb(HSVColor(0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)
    assert plot_seed_stream.to_rgb(HSVColor(0.0, 100.0, 100.0)) == (1.0, 0.0, 0.0)


def test_hue_bucket_counts_cover_stream():
    colors = [derive_hsv(Difficulty.EASY, s) for s in range(0x10000)]
    counts = plot_seed_stream.hue_bucket_counts(Difficulty.EASY, colors)
    assert len(counts) == 6
    assert sum(counts) == 0x10000
    assert all(c > 0 for c in counts)


def test_swatch_grid_pads_last_row():
    colors = [HSVColor(0.0, 0.0, 100.0)] * 5
    grid = plot_seed_stream.swatch_grid(colors, per_row=4)
    assert len(grid) == 2
    assert grid[1] == [(1.0, 1.0, 1.0)] * 4


def test_plot_main_writes_figure(tmp_path, capsys):
    output = tmp_path / "plots" / "stream.png"
    plot_seed_stream.main(["--seed", "1", "--count", "40", "--output", str(output)])
    assert output.exists()
    assert "Saved seed stream plot" in capsys.readouterr().out
