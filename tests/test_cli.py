import csv
import json
import random

from apps.cli import play, run
from codebreaker.engine import all_codes
from codebreaker.harness import run_batch
from codebreaker.solvers import create_solver
from codebreaker.game import HUMAN_BREAKER, HUMAN_MAKER, Session


def _scripted(answers):
    it = iter(answers)
    out = []
    return (lambda prompt: next(it)), out.append, out


def test_ask_rounds_reprompts_until_positive_int():
    ask, say, out = _scripted(["three", "0", "3"])
    assert play.ask_rounds(ask, say) == 3
    assert any("Expected an integer" in line for line in out)


def test_ask_role():
    ask, say, out = _scripted(["9", "1"])
    assert play.ask_role(ask, say) == HUMAN_MAKER
    assert any("Unknown option '9'" in line for line in out)

    ask, say, _ = _scripted(["2"])
    assert play.ask_role(ask, say) == HUMAN_BREAKER

    ask, say, _ = _scripted(["0"])
    assert play.ask_role(ask, say) is None


def test_run_game_quit_immediately_is_a_tie():
    ask, say, out = _scripted(["0"])
    play.run_game(Session(ask, say, seed=1, colorize=False), rounds=3)
    assert out[-1] == "Final score 0 - 0: it's a tie"


def test_play_main_exits_on_eof(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert play.main(["--rounds", "1", "--no-color"]) == 1
    assert "Exited" in capsys.readouterr().out


def test_run_main_writes_reports(tmp_path, capsys):
    code = run.main(["--sample", "5", "--seed", "1", "--outdir", str(tmp_path),
                     "--progress", "off"])
    assert code == 0
    out = capsys.readouterr().out
    assert "games=5" in out and "success=100.0%" in out

    csvs = list(tmp_path.glob("run_*.csv"))
    manifests = list(tmp_path.glob("run_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 5
    assert manifest["solver_id"] == "random_consistent"
    assert manifest["opening_guess"] == "rryy"
    assert manifest["summary"]["wins"] == 5


def test_run_main_unknown_solver(tmp_path, capsys):
    assert run.main(["--solver", "nope", "--outdir", str(tmp_path)]) == 2
    assert "Unknown solver id" in capsys.readouterr().err


def test_run_main_plays_the_same_games_as_run_batch(tmp_path):
    assert run.main(["--sample", "4", "--seed", "9", "--outdir", str(tmp_path),
                     "--progress", "off"]) == 0
    with open(next(tmp_path.glob("run_*.csv")), newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    cases = all_codes()
    random.Random(9).shuffle(cases)
    expected = run_batch(create_solver("random_consistent"), cases[:4], seed=9)

    assert [r["secret"] for r in rows] == [r["secret"] for r in expected]
    for row, res in zip(rows, expected):
        played = [(row[f"guess_{i}"], row[f"fb_{i}"]) for i in range(1, res["guesses"] + 1)]
        assert played == res["history"]
        assert int(row["guesses"]) == res["guesses"]
