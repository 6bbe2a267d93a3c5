# tests/test_cli.py
"""Tests for the command line interface."""

import json

import pytest

from valency.cli.main import main


def run_cli(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_check(capsys):
    out = run_cli(capsys, "check", "eating")
    assert "Valency Analysis" in out
    assert "Stem: eat" in out


def test_check_json(capsys):
    out = run_cli(capsys, "check", "ran", "--json")
    data = json.loads(out)
    assert data[0]["ok"]
    assert data[0]["value"]["stem"] == "run"


def test_check_unknown_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["check", "zzz_unknown_verb"])
    assert exc.value.code == 1
    assert "not_in_lexicon" in capsys.readouterr().out


def test_batch_json_preserves_order(capsys):
    out = run_cli(capsys, "batch", "gave", "zzz", "sleeps", "--workers", "2", "--json")
    data = json.loads(out)
    assert [d["ok"] for d in data] == [True, False, True]
    assert data[2]["value"]["stem"] == "sleep"


def test_stem(capsys):
    out = run_cli(capsys, "stem", "Running", "table")
    assert "Running → run" in out
    assert "table → table" in out


def test_pattern_json(capsys):
    out = run_cli(capsys, "pattern", "give", "--json")
    assert json.loads(out) == {
        "valency": 3,
        "required": ["agent", "patient", "recipient"],
        "optional": ["location", "time"],
    }


def test_rank_json(capsys):
    out = run_cli(capsys, "rank", "The system processes the data", "--json")
    data = json.loads(out)
    assert data[0]["verb"] == "process"


def test_rank_no_verbs_exits(capsys):
    with pytest.raises(SystemExit):
        main(["rank", "zzz xxx yyy"])
    assert "no_verbs_found" in capsys.readouterr().out


def test_roles_json(capsys):
    out = run_cli(capsys, "roles", "system processes data quickly", "--json")
    assert json.loads(out) == {
        "verb": "process",
        "agent": "system",
        "patient": "data",
        "manner": "quickly",
    }


def test_footprint_json(capsys):
    data = json.loads(run_cli(capsys, "footprint", "--json"))
    assert data["total_bytes"] == data["lexicon_bytes"] + data["stemma_bytes"]


def test_lexicon_filter(capsys):
    out = run_cli(capsys, "lexicon", "--valency", "3")
    for verb in ("give", "send", "tell", "show"):
        assert verb in out
    assert "sleep" not in out


def test_no_command_prints_help(capsys):
    out = run_cli(capsys)
    assert "usage" in out


def test_rank_bracketed_sentence_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["rank", "zzz [/red] yyy"])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "[/red]" in out
    assert "no_verbs_found" in out


def test_check_bracketed_word_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["check", "[/x]"])
    assert exc.value.code == 1
    assert "[/x]" in capsys.readouterr().out


def test_batch_bracketed_word(capsys):
    out = run_cli(capsys, "batch", "[/x]", "eats", "--workers", "1")
    assert "[/x]" in out
    assert "eat" in out


def test_rank_bracketed_title(capsys):
    out = run_cli(capsys, "rank", "[bold]robot[/bold] eats")
    assert "[bold]robot[/bold]" in out
