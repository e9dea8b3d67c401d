"""Tests for the interactive REPL."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from rr_calc.models import Profile, ResourceType
from rr_calc.repl import CalculatorREPL, parse_value, set_field


def test_parse_value_types():
    assert parse_value(int, "12") == 12
    assert parse_value(float, "0.25") == 0.25
    assert parse_value(bool, "yes") is True
    assert parse_value(bool, "off") is False
    assert parse_value(ResourceType, "diamond") is ResourceType.DIAMOND
    with pytest.raises(ValueError):
        parse_value(bool, "maybe")


def test_set_field_replaces_record():
    original = Profile()
    updated = set_field(original, "war", "randomness", "false")
    assert updated.war.randomness is False
    assert original.war.randomness is True
    assert updated.stats is original.stats


def test_set_field_unknown():
    with pytest.raises(ValueError, match="Unknown section"):
        set_field(Profile(), "army", "size", "1")
    with pytest.raises(ValueError, match="Unknown field"):
        set_field(Profile(), "stats", "charisma", "1")


def test_set_and_undo(capsys):
    repl = CalculatorREPL()
    repl.onecmd("set stats strength 80")
    assert repl.profile.stats.strength == 80
    repl.onecmd("undo")
    assert repl.profile.stats.strength == 50
    repl.onecmd("redo")
    assert repl.profile.stats.strength == 80
    assert "Redone." in capsys.readouterr().out


def test_bad_value_keeps_profile(capsys):
    repl = CalculatorREPL()
    repl.onecmd("set stats level twenty")
    assert repl.profile == Profile()
    assert "Error" in capsys.readouterr().out


def test_resource_and_region(capsys):
    repl = CalculatorREPL()
    repl.onecmd("resource GOLD")
    repl.onecmd("region paris")
    assert repl.profile.work.resource_type is ResourceType.GOLD
    assert repl.profile.active_region == "Paris"
    repl.onecmd("region Atlantis")
    assert repl.profile.active_region == "Paris"


def test_calc_prints_report(capsys):
    repl = CalculatorREPL()
    repl.onecmd("calc")
    out = capsys.readouterr().out
    assert "2,250,000" in out
    assert "Net income" in out


def test_reset(capsys):
    repl = CalculatorREPL()
    repl.onecmd("name Main")
    repl.onecmd("reset")
    assert repl.profile == Profile()


def test_save_and_load(tmp_path, capsys):
    path = tmp_path / "repl.yaml"
    repl = CalculatorREPL()
    repl.onecmd("set tax tax_rate 30")
    repl.onecmd(f"save {path}")
    other = CalculatorREPL()
    other.onecmd(f"load {path}")
    assert other.profile.tax.tax_rate == 30


def test_quit_stops_loop(capsys):
    assert CalculatorREPL().onecmd("quit") is True
