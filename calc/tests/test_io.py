"""Tests for YAML/JSON profile I/O."""

import json
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

sys.path.insert(0, str(Path(__file__).parent.parent))

from rr_calc.formulas import evaluate
from rr_calc.io import export_report_json, load_profile, save_profile
from rr_calc.models import Profile, ResourceType

PROFILES_DIR = Path(__file__).parent.parent / "data" / "profiles"


def test_load_default_profile():
    """The shipped default.yaml should match the built-in defaults."""
    path = PROFILES_DIR / "default.yaml"
    if not path.exists():
        pytest.skip("default.yaml not found")
    assert load_profile(str(path)) == Profile()


def test_load_gold_miner():
    path = PROFILES_DIR / "gold_miner.yaml"
    if not path.exists():
        pytest.skip("gold_miner.yaml not found")
    profile = load_profile(str(path))
    assert profile.name == "Gold Miner"
    assert profile.active_region == "Berlin"
    assert profile.work.resource_type is ResourceType.GOLD
    assert profile.war.randomness is False


def test_save_and_reload(gold_profile, tmp_path):
    """Save a profile to YAML, reload it, verify contents match."""
    path = tmp_path / "gold.yaml"
    save_profile(gold_profile, str(path))
    assert load_profile(str(path)) == gold_profile


def test_partial_file_uses_defaults(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("stats:\n  strength: 99\n  unknown_key: 1\ntax:\n  tax_rate: 5\n")
    profile = load_profile(str(path))
    assert profile.name == "partial"
    assert profile.stats.strength == 99
    assert profile.stats.level == Profile().stats.level
    assert profile.tax.tax_rate == 5
    assert profile.work == Profile().work


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    profile = load_profile(str(path))
    assert profile.stats == Profile().stats
    assert profile.name == "empty"


def test_bad_resource_type(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("work:\n  resource_type: uranium\n")
    with pytest.raises(ValueError):
        load_profile(str(path))


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_profile(str(Path(tempfile.gettempdir()) / "no_such_profile_123.yaml"))


def test_saved_yaml_uses_plain_values(default_profile, tmp_path):
    path = tmp_path / "plain.yaml"
    save_profile(default_profile, str(path))
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data["work"]["resource_type"] == "standard"
    assert list(data)[:3] == ["name", "active_region", "citizenship"]


def test_export_json(default_profile, tmp_path):
    path = tmp_path / "out.json"
    report = evaluate(default_profile)
    export_report_json(default_profile, report, str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["results"]["building_defense"] == 2_250_000
    assert data["results"]["productivity"] == pytest.approx(report.work.productivity)
    assert data["profile"]["active_region"] == "Ankara"


def test_region_canonicalised_on_load(tmp_path):
    path = tmp_path / "ist.yaml"
    path.write_text("active_region: istanbul\n", encoding="utf-8")
    assert load_profile(str(path)).active_region == "İstanbul"


def test_unknown_region_rejected_on_load(tmp_path):
    path = tmp_path / "atlantis.yaml"
    path.write_text("active_region: Atlantis\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown region"):
        load_profile(str(path))


def test_non_mapping_document(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="mapping"):
        load_profile(str(path))


def test_non_mapping_section(tmp_path):
    path = tmp_path / "section.yaml"
    path.write_text("stats: 5\n")
    with pytest.raises(ValueError, match="stats"):
        load_profile(str(path))


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("stats: [1, 2\n")
    with pytest.raises(yaml.YAMLError):
        load_profile(str(path))
