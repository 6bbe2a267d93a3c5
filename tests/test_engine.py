# tests/test_engine.py
"""Tests for the engine facade, footprint report and visualizer."""

import pytest

from valency.core.config import EngineConfig
from valency.core.engine import Engine, get_engine
from valency.core.footprint import memory_footprint, serialized_size
from valency.core.lexicon import Lexicon, default_lexicon, entry
from valency.core.roles import ErrorKind, SemanticRole
from valency.core.stemma import Stemma, default_stemma


@pytest.fixture
def engine():
    return Engine()


# === Facade ===

def test_check(engine):
    result = engine.check("eat").unwrap()
    assert result.valency == 2
    assert result.required_roles == (SemanticRole.AGENT, SemanticRole.PATIENT)


def test_check_batch_uses_config():
    engine = Engine(config=EngineConfig(max_workers=2))
    results = engine.check_batch(["eat", "zzz"])
    assert results[0].ok
    assert results[1].error == ErrorKind.NOT_IN_LEXICON


def test_get_stem(engine):
    assert engine.get_stem("Gave") == "give"
    assert engine.get_stem(engine.get_stem("Gave")) == "give"


def test_get_valency_pattern(engine):
    assert engine.get_valency_pattern("tell").unwrap().valency == 3
    assert engine.get_valency_pattern("told").error == ErrorKind.NOT_IN_LEXICON


def test_sentence_operations(engine):
    assert engine.eliminate_ambiguity("The system processes the data").unwrap()[0].verb == "process"
    assert engine.analyze_roles("The system processes data").unwrap().verb == "process"
    assert engine.analyze_roles("xxx yyy zzz").error == ErrorKind.NO_VERB_FOUND


def test_empty_injected_lexicon_is_kept():
    engine = Engine(lexicon=Lexicon({}))
    assert engine.check("eat").error == ErrorKind.NOT_IN_LEXICON


def test_get_engine_is_shared():
    assert get_engine() is get_engine()


def test_result_to_dict(engine):
    assert engine.check("zzz").to_dict() == {"ok": False, "error": "not_in_lexicon"}
    d = engine.check("ran").to_dict()
    assert d["ok"]
    assert d["value"]["stem"] == "run"
    assert d["value"]["required_roles"] == ["agent"]


def test_interpretations_to_dict(engine):
    d = engine.eliminate_ambiguity("sleeps").to_dict()
    assert d["value"] == [{
        "verb": "sleep",
        "valency": 1,
        "roles": ["agent"],
        "score": pytest.approx(0.35),
        "description": "sleep requires 1 argument(s)",
    }]


# === Config ===

def test_config_defaults():
    config = EngineConfig()
    assert config.max_workers is None
    assert config.workers >= 1
    assert config.kb_precision == 2


def test_config_rejects_bad_workers():
    with pytest.raises(ValueError):
        EngineConfig(max_workers=0)


def test_config_with_workers():
    assert EngineConfig().with_workers(3).workers == 3


# === Footprint ===

def test_footprint_totals(engine):
    report = engine.memory_footprint()
    assert report.total_bytes == report.lexicon_bytes + report.stemma_bytes
    assert report.lexicon_bytes > 0
    assert report.stemma_bytes > 0
    assert report.total_kb > 0


def test_footprint_is_lightweight(engine):
    report = engine.memory_footprint()
    assert report.lexicon_kb < 4.0
    assert report.stemma_kb < 2.0
    assert report.total_kb < 10.0


def test_footprint_is_deterministic():
    a = memory_footprint(default_lexicon(), default_stemma())
    b = memory_footprint(default_lexicon(), default_stemma())
    assert a == b


def test_footprint_kb_rounding():
    report = memory_footprint(default_lexicon(), default_stemma(), precision=1)
    assert report.stemma_kb == round(report.stemma_bytes / 1024, 1)


def test_footprint_of_small_tables():
    lexicon = Lexicon({"run": entry(SemanticRole.AGENT)})
    stemma = Stemma({"ran": "run"})
    report = memory_footprint(lexicon, stemma)
    assert report.stemma_bytes == len('{"ran":"run"}')
    assert report.lexicon_bytes == serialized_size(lexicon.to_dict())


def test_footprint_empty_tables():
    report = memory_footprint(Lexicon({}), Stemma({}))
    assert report.total_bytes == 4    # "{}" twice


# === Visualize ===

def test_visualize(engine):
    output = engine.visualize(engine.check("eating").unwrap())
    lines = output.splitlines()

    assert lines[0] == "Valency Analysis"
    assert "Word: eating" in lines
    assert "Stem: eat" in lines
    assert "Valency: 2" in lines
    assert "Required Roles: agent, patient" in lines
    assert "Optional Roles: instrument, location" in lines
    assert "Ambiguity Score: 0.4 (lower is better)" in lines
    assert 'The verb "eat" has valency 2.' in output


def test_visualize_is_deterministic(engine):
    analysis = engine.check("give").unwrap()
    assert engine.visualize(analysis) == engine.visualize(analysis)
