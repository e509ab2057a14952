# tests/test_metrics_tracker.py

import pytest

from prefix_autocompleter.utils.metrics_tracker import Metrics


def test_in_memory_average():
    m = Metrics()
    m.record("q", 1.0)
    m.record("q", 3.0)
    assert m.count("q") == 2
    assert m.avg("q") == pytest.approx(2.0)
    assert m.avg("never") == 0.0
    assert m.summary() == {"q": (2, pytest.approx(2.0))}


def test_persists_between_instances(tmp_path):
    path = str(tmp_path / "metrics.json")
    m = Metrics(path)
    m.record("top_matches_time", 0.5)
    m2 = Metrics(path)
    assert m2.count("top_matches_time") == 1
    assert m2.avg("top_matches_time") == pytest.approx(0.5)


def test_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "metrics.json"
    path.write_text("[]", encoding="utf8")
    m = Metrics(str(path))
    assert m.summary() == {}


def test_reset():
    m = Metrics()
    m.record("a", 1)
    m.reset()
    assert m.summary() == {}
