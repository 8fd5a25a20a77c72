import importlib

import pytest

import Config
from quick_sort import InvalidArgumentError, PivotType


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(Config)
    monkeypatch.undo()
    importlib.reload(Config)


def test_all_pivot_types_by_default(monkeypatch, reload_config):
    monkeypatch.delenv("QUICK_SORT_PIVOT_TYPES", raising=False)
    assert reload_config().STATISTICS_PIVOT_TYPES == [PivotType.FIRST, PivotType.MIDDLE, PivotType.RANDOM]


def test_pivot_types_from_environment(monkeypatch, reload_config):
    monkeypatch.setenv("QUICK_SORT_PIVOT_TYPES", "random, First")
    assert reload_config().STATISTICS_PIVOT_TYPES == [PivotType.RANDOM, PivotType.FIRST]


def test_unknown_pivot_type_in_environment(monkeypatch, reload_config):
    monkeypatch.setenv("QUICK_SORT_PIVOT_TYPES", "first,median")
    with pytest.raises(InvalidArgumentError):
        reload_config()
