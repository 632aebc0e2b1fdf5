"""Tests for the classification tables."""

from depextify.core.lists import (
    BUILTINS,
    CATEGORIES,
    build_suppression_set,
    get_builtins,
    get_common,
    get_coreutils,
)
from depextify.core.models import ScanConfig


def test_tables_sorted():
    for names in (get_builtins(), get_coreutils(), get_common()):
        assert names == sorted(names)
        assert len(names) == len(set(names))


def test_known_members():
    assert "echo" in get_builtins()
    assert "ls" in get_coreutils()
    assert "curl" in get_common()
    assert "docker" not in BUILTINS


def test_categories():
    assert list(CATEGORIES) == ["builtins", "coreutils", "common"]


class TestBuildSuppressionSet:
    def test_default_suppresses_everything(self):
        suppressed = build_suppression_set(ScanConfig())
        assert {"echo", "ls", "grep"} <= suppressed

    def test_nothing_suppressed(self):
        config = ScanConfig(no_builtins=False, no_coreutils=False, no_common=False)
        assert build_suppression_set(config) == frozenset()

    def test_tables_independent(self):
        suppressed = build_suppression_set(ScanConfig(no_builtins=False))
        assert "echo" not in suppressed
        assert "ls" in suppressed

    def test_extra_ignores(self):
        config = ScanConfig(no_builtins=False, no_coreutils=False, no_common=False,
                            extra_ignores=[" docker ", ""])
        assert build_suppression_set(config) == frozenset({"docker"})
