"""Tests for the demo sequence and the command-line entry point."""

import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from contractmap import HashMap, mutable_map
from contractmap.__main__ import main
from contractmap.demo import demo, run


class FirstWriteWinsMap(HashMap):
    def put(self, key, value):
        if not self.contains(key):
            super().put(key, value)


class TestDemo:
    @pytest.mark.parametrize("kind", ["hash", "list", "indexed"])
    @pytest.mark.parametrize("checked", [False, True])
    def test_passes(self, kind, checked):
        demo(mutable_map(kind, checked=checked))

    def test_broken_map_fails(self):
        with pytest.raises(AssertionError):
            demo(FirstWriteWinsMap())

    def test_failure_message(self):
        with pytest.raises(AssertionError, match="after overwrite"):
            demo(FirstWriteWinsMap())

    def test_broken_map_fails_under_optimize(self):
        code = textwrap.dedent(
            """
            from contractmap import HashMap
            from contractmap.demo import demo

            class FirstWriteWinsMap(HashMap):
                def put(self, key, value):
                    if not self.contains(key):
                        super().put(key, value)

            try:
                demo(FirstWriteWinsMap())
            except AssertionError:
                raise SystemExit(3)
            """
        )
        result = subprocess.run(
            [sys.executable, "-O", "-c", code], cwd=Path(__file__).parent.parent
        )
        assert result.returncode == 3


class TestRun:
    def test_all_pass(self):
        results = run()
        assert results == {
            "HashMap": True,
            "CheckedHashMap": True,
            "ListMap": True,
            "CheckedListMap": True,
            "IndexedListMap": True,
            "CheckedIndexedListMap": True,
        }

    def test_selected_kinds(self):
        assert set(run(["list"])) == {"ListMap", "CheckedListMap"}


class TestMain:
    def test_reports_success(self, capsys):
        assert main() == 0
        out = capsys.readouterr().out
        assert "HashMap: ok" in out
        assert "CheckedIndexedListMap: ok" in out

    def test_reports_failure(self, monkeypatch, capsys):
        monkeypatch.setattr("contractmap.__main__.run", lambda: {"HashMap": False})
        assert main() == 1
        assert "HashMap: FAILED" in capsys.readouterr().out
