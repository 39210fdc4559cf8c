"""
Tests for the raw store dump.
"""

import pytest

from weatherlog import diagnostic_dump
from weatherlog.errors import MalformedSegment
from weatherlog.storage.journal import append_record


class TestDump:
    def test_empty_store(self, env_store, capsys):
        diagnostic_dump.main()
        assert capsys.readouterr().out.startswith("No records found in")

    def test_counts_by_condition(self, env_store, capsys):
        append_record({"day": "Mon", "condition": "rain"}, env_store)
        append_record({"day": "Tue", "condition": "rain"}, env_store)
        append_record({"day": "Wed"}, env_store)
        diagnostic_dump.main()
        out = capsys.readouterr().out
        assert f"Found 3 records in {env_store}:" in out
        assert "  rain: 2" in out
        assert "  unspecified: 1" in out
        assert '"day": "Wed"' in out

    def test_malformed_store_raises(self, env_store, capsys):
        env_store.parent.mkdir(parents=True)
        env_store.write_text("day=Mon\nbroken\n")
        with pytest.raises(MalformedSegment):
            diagnostic_dump.main()
        assert capsys.readouterr().out == ""
