"""Tests: reaper-segments command line entry point."""

import json

import pytest

from cli.segments import main
from reaper.config import get_settings

pytestmark = [pytest.mark.cli]

HALF = 2**126


@pytest.fixture(autouse=True)
def _settings(fresh_settings):
    yield


def test_text_output(capsys):
    rc = main([f"[{HALF}, 0]", "-n", "4"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].endswith(f"4 segments over {2**127} tokens")
    assert out[1].startswith(f"(0,{2**125}]")
    assert f"owner=(0,{HALF}]" in out[1]
    assert out[4].startswith(f"({HALF + 2**125},0]")
    assert len(out) == 5


def test_json_output(capsys):
    rc = main(["[0]", "--segments", "3", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["segment_count"] == 3
    assert data["segments"][-1]["end"] == "0"


def test_defaults_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("REAPER_SEGMENT_COUNT", "2")
    monkeypatch.setenv("REAPER_SEGMENT_PARTITIONER", "Murmur3Partitioner")
    get_settings.cache_clear()
    rc = main([f"[0, {-(2**63)}]", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["partitioner"] == "Murmur3Partitioner"
    assert data["ring_size"] == str(2**64)
    assert data["segment_count"] == 2


def test_invalid_ring_exits_nonzero(capsys):
    assert main(["[5, 5]"]) == 1
    assert main(["[0]", "-p", "ByteOrderedPartitioner"]) == 1


def test_bad_token_argument():
    with pytest.raises(SystemExit) as exc:
        main(["[1, 'x']"])
    assert exc.value.code == 2
