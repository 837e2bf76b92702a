"""Tests for reading and writing share files."""

import json

import pytest

from sharerecover.arith.lagrange import Share
from sharerecover.core.loader import dump_share_set, load_share_set
from sharerecover.errors import MalformedShareSet


SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "shares.json"
    path.write_text(json.dumps(SAMPLE, indent=4), encoding="utf-8")
    return path


class TestLoadShareSet:
    """Tests for load_share_set."""

    def test_load(self, sample_file):
        share_set = load_share_set(sample_file)

        assert share_set.k == 3
        assert share_set.shares[-1] == Share(6, 39)

    def test_accepts_str_path(self, sample_file):
        assert load_share_set(str(sample_file)).n == 4

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"keys": {', encoding="utf-8")

        with pytest.raises(MalformedShareSet, match="broken.json: invalid JSON"):
            load_share_set(path)

    def test_top_level_array(self, tmp_path):
        path = tmp_path / "array.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(MalformedShareSet):
            load_share_set(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_share_set(tmp_path / "missing.json")


class TestDumpShareSet:
    """Tests for dump_share_set."""

    def test_dump_and_reload(self, sample_file, tmp_path):
        share_set = load_share_set(sample_file)
        out = tmp_path / "hex.json"

        dump_share_set(share_set, out, base=16)

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["6"] == {"base": "16", "value": "27"}
        assert load_share_set(out) == share_set


class TestLoadEncoding:
    """Tests for files that are not UTF-8."""

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"keys": {"k": 1}, "1": {"base": "10", "value": "\xff"}}')

        with pytest.raises(MalformedShareSet, match="latin1.json: not valid UTF-8"):
            load_share_set(path)

    def test_single_invalid_byte(self, tmp_path):
        path = tmp_path / "byte.json"
        path.write_bytes(b"\xff")

        with pytest.raises(MalformedShareSet):
            load_share_set(path)
