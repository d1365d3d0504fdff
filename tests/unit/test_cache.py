"""Tests for static deployment artifacts."""

import json

import pytest

from etl.cache import CacheError, build_local, scan_config_dir, verify_json_file


@pytest.fixture
def config_dir(tmp_path):
    d = tmp_path / "config"
    d.mkdir()
    (d / "sejm_2019.json").write_text(json.dumps({"id": "sejm", "period": "2019-2023"}), encoding="utf-8")
    (d / "sejm_2023.json").write_text(json.dumps({"id": "sejm", "metadata": {"period": "2023-2027"}}), encoding="utf-8")
    (d / "broken.json").write_text("{", encoding="utf-8")
    (d / "README.md").write_text("not a config", encoding="utf-8")
    return d


class TestScan:
    def test_lists_json_files(self, config_dir):
        entries = scan_config_dir(config_dir)
        assert [e.file for e in entries] == ["/config/broken.json", "/config/sejm_2019.json", "/config/sejm_2023.json"]
        assert entries[1].label == "Sejm 2019"


class TestBuildLocal:
    def test_writes_index_and_manifest(self, config_dir):
        manifest = build_local(config_dir)

        assert manifest == {"sejm": {"2019-2023": "/config/sejm_2019.json", "2023-2027": "/config/sejm_2023.json"}}
        index = json.loads((config_dir / "index.json").read_text(encoding="utf-8"))
        assert len(index) == 3
        assert index[0] == {"file": "/config/broken.json", "label": "Broken"}
        assert json.loads((config_dir / "manifest.json").read_text(encoding="utf-8")) == manifest

    def test_regenerates_without_reading_old_artifacts(self, config_dir):
        build_local(config_dir)
        build_local(config_dir)

        index = json.loads((config_dir / "index.json").read_text(encoding="utf-8"))
        assert "/config/index.json" not in [e["file"] for e in index]
        assert "/config/manifest.json" not in [e["file"] for e in index]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(CacheError):
            build_local(tmp_path / "nope")


class TestVerifyJsonFile:
    def test_missing(self, tmp_path):
        with pytest.raises(CacheError, match="not found"):
            verify_json_file(tmp_path / "x.json")

    def test_empty(self, tmp_path):
        (tmp_path / "x.json").write_text("", encoding="utf-8")
        with pytest.raises(CacheError, match="empty"):
            verify_json_file(tmp_path / "x.json")

    def test_invalid(self, tmp_path):
        (tmp_path / "x.json").write_text("[1,", encoding="utf-8")
        with pytest.raises(CacheError, match="not valid JSON"):
            verify_json_file(tmp_path / "x.json")

    def test_shape(self, tmp_path):
        (tmp_path / "x.json").write_text("[]", encoding="utf-8")
        assert verify_json_file(tmp_path / "x.json", "array") == []
        with pytest.raises(CacheError, match="object"):
            verify_json_file(tmp_path / "x.json", "object")
