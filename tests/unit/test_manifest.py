"""Tests for bulk loading and manifest creation."""

import asyncio

import httpx

from body_client.manifest import LoadedConfig, ManifestClient, create_manifest
from body_client.schemas import ConfigEntrySchema


class TestCreateManifest:
    def test_groups_by_id_and_period(self):
        manifest = create_manifest(
            [
                LoadedConfig("/config/a.json", {"id": "sejm", "period": "2019-2023"}),
                LoadedConfig("/config/b.json", {"id": "sejm", "metadata": {"period": "2023-2027"}}),
                LoadedConfig("/config/c.json", {"id": "storting", "period": "2025-2029"}),
            ]
        )
        assert manifest == {
            "sejm": {"2019-2023": "/config/a.json", "2023-2027": "/config/b.json"},
            "storting": {"2025-2029": "/config/c.json"},
        }

    def test_skips_invalid(self, warnings):
        manifest = create_manifest(
            [
                LoadedConfig("/config/a.json", ["not", "an", "object"]),
                LoadedConfig("/config/b.json", {"period": "2020"}),
                LoadedConfig("/config/c.json", {"id": "", "period": "2020"}),
                LoadedConfig("/config/d.json", {"id": "x"}),
                LoadedConfig("/config/e.json", {"id": "x", "period": 2020}),
            ]
        )
        assert manifest == {}
        assert len(warnings) == 5

    def test_duplicate_last_wins(self, warnings):
        manifest = create_manifest(
            [
                LoadedConfig("/config/a.json", {"id": "x", "period": "p"}),
                LoadedConfig("/config/b.json", {"id": "x", "period": "p"}),
            ]
        )
        assert manifest == {"x": {"p": "/config/b.json"}}
        assert any("Duplicate" in w for w in warnings)


class TestManifestClient:
    def test_load_all_skips_failures(self, warnings):
        docs = {"/config/a.json": {"id": "a"}, "/config/c.json": {"id": "c"}}

        def handler(request):
            if request.url.path in docs:
                return httpx.Response(200, json=docs[request.url.path])
            return httpx.Response(404)

        entries = [ConfigEntrySchema(file=f, label=f) for f in ("/config/a.json", "/config/b.json", "/config/c.json")]

        async def run():
            async with ManifestClient(base_url="http://test", transport=httpx.MockTransport(handler)) as client:
                return await client.load_all(entries)

        loaded = asyncio.run(run())

        assert [(item.file, item.config) for item in loaded] == [
            ("/config/a.json", {"id": "a"}),
            ("/config/c.json", {"id": "c"}),
        ]
        assert any("/config/b.json" in w for w in warnings)

    def test_no_entries(self):
        async def run():
            async with ManifestClient(base_url="http://test", transport=httpx.MockTransport(lambda r: httpx.Response(500))) as client:
                return await client.load_all([])

        assert asyncio.run(run()) == []
