"""Unit tests for the key-value store implementations."""

import json

import httpx
import pytest

from common.storage import (
    CloudflareKVStore,
    DirectoryKVStore,
    InMemoryKVStore,
    StoreError,
)

NAMESPACE_PATH = "/client/v4/accounts/acct/storage/kv/namespaces/ns"


def cloudflare_store(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CloudflareKVStore(
        account_id="acct",
        namespace_id="ns",
        api_token="secret",
        client=client,
    )


# ─────────────────────────────────────────────────────────────────
# InMemoryKVStore
# ─────────────────────────────────────────────────────────────────


class TestInMemoryKVStore:
    @pytest.mark.asyncio
    async def test_put_get_json(self):
        store = InMemoryKVStore()
        await store.put("i18n:en-US:astropal", {"common": {"yes": "Yes"}})
        assert await store.get("i18n:en-US:astropal") == {"common": {"yes": "Yes"}}

    @pytest.mark.asyncio
    async def test_text_format_returns_raw(self):
        store = InMemoryKVStore({"k": {"a": "ñ"}})
        assert await store.get("k", "text") == '{"a": "ñ"}'

    @pytest.mark.asyncio
    async def test_missing_key(self):
        assert await InMemoryKVStore().get("nope") is None

    @pytest.mark.asyncio
    async def test_malformed_json_raises(self):
        store = InMemoryKVStore({"k": "{oops"})
        with pytest.raises(StoreError):
            await store.get("k")

    @pytest.mark.asyncio
    async def test_list_and_delete(self):
        store = InMemoryKVStore({"i18n:b": 1, "i18n:a": 2, "other": 3})
        assert await store.list_keys("i18n:") == ["i18n:a", "i18n:b"]
        await store.delete("i18n:a")
        assert await store.list_keys("i18n:") == ["i18n:b"]


# ─────────────────────────────────────────────────────────────────
# DirectoryKVStore
# ─────────────────────────────────────────────────────────────────


class TestDirectoryKVStore:
    @pytest.mark.asyncio
    async def test_reads_locale_files(self, locales_dir):
        store = DirectoryKVStore(locales_dir, brand="astropal")
        data = await store.get("i18n:es-ES:astropal")
        assert data["common"]["cancel"] == "Cancelar"

    @pytest.mark.asyncio
    async def test_other_brand_is_missing(self, locales_dir):
        store = DirectoryKVStore(locales_dir, brand="astropal")
        assert await store.get("i18n:es-ES:otherbrand") is None

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        store = DirectoryKVStore(str(tmp_path), brand="astropal")
        assert await store.get("i18n:fr-FR:astropal") is None

    @pytest.mark.asyncio
    async def test_malformed_file_raises(self, tmp_path):
        (tmp_path / "en-US.json").write_text("{oops", encoding="utf-8")
        store = DirectoryKVStore(str(tmp_path), brand="astropal")
        with pytest.raises(StoreError):
            await store.get("i18n:en-US:astropal")

    @pytest.mark.asyncio
    async def test_put_and_list(self, tmp_path):
        store = DirectoryKVStore(str(tmp_path / "out"), brand="astropal")
        await store.put("i18n:es-ES:astropal", {"common": {"yes": "Sí"}})
        await store.put("cache:stats", {"hits": 1})

        assert (tmp_path / "out" / "es-ES.json").exists()
        assert (tmp_path / "out" / "cache__stats.json").exists()
        assert await store.list_keys("i18n:") == ["i18n:es-ES:astropal"]
        assert await store.get("i18n:es-ES:astropal") == {"common": {"yes": "Sí"}}


# ─────────────────────────────────────────────────────────────────
# CloudflareKVStore
# ─────────────────────────────────────────────────────────────────


class TestCloudflareKVStore:
    @pytest.mark.asyncio
    async def test_get_value(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.raw_path.decode()
            seen["auth"] = request.headers["authorization"]
            return httpx.Response(200, text=json.dumps({"common": {"yes": "Sí"}}))

        data = await cloudflare_store(handler).get("i18n:es-ES:astropal")

        assert data == {"common": {"yes": "Sí"}}
        assert seen["path"] == f"{NAMESPACE_PATH}/values/i18n%3Aes-ES%3Aastropal"
        assert seen["auth"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_404_is_none(self):
        store = cloudflare_store(lambda request: httpx.Response(404))
        assert await store.get("i18n:fr-FR:astropal") is None

    @pytest.mark.asyncio
    async def test_5xx_raises(self):
        store = cloudflare_store(lambda request: httpx.Response(503))
        with pytest.raises(StoreError) as exc:
            await store.get("i18n:en-US:astropal")
        assert exc.value.key == "i18n:en-US:astropal"

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(StoreError):
            await cloudflare_store(handler).get("i18n:en-US:astropal")

    @pytest.mark.asyncio
    async def test_malformed_json_raises(self):
        store = cloudflare_store(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(StoreError):
            await store.get("i18n:en-US:astropal")

    @pytest.mark.asyncio
    async def test_put_sends_json_body(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True})

        await cloudflare_store(handler).put("i18n:es-ES:astropal", {"a": "ñ"})

        assert seen == {"method": "PUT", "body": {"a": "ñ"}}

    @pytest.mark.asyncio
    async def test_put_failure_raises(self):
        store = cloudflare_store(lambda request: httpx.Response(403))
        with pytest.raises(StoreError):
            await store.put("k", {"a": 1})

    @pytest.mark.asyncio
    async def test_list_keys(self):
        seen = {}

        def handler(request):
            seen["prefix"] = request.url.params.get("prefix")
            return httpx.Response(200, json={
                "result": [{"name": "i18n:en-US:astropal"}, {"name": "i18n:es-ES:astropal"}],
            })

        keys = await cloudflare_store(handler).list_keys("i18n:")

        assert seen["prefix"] == "i18n:"
        assert keys == ["i18n:en-US:astropal", "i18n:es-ES:astropal"]

    @pytest.mark.asyncio
    async def test_list_keys_follows_cursor(self):
        pages = {
            None: {
                "result": [{"name": "i18n:en-US:astropal"}],
                "result_info": {"cursor": "page-2"},
            },
            "page-2": {
                "result": [{"name": "i18n:es-ES:astropal"}],
                "result_info": {"cursor": ""},
            },
        }
        cursors = []

        def handler(request):
            cursor = request.url.params.get("cursor")
            cursors.append(cursor)
            assert request.url.params.get("prefix") == "i18n:"
            return httpx.Response(200, json=pages[cursor])

        keys = await cloudflare_store(handler).list_keys("i18n:")

        assert cursors == [None, "page-2"]
        assert keys == ["i18n:en-US:astropal", "i18n:es-ES:astropal"]
