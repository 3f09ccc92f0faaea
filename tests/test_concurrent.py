"""Tests that the server handles many simultaneous requests correctly.

Handlers are plain functions, so each in-flight request runs on its own
worker thread and they all meet at the store's reader/writer lock.
"""

import asyncio
import pytest


@pytest.mark.asyncio
class TestConcurrentConnections:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_shorten_requests(self, client, store):
        """Many concurrent POST /shorten; all succeed and keys are unique."""
        concurrency = 50
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [
            client.post("/shorten", json={"url": url})
            for url in urls
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_urls = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code} body={r.text}"
            short_urls.append(r.json()["short_url"])

        assert len(short_urls) == len(set(short_urls)), "All short URLs must be unique under concurrency"
        assert store.count() == concurrency

        keys = {u.rsplit("/", 1)[1] for u in short_urls}
        assert keys == {format(i, "x") for i in range(concurrency)}
        for short_url, url in zip(short_urls, urls):
            assert store.get(short_url.rsplit("/", 1)[1]) == url

    async def test_concurrent_redirect_requests(self, client):
        """Create one short URL, then many concurrent redirects all succeed."""
        create_resp = await client.post(
            "/shorten",
            json={"url": "https://example.com/redirect-target"},
        )
        assert create_resp.status_code == 200

        tasks = [client.get("/0") for _ in range(40)]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 301, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"

    async def test_concurrent_mixed_reads_and_writes(self, client, store):
        """Interleaved creates and lookups never see a torn store."""
        await client.post("/shorten", json={"url": "https://example.com/seed"})

        writes = [
            client.post("/shorten", json={"url": f"https://example.com/w{i}"})
            for i in range(25)
        ]
        reads = [client.get("/0") for _ in range(25)]
        health = [client.get("/api/health") for _ in range(10)]

        responses = await asyncio.gather(*writes, *reads, *health, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")

        assert all(r.status_code == 200 for r in responses[:25])
        assert all(r.status_code == 301 for r in responses[25:50])
        assert all(r.headers["location"] == "https://example.com/seed" for r in responses[25:50])
        assert all(1 <= r.json()["total_urls"] <= 26 for r in responses[50:])
        assert store.count() == 26
