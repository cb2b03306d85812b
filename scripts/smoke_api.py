#!/usr/bin/env python3
"""Manual smoke check against a running LMS profile API.

Usage: smoke_api.py USER_ID [BASE_URL]
"""

import asyncio
import sys
import time

import httpx

BASE_URL = "http://localhost:8000"


async def smoke(user_id: str, base_url: str) -> None:
    async with httpx.AsyncClient(base_url=base_url) as client:
        print("1. /api/health")
        resp = await client.get("/api/health")
        print(f"   Status: {resp.status_code}\n")

        print(f"2. /api/profiles/{user_id} (cold, then warm)")
        for label in ("cold", "warm"):
            started = time.perf_counter()
            resp = await client.get(f"/api/profiles/{user_id}")
            elapsed_ms = (time.perf_counter() - started) * 1000
            print(f"   {label}: {resp.status_code} in {elapsed_ms:.1f} ms")
        if resp.status_code == 200:
            data = resp.json()
            print(f"   {data['full_name']} ({data['role']}, approved={data['approved']})\n")

        print("3. /api/cache/stats")
        print(f"   {(await client.get('/api/cache/stats')).json()}\n")

        print(f"4. DELETE /api/cache/profiles/{user_id}")
        resp = await client.delete(f"/api/cache/profiles/{user_id}")
        print(f"   Status: {resp.status_code}")
        print(f"   {(await client.get('/api/cache/stats')).json()}\n")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit(__doc__)
    asyncio.run(smoke(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else BASE_URL))
