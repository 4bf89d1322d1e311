"""
login_load.py — simple async load script for the login endpoint

Usage:
  python login_load.py --base http://127.0.0.1:8080 --count 5000 --concurrency 100
  python login_load.py --username admin --password bad   # measure the 401 path
"""
import argparse
import asyncio
import time
from datetime import datetime, timezone

import httpx

def _now_iso():
    return datetime.now(timezone.utc).isoformat()

async def _login_one(client: httpx.AsyncClient, base: str, username: str, password: str, expect: int):
    try:
        r = await client.post(
            f"{base}/api/login",
            json={"username": username, "password": password},
            timeout=10,
        )
        return r.status_code == expect
    except httpx.HTTPError:
        return False

async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8080")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", default="admin123")
    parser.add_argument("--expect", type=int, default=None, help="expected status (default: 200 for the demo admin, else 401)")
    parser.add_argument("--count", type=int, default=5000)
    parser.add_argument("--concurrency", type=int, default=100)
    args = parser.parse_args()

    expect = args.expect
    if expect is None:
        expect = 200 if (args.username, args.password) == ("admin", "admin123") else 401

    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    async with httpx.AsyncClient(limits=limit) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(i):
            nonlocal success
            async with sem:
                ok = await _login_one(client, args.base, args.username, args.password, expect)
                if ok:
                    success += 1

        await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   logins={args.count}, ok={success}, fail={args.count - success} (expect {expect})")
    if dt > 0:
        print(f"RPS:   {success/dt:.1f} req/s")

if __name__ == "__main__":
    asyncio.run(main())
