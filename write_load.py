"""
write_load.py — simple async load script to create courses

Signs up one throwaway user, then creates courses as that user.

Usage:
  python write_load.py --base http://127.0.0.1:8000 --count 2000 --concurrency 100 --out courses_created.jsonl
"""
import argparse
import asyncio
import json
import random
import string
import time
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _rand_word(n=8):
    alphabet = string.ascii_lowercase
    return "".join(random.choice(alphabet) for _ in range(n))


async def _signup(client: httpx.AsyncClient, base: str, email: str, password: str) -> None:
    r = await client.post(
        f"{base}/users",
        json={"firstName": "Load", "lastName": "Tester", "emailAddress": email, "password": password},
        timeout=10,
    )
    r.raise_for_status()


async def _create_one(client: httpx.AsyncClient, base: str, auth: httpx.BasicAuth, out_file, idx: int):
    payload = {
        "title": f"Load course {idx} {_rand_word()}",
        "description": f"Generated by write_load ({_rand_word(12)})",
        "estimatedTime": f"{random.randint(1, 40)} hours",
    }
    try:
        r = await client.post(f"{base}/courses", json=payload, auth=auth, timeout=10)
        r.raise_for_status()
        course_id = r.json().get("id")
        if course_id and out_file:
            out_file.write(json.dumps({"id": course_id, "title": payload["title"]}) + "\n")
        return True
    except httpx.HTTPError:
        return False


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--count", type=int, default=2000)
    parser.add_argument("--concurrency", type=int, default=100)
    parser.add_argument("--password", default="load-password")
    parser.add_argument("--out", default="courses_created.jsonl")
    args = parser.parse_args()

    email = f"load-{_rand_word()}@example.com"
    auth = httpx.BasicAuth(email, args.password)

    start_iso = _now_iso()
    t0 = time.perf_counter()
    success = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    with open(args.out, "w", encoding="utf-8") as out_f:
        async with httpx.AsyncClient(limits=limit) as client:
            await _signup(client, args.base, email, args.password)
            sem = asyncio.Semaphore(args.concurrency)

            async def _task(i):
                nonlocal success
                async with sem:
                    ok = await _create_one(client, args.base, auth, out_f, i)
                    if ok:
                        success += 1

            await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"USER:  {email}")
    print(f"OPS:   writes={args.count}, ok={success}, fail={args.count - success}")
    if dt > 0:
        print(f"TPS:   {success/dt:.1f} req/s")


if __name__ == "__main__":
    asyncio.run(main())
