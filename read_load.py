"""
Replay alias redirects against a running service.

Usage:
  python read_load.py --base http://127.0.0.1:3000 --in aliases_created.jsonl --count 15000 --concurrency 200

Redirects are not followed. A 302 whose Location matches the recorded URL
counts as a hit; anything else is a miss.
"""
import argparse
import asyncio
import json
import random
import time

import httpx


def load_aliases(path):
    with open(path, encoding="utf-8") as f:
        return {row["short_url"]: row["url"] for row in map(json.loads, filter(str.strip, f))}


async def follow(client: httpx.AsyncClient, sem: asyncio.Semaphore, alias: int, expected: str) -> bool:
    async with sem:
        try:
            r = await client.get(f"/api/shorturl/{alias}")
        except httpx.HTTPError:
            return False
    return r.status_code == 302 and r.headers.get("location") == expected


async def run(args) -> None:
    aliases = load_aliases(args.aliases_file)
    if not aliases:
        raise SystemExit(f"no aliases in {args.aliases_file}; run write_load.py first")

    picks = random.choices(list(aliases.items()), k=args.count)
    sem = asyncio.Semaphore(args.concurrency)
    limits = httpx.Limits(max_connections=args.concurrency)

    t0 = time.perf_counter()
    async with httpx.AsyncClient(base_url=args.base, limits=limits, timeout=10) as client:
        hits = await asyncio.gather(*(follow(client, sem, alias, url) for alias, url in picks))
    elapsed = time.perf_counter() - t0

    ok = sum(hits)
    print(f"{ok}/{args.count} redirects matched in {elapsed:.3f}s ({args.count / elapsed:.1f} req/s)")


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--base", default="http://127.0.0.1:3000")
    parser.add_argument("--in", dest="aliases_file", default="aliases_created.jsonl")
    parser.add_argument("--count", type=int, default=15000)
    parser.add_argument("--concurrency", type=int, default=200)
    asyncio.run(run(parser.parse_args()))


if __name__ == "__main__":
    main()
