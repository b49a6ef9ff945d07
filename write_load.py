"""
Create short URLs against a running service and record the aliases.

Usage:
  python write_load.py --base http://127.0.0.1:3000 --count 2000 --concurrency 100 --out aliases_created.jsonl

Each accepted URL is written as {"short_url": int, "url": str} per line,
which read_load.py consumes.
"""
import argparse
import asyncio
import json
import time
import uuid

import httpx


async def submit(client: httpx.AsyncClient, sem: asyncio.Semaphore, url: str):
    async with sem:
        try:
            r = await client.post("/api/shorturl", json={"url": url})
            r.raise_for_status()
            return r.json().get("short_url")
        except (httpx.HTTPError, ValueError):
            return None


async def run(args) -> None:
    urls = [f"https://load.example/{i}/{uuid.uuid4().hex[:8]}" for i in range(args.count)]
    sem = asyncio.Semaphore(args.concurrency)
    limits = httpx.Limits(max_connections=args.concurrency)

    t0 = time.perf_counter()
    async with httpx.AsyncClient(base_url=args.base, limits=limits, timeout=10) as client:
        aliases = await asyncio.gather(*(submit(client, sem, url) for url in urls))
    elapsed = time.perf_counter() - t0

    created = [(alias, url) for alias, url in zip(aliases, urls) if alias is not None]
    with open(args.out, "w", encoding="utf-8") as out:
        for alias, url in created:
            out.write(json.dumps({"short_url": alias, "url": url}) + "\n")

    print(f"created {len(created)}/{args.count} aliases in {elapsed:.3f}s "
          f"({len(created) / elapsed:.1f} creates/s) -> {args.out}")


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--base", default="http://127.0.0.1:3000")
    parser.add_argument("--count", type=int, default=2000)
    parser.add_argument("--concurrency", type=int, default=100)
    parser.add_argument("--out", default="aliases_created.jsonl")
    asyncio.run(run(parser.parse_args()))


if __name__ == "__main__":
    main()
