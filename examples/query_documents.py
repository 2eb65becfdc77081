#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from cosmosrest import CosmosClient, Credentials


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a SQL query against a collection")
    p.add_argument("database")
    p.add_argument("collection")
    p.add_argument("sql", nargs="?", default="SELECT * FROM c")
    p.add_argument("--cross-partition", action="store_true")
    p.add_argument("--partition-key", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    query = json.dumps({"query": args.sql, "parameters": []})
    async with CosmosClient(Credentials.from_env()) as client:
        pages = await client.query_documents(
            args.database,
            args.collection,
            query,
            cross_partition=args.cross_partition,
            partition_value=args.partition_key,
        )
    docs = pages.documents()
    print("=" * 65)
    print(f"Pages          : {len(pages)}")
    print(f"Documents      : {len(docs)}")
    print(f"Range fallback : {pages.fallback_used}")
    print("=" * 65)
    for doc in docs[:20]:
        print(json.dumps(doc)[:120])


if __name__ == "__main__":
    asyncio.run(main())
