#!/usr/bin/env python3
from __future__ import annotations

import asyncio
import json

from cosmosrest import CosmosClient, Credentials


async def main() -> None:
    async with CosmosClient(Credentials.from_env()) as client:
        body = json.loads(await client.list_databases())
    for db in body.get("Databases", []):
        print(f"{db['id']:30} {db['_rid']}")


if __name__ == "__main__":
    asyncio.run(main())
