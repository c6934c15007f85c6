"""Print today's lifestyle indices for a LocationID."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str) -> None:
    async with client_from_env() as client:
        resp = await client.indices_forecast(location, 0, days=1, lang="en")

    for index in resp.daily:
        print(f"{index.name:<28} {index.category:<12} {index.text}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "101010100"))
