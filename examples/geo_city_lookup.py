"""Search cities by name and print their LocationIDs."""

import asyncio
import sys

from _client import client_from_env


async def main(query: str) -> None:
    async with client_from_env() as client:
        resp = await client.geo_city_lookup(query, number=5, lang="en")

    for city in resp.location:
        print(f"{city.id:>10}  {city.name}, {city.adm1}, {city.country}  ({city.lat}, {city.lon})")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "beijing"))
