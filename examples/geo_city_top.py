"""List popular cities, optionally for one country."""

import asyncio
import sys

from _client import client_from_env


async def main(country: str) -> None:
    async with client_from_env() as client:
        resp = await client.geo_city_top(range=country, number=20, lang="en")

    for city in resp.top_city_list:
        print(f"{city.id:>10}  {city.name}, {city.country}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "cn"))
