"""Search points of interest by keyword."""

import asyncio
import sys

from _client import client_from_env


async def main(keyword: str, poi_type: str) -> None:
    async with client_from_env() as client:
        resp = await client.geo_poi_lookup(keyword, poi_type, number=10, lang="en")

    for poi in resp.poi:
        print(f"{poi.id:>12}  {poi.name}, {poi.adm2}  ({poi.lat}, {poi.lon})")


if __name__ == "__main__":
    args = sys.argv[1:]
    asyncio.run(main(args[0] if args else "jingshan", args[1] if len(args) > 1 else "scenic"))
