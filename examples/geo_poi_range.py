"""List points of interest within a radius of a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str, poi_type: str, radius: float) -> None:
    async with client_from_env() as client:
        resp = await client.geo_poi_range(location, poi_type, radius=radius, number=20, lang="en")

    for poi in resp.poi:
        print(f"{poi.id:>12}  {poi.name}  ({poi.lat}, {poi.lon})")


if __name__ == "__main__":
    args = sys.argv[1:]
    asyncio.run(
        main(
            args[0] if args else "116.40,39.88",
            args[1] if len(args) > 1 else "scenic",
            float(args[2]) if len(args) > 2 else 10,
        )
    )
