"""Print pollutant readings from one monitoring station."""

import asyncio
import sys

from _client import client_from_env


async def main(station_id: str) -> None:
    async with client_from_env() as client:
        resp = await client.air_station(station_id, lang="en")

    for pollutant in resp.pollutants:
        print(f"{pollutant.name:<8} {pollutant.concentration.value} {pollutant.concentration.unit}")
    for source in resp.metadata.sources or []:
        print(f"source: {source}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "P58911"))
