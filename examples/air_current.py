"""Print the current AQI and pollutants at a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(latitude: float, longitude: float) -> None:
    async with client_from_env() as client:
        resp = await client.air_current(latitude, longitude, lang="en")

    for index in resp.indexes:
        pollutant = index.primary_pollutant.name if index.primary_pollutant else "-"
        print(f"{index.name}: {index.aqi_display} ({index.category}), primary {pollutant}")
    for pollutant in resp.pollutants:
        print(f"  {pollutant.name:<8} {pollutant.concentration.value} {pollutant.concentration.unit}")


if __name__ == "__main__":
    args = sys.argv[1:] or ["39.90", "116.40"]
    asyncio.run(main(float(args[0]), float(args[1])))
