"""Print the next 24 hours of air quality at a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(latitude: float, longitude: float) -> None:
    async with client_from_env() as client:
        resp = await client.air_hourly_forecast(latitude, longitude, lang="en")

    for hour in resp.hours:
        summary = ", ".join(f"{i.name} {i.aqi_display}" for i in hour.indexes)
        print(f"{hour.forecast_time:%m-%d %H:%M}  {summary}")


if __name__ == "__main__":
    args = sys.argv[1:] or ["39.90", "116.40"]
    asyncio.run(main(float(args[0]), float(args[1])))
