"""Print the 3 day air quality forecast at a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(latitude: float, longitude: float) -> None:
    async with client_from_env() as client:
        resp = await client.air_daily_forecast(latitude, longitude, lang="en")

    for day in resp.days:
        summary = ", ".join(f"{i.name} {i.aqi_display}" for i in day.indexes)
        print(f"{day.forecast_start_time:%Y-%m-%d}  {summary}")


if __name__ == "__main__":
    args = sys.argv[1:] or ["39.90", "116.40"]
    asyncio.run(main(float(args[0]), float(args[1])))
