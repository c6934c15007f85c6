"""Print a 24 hour grid forecast at a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str) -> None:
    async with client_from_env() as client:
        resp = await client.grid_weather_hourly_forecast(location, hours=24, lang="en")

    for hour in resp.hourly:
        print(f"{hour.fx_time:%m-%d %H:%M}  {hour.temp:>5}°C  {hour.text}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "116.41,39.92"))
