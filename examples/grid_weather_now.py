"""Print current grid weather at a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str) -> None:
    async with client_from_env() as client:
        resp = await client.grid_weather_now(location, lang="en")

    now = resp.now
    print(f"{location} at {now.obs_time:%Y-%m-%d %H:%M}: {now.text}, {now.temp}°C, {now.wind_dir} {now.wind_speed} km/h")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "116.41,39.92"))
