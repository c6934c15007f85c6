"""Print an hourly forecast (24, 72 or 168 hours) for a LocationID."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str) -> None:
    async with client_from_env() as client:
        resp = await client.weather_hourly_forecast(location, hours=24, lang="en")

    for hour in resp.hourly:
        pop = f"{hour.pop:.0f}%" if hour.pop is not None else "-"
        print(f"{hour.fx_time:%m-%d %H:%M}  {hour.temp:>5}°C  {hour.text:<16} rain {pop}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "101010100"))
