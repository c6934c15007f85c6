"""Print a 3 or 7 day grid forecast at a coordinate."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str, days: int) -> None:
    async with client_from_env() as client:
        resp = await client.grid_weather_daily_forecast(location, days=days, lang="en")

    for day in resp.daily:
        print(f"{day.fx_date}  {day.temp_min:>5} / {day.temp_max:<5} {day.text_day}")


if __name__ == "__main__":
    args = sys.argv[1:]
    asyncio.run(main(args[0] if args else "116.41,39.92", int(args[1]) if len(args) > 1 else 3))
