"""Print a daily forecast (3, 7, 10, 15 or 30 days) for a LocationID."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str, days: int) -> None:
    async with client_from_env() as client:
        resp = await client.weather_daily_forecast(location, days=days, lang="en")

    for day in resp.daily:
        print(f"{day.fx_date}  {day.temp_min:>5} / {day.temp_max:<5} {day.text_day} / {day.text_night}")


if __name__ == "__main__":
    args = sys.argv[1:]
    asyncio.run(main(args[0] if args else "101010100", int(args[1]) if len(args) > 1 else 7))
