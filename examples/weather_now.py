"""Print current weather and a 3-day forecast for a LocationID."""

import asyncio
import sys

from _client import client_from_env

from qweather_sdk import QWeatherError


async def main(location: str) -> None:
    async with client_from_env() as client:
        now, forecast = await asyncio.gather(
            client.weather_now(location, lang="en"),
            client.weather_daily_forecast(location, days=3, lang="en"),
        )

    print(f"{location} at {now.now.obs_time:%Y-%m-%d %H:%M}: {now.now.text}, {now.now.temp}°C")
    for day in forecast.daily:
        print(f"  {day.fx_date}  {day.temp_min:>5} / {day.temp_max:<5} {day.text_day}")


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "101010100"))
    except QWeatherError as e:
        sys.exit(f"{e.failure_category}: {e}")
