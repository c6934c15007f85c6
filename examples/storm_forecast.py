"""Print the forecast track of a tropical cyclone (subscription only)."""

import asyncio
import sys

from _client import client_from_env


async def main(storm_id: str) -> None:
    async with client_from_env() as client:
        resp = await client.storm_forecast(storm_id)

    for point in resp.forecast:
        print(f"{point.fx_time:%m-%d %H:%M}  {point.type_:<4} {point.lat},{point.lon}  {point.pressure} hPa")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "NP2018"))
