"""Print the LocationIDs of all cities with an active warning in a country."""

import asyncio
import sys

from _client import client_from_env


async def main(country: str) -> None:
    async with client_from_env() as client:
        resp = await client.weather_warning_city_list(country)

    print(f"{len(resp.warning_loc_list)} cities with active warnings")
    for loc in resp.warning_loc_list:
        print(f"  {loc.location_id}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "cn"))
