"""List active weather warnings for every Chinese city that has one."""

import asyncio

from _client import client_from_env


async def main() -> None:
    async with client_from_env() as client:
        cities = await client.weather_warning_city_list("cn")
        ids = [loc.location_id for loc in cities.warning_loc_list[:10]]
        results = await asyncio.gather(*(client.weather_warning(i) for i in ids))

    for location_id, resp in zip(ids, results):
        for warning in resp.warning:
            print(f"{location_id}  [{warning.severity_color}] {warning.title}")


if __name__ == "__main__":
    asyncio.run(main())
