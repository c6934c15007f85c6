"""Print the next two hours of precipitation at a coordinate (China only)."""

import asyncio
import sys

from _client import client_from_env


async def main(location: str) -> None:
    async with client_from_env() as client:
        resp = await client.minutely_precipitation(location, lang="en")

    print(resp.summary)
    for step in resp.minutely:
        print(f"  {step.fx_time:%H:%M}  {step.precip:>5} mm  {step.type_}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "116.41,39.92"))
