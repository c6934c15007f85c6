"""Build a client from QWEATHER_ID / QWEATHER_KEY for the example scripts."""

import logging
import os
import sys

from qweather_sdk import QWeatherClient


def client_from_env() -> QWeatherClient:
    """
    Signature mode when QWEATHER_ID is set (QWEATHER_KEY is then the private
    key), API key mode otherwise. Set QWEATHER_DEBUG=1 to log each request.
    """
    if os.environ.get("QWEATHER_DEBUG") == "1":
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    public_id = os.environ.get("QWEATHER_ID")
    key = os.environ.get("QWEATHER_KEY")
    if not key:
        sys.exit("QWEATHER_KEY is not set")

    subscription = os.environ.get("QWEATHER_SUBSCRIPTION") == "1"
    if public_id:
        return QWeatherClient.with_signature(public_id, key, subscription=subscription)
    return QWeatherClient.with_key(key, subscription=subscription)
