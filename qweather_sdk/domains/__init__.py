"""
Domain Endpoints

Each domain module contains the response models and endpoint definitions
for one group of QWeather APIs. Adding or removing a group is a
single-file operation plus one import in endpoints.py.
"""

from .air_quality import AIR_QUALITY_ENDPOINTS
from .geo import GEO_ENDPOINTS
from .grid_weather import GRID_WEATHER_ENDPOINTS
from .indices import INDICES_ENDPOINTS
from .tropical import TROPICAL_ENDPOINTS
from .warning import WARNING_ENDPOINTS
from .weather import WEATHER_ENDPOINTS

__all__ = [
    "AIR_QUALITY_ENDPOINTS",
    "GEO_ENDPOINTS",
    "GRID_WEATHER_ENDPOINTS",
    "INDICES_ENDPOINTS",
    "TROPICAL_ENDPOINTS",
    "WARNING_ENDPOINTS",
    "WEATHER_ENDPOINTS",
]
