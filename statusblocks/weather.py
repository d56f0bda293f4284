"""Weather results, wind directions and IP-based location."""

from __future__ import annotations

import dataclasses
import enum
import json
import math
import urllib.error
import urllib.request
from collections.abc import Mapping

IP_API_URL = "https://ipapi.co/json"

_LOCATION_PARSE_ERROR = "Failed while parsing location API result"


class WeatherIcon(enum.Enum):
    """Icon shown for a kind of weather."""

    SUN = "weather_sun"
    RAIN = "weather_rain"
    CLOUDS = "weather_clouds"
    THUNDER = "weather_thunder"
    SNOW = "weather_snow"
    DEFAULT = "weather_default"


@dataclasses.dataclass(frozen=True)
class Coordinates:
    """A position in degrees."""

    latitude: float
    longitude: float


@dataclasses.dataclass(frozen=True)
class WeatherResult:
    """Weather reported by a service, ready to be displayed."""

    location: str
    temp: float
    apparent: float
    humidity: float
    weather: str
    weather_verbose: str
    wind: float
    wind_kmh: float
    wind_direction: str
    icon: WeatherIcon = WeatherIcon.DEFAULT

    def values(self) -> dict[str, object]:
        """Placeholder values; ``icon`` holds the icon name."""
        return {
            "icon": self.icon.value,
            "location": self.location,
            "temp": self.temp,
            "apparent": self.apparent,
            "humidity": self.humidity,
            "weather": self.weather,
            "weather_verbose": self.weather_verbose,
            "wind": self.wind,
            "wind_kmh": self.wind_kmh,
            "direction": self.wind_direction,
        }


def _round_half_away(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    rounded = math.floor(abs(value) + 0.5)
    return int(math.copysign(rounded, value))


def convert_wind_direction(direction: float | None) -> str:
    """Abbreviated compass name of an azimuth in degrees; ``-`` when unknown."""
    if direction is None:
        return "-"
    degrees = _round_half_away(direction)
    if 24 <= degrees <= 68:
        return "NE"
    if 69 <= degrees <= 113:
        return "E"
    if 114 <= degrees <= 158:
        return "SE"
    if 159 <= degrees <= 203:
        return "S"
    if 204 <= degrees <= 248:
        return "SW"
    if 249 <= degrees <= 293:
        return "W"
    if 294 <= degrees <= 338:
        return "NW"
    return "N"


def australian_apparent_temp(temp: float, humidity: float, wind_speed: float) -> float:
    """Australian Apparent Temperature from metric units."""
    exponent = 17.27 * temp / (237.7 + temp)
    water_vapor_pressure = humidity * 0.06105 * math.exp(exponent)
    return temp + 0.33 * water_vapor_pressure - 0.7 * wind_speed - 4.0


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_ip_location(data: object) -> Coordinates:
    """Coordinates from an ipapi.co reply; raise when it reports an error."""
    if not isinstance(data, Mapping):
        raise ValueError(_LOCATION_PARSE_ERROR)

    error = data.get("error", False)
    if not isinstance(error, bool):
        raise ValueError(_LOCATION_PARSE_ERROR)
    reason = data.get("reason")
    if reason is not None and not isinstance(reason, str):
        raise ValueError(_LOCATION_PARSE_ERROR)

    if error:
        raise RuntimeError(f"ipapi.co error: {reason or 'Unknown Error'}")

    latitude = data.get("latitude")
    longitude = data.get("longitude")
    if not (_is_number(latitude) and _is_number(longitude)):
        raise ValueError(_LOCATION_PARSE_ERROR)
    return Coordinates(float(latitude), float(longitude))


def find_ip_location(url: str = IP_API_URL) -> Coordinates:
    """Look up the current location from the machine's public IP address."""
    try:
        with urllib.request.urlopen(url, timeout=30) as response:
            body = response.read()
    except (urllib.error.URLError, OSError) as exc:
        raise RuntimeError("Failed during request for current location") from exc
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(_LOCATION_PARSE_ERROR) from exc
    return parse_ip_location(data)