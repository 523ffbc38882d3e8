from typing import Optional, List, Dict, Any

from noaa_weather.api_client import Configuration, check_limit, csv, get_json, query, segment
from noaa_weather.models import (
    GridpointFeature,
    GridpointForecastFeature,
    ObservationStationCollection,
)


def _path(office, x: int, y: int) -> str:
    return f"/gridpoints/{segment(office)}/{x},{y}"


def _forecast_headers(feature_flags: Optional[List[str]]) -> Dict[str, str]:
    if not feature_flags:
        return {}
    return {"Feature-Flags": csv(feature_flags)}


def get_gridpoint(configuration: Configuration, office, x: int, y: int) -> GridpointFeature:
    """Сырые слои прогноза (температура, осадки, погода, опасные явления) для ячейки сетки."""
    return get_json(configuration, _path(office, x, y), GridpointFeature)


def get_gridpoint_forecast(
    configuration: Configuration,
    office,
    x: int,
    y: int,
    units: Any = None,
    feature_flags: Optional[List[str]] = None,
) -> GridpointForecastFeature:
    """Текстовый прогноз по 12-часовым периодам."""
    return get_json(
        configuration,
        f"{_path(office, x, y)}/forecast",
        GridpointForecastFeature,
        params=query(units=units),
        headers=_forecast_headers(feature_flags),
    )


def get_gridpoint_forecast_hourly(
    configuration: Configuration,
    office,
    x: int,
    y: int,
    units: Any = None,
    feature_flags: Optional[List[str]] = None,
) -> GridpointForecastFeature:
    """Почасовой прогноз."""
    return get_json(
        configuration,
        f"{_path(office, x, y)}/forecast/hourly",
        GridpointForecastFeature,
        params=query(units=units),
        headers=_forecast_headers(feature_flags),
    )


def get_gridpoint_stations(
    configuration: Configuration,
    office,
    x: int,
    y: int,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> ObservationStationCollection:
    params = query(limit=check_limit(limit), cursor=cursor)
    return get_json(configuration, f"{_path(office, x, y)}/stations", ObservationStationCollection, params=params)
