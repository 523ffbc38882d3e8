from noaa_weather.api_client import Configuration, get_json, segment
from noaa_weather.models import ObservationStationCollection, PointFeature


def get_point(configuration: Configuration, point: str) -> PointFeature:
    """Метаданные точки "широта,долгота": офис, ячейка сетки, ссылки на прогнозы."""
    return get_json(configuration, f"/points/{segment(point)}", PointFeature)


def get_point_stations(configuration: Configuration, point: str) -> ObservationStationCollection:
    return get_json(configuration, f"/points/{segment(point)}/stations", ObservationStationCollection)
