from typing import Optional, List, Any

from noaa_weather.api_client import Configuration, check_limit, get_json, query, segment
from noaa_weather.models import (
    ObservationCollection,
    ObservationStationCollection,
    ZoneCollection,
    ZoneFeature,
    ZoneForecastFeature,
)


def _zone_filters(
    zone_ids: Optional[List[str]] = None,
    area: Optional[List[Any]] = None,
    region: Optional[List[Any]] = None,
    zone_type: Optional[List[Any]] = None,
    point: Optional[str] = None,
    include_geometry: Optional[bool] = None,
    limit: Optional[int] = None,
    effective: Optional[str] = None,
) -> dict:
    return query(
        id=zone_ids,
        area=area,
        region=region,
        type=zone_type,
        point=point,
        include_geometry=include_geometry,
        limit=check_limit(limit),
        effective=effective,
    )


def get_zones(configuration: Configuration, **filters: Any) -> ZoneCollection:
    """Зоны с фильтрами по id, территории, региону, типу и точке."""
    return get_json(configuration, "/zones", ZoneCollection, params=_zone_filters(**filters))


def get_zones_by_type(configuration: Configuration, zone_type: Any, **filters: Any) -> ZoneCollection:
    return get_json(configuration, f"/zones/{segment(zone_type)}", ZoneCollection, params=_zone_filters(**filters))


def get_zone(configuration: Configuration, zone_type: Any, zone_id: str, effective: Optional[str] = None) -> ZoneFeature:
    path = f"/zones/{segment(zone_type)}/{segment(zone_id)}"
    return get_json(configuration, path, ZoneFeature, params=query(effective=effective))


def get_zone_forecast(configuration: Configuration, zone_type: Any, zone_id: str) -> ZoneForecastFeature:
    return get_json(configuration, f"/zones/{segment(zone_type)}/{segment(zone_id)}/forecast", ZoneForecastFeature)


def get_zone_observations(
    configuration: Configuration,
    zone_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: Optional[int] = None,
) -> ObservationCollection:
    params = query(start=start, end=end, limit=check_limit(limit))
    return get_json(configuration, f"/zones/forecast/{segment(zone_id)}/observations", ObservationCollection, params=params)


def get_zone_stations(
    configuration: Configuration,
    zone_id: str,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> ObservationStationCollection:
    params = query(limit=check_limit(limit), cursor=cursor)
    return get_json(configuration, f"/zones/forecast/{segment(zone_id)}/stations", ObservationStationCollection, params=params)
