from typing import Optional, List, Any, Dict, Union

from loguru import logger

from noaa_weather.api_client import (
    Configuration,
    check_limit,
    content_kind,
    decode_json,
    get_json,
    query,
    response_content_type,
    segment,
    send,
)
from noaa_weather.apis.points import get_point
from noaa_weather.city import USCity
from noaa_weather.errors import DecodeError
from noaa_weather.models import (
    ObservationCollection,
    ObservationFeature,
    ObservationStationCollection,
    ObservationStationFeature,
    TafCollection,
    TerminalAerodromeForecast,
)
from noaa_weather.parsers import parse_taf


def get_stations(
    configuration: Configuration,
    station_ids: Optional[List[str]] = None,
    state: Optional[List[Any]] = None,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> ObservationStationCollection:
    params = query(id=station_ids, state=state, limit=check_limit(limit), cursor=cursor)
    return get_json(configuration, "/stations", ObservationStationCollection, params=params)


def get_station(configuration: Configuration, station_id: str) -> ObservationStationFeature:
    return get_json(configuration, f"/stations/{segment(station_id)}", ObservationStationFeature)


def get_station_observations(
    configuration: Configuration,
    station_id: str,
    start: Optional[str] = None,
    end: Optional[str] = None,
    limit: Optional[int] = None,
) -> ObservationCollection:
    params = query(start=start, end=end, limit=check_limit(limit))
    return get_json(configuration, f"/stations/{segment(station_id)}/observations", ObservationCollection, params=params)


def get_latest_observation(
    configuration: Configuration, station_id: str, require_qc: Optional[bool] = None
) -> ObservationFeature:
    path = f"/stations/{segment(station_id)}/observations/latest"
    return get_json(configuration, path, ObservationFeature, params=query(require_qc=require_qc))


def get_observation_at(configuration: Configuration, station_id: str, time: str) -> ObservationFeature:
    path = f"/stations/{segment(station_id)}/observations/{segment(time)}"
    return get_json(configuration, path, ObservationFeature)


def get_tafs(configuration: Configuration, station_id: str) -> TafCollection:
    """Список выпущенных для станции прогнозов TAF."""
    return get_json(configuration, f"/stations/{segment(station_id)}/tafs", TafCollection)


def get_taf(
    configuration: Configuration, station_id: str, date: str, time: str
) -> Union[Dict[str, Any], TerminalAerodromeForecast]:
    """Один прогноз TAF: JSON возвращается как dict, IWXXM XML разбирается в модель."""
    path = f"/stations/{segment(station_id)}/tafs/{segment(date)}/{segment(time)}"
    response = send(configuration, path)
    content_type = response_content_type(response)
    kind = content_kind(content_type)
    if kind == "json":
        return decode_json(response.text, target="TAF")
    if kind == "xml":
        return parse_taf(response.text)
    logger.error("Неожиданный тип содержимого {} для TAF", content_type)
    raise DecodeError("TAF", f"получен ответ с типом содержимого `{content_type}`")


def get_city_weather(configuration: Configuration, city: USCity) -> ObservationFeature:
    """Последнее наблюдение для города: точка, затем её радарная станция, затем наблюдение."""
    point = get_point(configuration, city.coordinate_string())
    station_id = point.properties.radar_station
    if not station_id:
        raise DecodeError("Point", f"для {city} не указана радарная станция")
    logger.debug("Станция для {}: {}", city, station_id)
    return get_latest_observation(configuration, station_id)
