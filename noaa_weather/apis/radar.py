from typing import Optional, List, Dict, Any

from noaa_weather.api_client import Configuration, check_limit, get_json, query, segment
from noaa_weather.models import (
    RadarQueueCollection,
    RadarServer,
    RadarServerCollection,
    RadarStationAlarmCollection,
    RadarStationCollection,
    RadarStationFeature,
)


def get_radar_servers(configuration: Configuration, reporting_host: Optional[str] = None) -> RadarServerCollection:
    return get_json(configuration, "/radar/servers", RadarServerCollection, params=query(reportingHost=reporting_host))


def get_radar_server(configuration: Configuration, server_id: str, reporting_host: Optional[str] = None) -> RadarServer:
    params = query(reportingHost=reporting_host)
    return get_json(configuration, f"/radar/servers/{segment(server_id)}", RadarServer, params=params)


def get_radar_stations(
    configuration: Configuration,
    station_type: Optional[List[str]] = None,
    reporting_host: Optional[str] = None,
    host: Optional[str] = None,
) -> RadarStationCollection:
    params = query(stationType=station_type, reportingHost=reporting_host, host=host)
    return get_json(configuration, "/radar/stations", RadarStationCollection, params=params)


def get_radar_station(
    configuration: Configuration,
    station_id: str,
    reporting_host: Optional[str] = None,
    host: Optional[str] = None,
) -> RadarStationFeature:
    params = query(reportingHost=reporting_host, host=host)
    return get_json(configuration, f"/radar/stations/{segment(station_id)}", RadarStationFeature, params=params)


def get_radar_station_alarms(configuration: Configuration, station_id: str) -> RadarStationAlarmCollection:
    return get_json(configuration, f"/radar/stations/{segment(station_id)}/alarms", RadarStationAlarmCollection)


def get_radar_data_queue(
    configuration: Configuration,
    host: Any,
    limit: Optional[int] = None,
    arrived: Optional[str] = None,
    created: Optional[str] = None,
    published: Optional[str] = None,
    station: Optional[str] = None,
    queue_type: Optional[str] = None,
    feed: Optional[str] = None,
    resolution: Optional[int] = None,
) -> RadarQueueCollection:
    """Очередь радарных данных на хосте rds или tds."""
    params = query(
        limit=check_limit(limit),
        arrived=arrived,
        created=created,
        published=published,
        station=station,
        type=queue_type,
        feed=feed,
        resolution=resolution,
    )
    return get_json(configuration, f"/radar/queues/{segment(host)}", RadarQueueCollection, params=params)


def get_radar_wind_profiler(
    configuration: Configuration,
    station_id: str,
    time: Optional[str] = None,
    interval: Optional[str] = None,
) -> Dict[str, Any]:
    """Данные профилемера ветра; схема ответа не опубликована, возвращается dict."""
    params = query(time=time, interval=interval)
    return get_json(configuration, f"/radar/profilers/{segment(station_id)}", params=params)
