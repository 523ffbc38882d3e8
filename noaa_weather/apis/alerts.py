from typing import Optional, List, Any

from loguru import logger

from noaa_weather.api_client import Configuration, check_limit, content_kind, get_json, query, response_content_type, segment, send
from noaa_weather.errors import DecodeError
from noaa_weather.models import (
    ActiveAlertsCountResponse,
    AlertAtomFeed,
    AlertCollection,
    AlertFeature,
    AlertTypesResponse,
)
from noaa_weather.parsers import parse_alert_feed


def _filters(
    status: Optional[List[Any]] = None,
    message_type: Optional[List[Any]] = None,
    event: Optional[List[str]] = None,
    code: Optional[List[str]] = None,
    area: Optional[List[Any]] = None,
    point: Optional[str] = None,
    region: Optional[List[Any]] = None,
    region_type: Optional[Any] = None,
    zone: Optional[List[str]] = None,
    urgency: Optional[List[Any]] = None,
    severity: Optional[List[Any]] = None,
    certainty: Optional[List[Any]] = None,
    limit: Optional[int] = None,
) -> dict:
    return query(
        status=status,
        message_type=message_type,
        event=event,
        code=code,
        area=area,
        point=point,
        region=region,
        region_type=region_type,
        zone=zone,
        urgency=urgency,
        severity=severity,
        certainty=certainty,
        limit=check_limit(limit),
    )


def get_active_alerts(configuration: Configuration, **filters: Any) -> AlertCollection:
    """Активные оповещения с фильтрами (status, area, severity, limit и т.д.)."""
    return get_json(configuration, "/alerts/active", AlertCollection, params=_filters(**filters))


def get_active_alerts_atom(configuration: Configuration, **filters: Any) -> AlertAtomFeed:
    """Активные оповещения в виде ленты Atom."""
    response = send(
        configuration,
        "/alerts/active",
        params=_filters(**filters),
        headers={"Accept": "application/atom+xml"},
    )
    content_type = response_content_type(response)
    if content_kind(content_type) != "xml":
        logger.error("Ожидалась лента Atom, получен {}", content_type)
        raise DecodeError("AlertAtomFeed", f"получен ответ с типом содержимого `{content_type}`")
    return parse_alert_feed(response.text)


def get_active_alerts_for_area(configuration: Configuration, area: Any) -> AlertCollection:
    return get_json(configuration, f"/alerts/active/area/{segment(area)}", AlertCollection)


def get_active_alerts_count(configuration: Configuration) -> ActiveAlertsCountResponse:
    return get_json(configuration, "/alerts/active/count", ActiveAlertsCountResponse)


def get_active_alerts_for_region(configuration: Configuration, region: Any) -> AlertCollection:
    return get_json(configuration, f"/alerts/active/region/{segment(region)}", AlertCollection)


def get_active_alerts_for_zone(configuration: Configuration, zone_id: str) -> AlertCollection:
    return get_json(configuration, f"/alerts/active/zone/{segment(zone_id)}", AlertCollection)


def get_alerts(
    configuration: Configuration,
    active: Optional[bool] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    cursor: Optional[str] = None,
    **filters: Any,
) -> AlertCollection:
    """Архив оповещений за последние 7 дней."""
    params = query(active=active, start=start, end=end)
    params.update(_filters(**filters))
    params.update(query(cursor=cursor))
    return get_json(configuration, "/alerts", AlertCollection, params=params)


def get_alert(configuration: Configuration, alert_id: str) -> AlertFeature:
    return get_json(configuration, f"/alerts/{segment(alert_id)}", AlertFeature)


def get_alert_types(configuration: Configuration) -> AlertTypesResponse:
    return get_json(configuration, "/alerts/types", AlertTypesResponse)
