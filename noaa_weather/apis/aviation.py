from typing import Optional

from noaa_weather.api_client import Configuration, get_json, query, segment
from noaa_weather.models import (
    CenterWeatherAdvisoryCollection,
    CenterWeatherAdvisoryFeature,
    CwsuOffice,
    SigmetCollection,
    SigmetFeature,
)


def get_center_weather_service_unit(configuration: Configuration, cwsu_id) -> CwsuOffice:
    """Метаданные центра метеообеспечения авиации (CWSU)."""
    return get_json(configuration, f"/aviation/cwsus/{segment(cwsu_id)}", CwsuOffice)


def get_center_weather_advisories(configuration: Configuration, cwsu_id) -> CenterWeatherAdvisoryCollection:
    return get_json(configuration, f"/aviation/cwsus/{segment(cwsu_id)}/cwas", CenterWeatherAdvisoryCollection)


def get_center_weather_advisories_by_date_and_sequence(
    configuration: Configuration, cwsu_id, date: str, sequence: int
) -> CenterWeatherAdvisoryFeature:
    path = f"/aviation/cwsus/{segment(cwsu_id)}/cwas/{segment(date)}/{sequence}"
    return get_json(configuration, path, CenterWeatherAdvisoryFeature)


def get_sigmets(
    configuration: Configuration,
    start: Optional[str] = None,
    end: Optional[str] = None,
    date: Optional[str] = None,
    atsu: Optional[str] = None,
    sequence: Optional[str] = None,
) -> SigmetCollection:
    params = query(start=start, end=end, date=date, atsu=atsu, sequence=sequence)
    return get_json(configuration, "/aviation/sigmets", SigmetCollection, params=params)


def get_sigmets_by_air_traffic_service_unit(configuration: Configuration, atsu: str) -> SigmetCollection:
    return get_json(configuration, f"/aviation/sigmets/{segment(atsu)}", SigmetCollection)


def get_sigmets_by_air_traffic_service_unit_and_date(
    configuration: Configuration, atsu: str, date: str
) -> SigmetCollection:
    return get_json(configuration, f"/aviation/sigmets/{segment(atsu)}/{segment(date)}", SigmetCollection)


def get_sigmet(configuration: Configuration, atsu: str, date: str, time: str) -> SigmetFeature:
    path = f"/aviation/sigmets/{segment(atsu)}/{segment(date)}/{segment(time)}"
    return get_json(configuration, path, SigmetFeature)
