from noaa_weather.api_client import Configuration, get_json, segment
from noaa_weather.models import Office, OfficeHeadline, OfficeHeadlineCollection


def get_forecast_office(configuration: Configuration, office_id) -> Office:
    return get_json(configuration, f"/offices/{segment(office_id)}", Office)


def get_forecast_office_headlines(configuration: Configuration, office_id) -> OfficeHeadlineCollection:
    return get_json(configuration, f"/offices/{segment(office_id)}/headlines", OfficeHeadlineCollection)


def get_forecast_office_headline(configuration: Configuration, office_id, headline_id: str) -> OfficeHeadline:
    path = f"/offices/{segment(office_id)}/headlines/{segment(headline_id)}"
    return get_json(configuration, path, OfficeHeadline)
