from noaa_weather.api_client import Configuration, get_json
from noaa_weather.models import Glossary, IconsSummary


def get_glossary(configuration: Configuration) -> Glossary:
    return get_json(configuration, "/glossary", Glossary)


def get_icons_summary(configuration: Configuration) -> IconsSummary:
    return get_json(configuration, "/icons", IconsSummary)
