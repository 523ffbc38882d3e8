"""Командная строка noaa-weather: одна подкоманда - один запрос к API."""

import argparse
import sys
from typing import Optional, Any, List

from loguru import logger

from noaa_weather.api_client import Configuration
from noaa_weather.apis import alerts, aviation, gridpoints, misc, offices, points, products, radar, stations, zones
from noaa_weather.city import find_city
from noaa_weather.errors import InvalidEnumValue, NoaaWeatherError, ValidationError
from noaa_weather.format import CELSIUS, FAHRENHEIT
from noaa_weather.log import setup_logging
from noaa_weather.models import (
    AlertCertainty,
    AlertSeverity,
    AlertStatus,
    AlertUrgency,
    GridpointForecastUnits,
    MarineRegionCode,
    NwsCenterWeatherServiceUnitId,
    NwsForecastOfficeId,
    NwsZoneType,
    RadarQueueHost,
    RegionType,
    parse_area_code,
    parse_region_code,
)
from noaa_weather.storage import to_json, write_output
from noaa_weather.tables import render

PROG = "noaa-weather"


def _split(text: str) -> List[str]:
    """Список из значений через запятую."""
    return [part.strip() for part in text.split(",") if part.strip()]


def _enum(enum_cls: Any, value: Optional[str]) -> Any:
    if value is None:
        return None
    try:
        return enum_cls.parse(value)
    except InvalidEnumValue as e:
        raise ValidationError(str(e)) from e


def _enums(enum_cls: Any, values: Optional[List[str]]) -> Optional[List[Any]]:
    if values is None:
        return None
    return [_enum(enum_cls, value) for value in values]


def _areas(values: Optional[List[str]]) -> Optional[List[Any]]:
    return [parse_area_code(value) for value in values] if values is not None else None


def _regions(values: Optional[List[str]]) -> Optional[List[Any]]:
    return [parse_region_code(value) for value in values] if values is not None else None


# ============================================================================
# ОБРАБОТЧИКИ ГРУПП
# ============================================================================

def _alert_filters(args: argparse.Namespace) -> dict:
    return {
        "status": _enums(AlertStatus, args.status),
        "message_type": args.message_type,
        "event": args.event,
        "code": args.code,
        "area": _areas(args.area),
        "point": args.point,
        "region": _enums(MarineRegionCode, args.region),
        "region_type": _enum(RegionType, args.region_type),
        "zone": args.zone,
        "urgency": _enums(AlertUrgency, args.urgency),
        "severity": _enums(AlertSeverity, args.severity),
        "certainty": _enums(AlertCertainty, args.certainty),
        "limit": args.limit,
    }


def run_alerts(configuration: Configuration, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "active":
        if args.atom:
            return alerts.get_active_alerts_atom(configuration, **_alert_filters(args))
        return alerts.get_active_alerts(configuration, **_alert_filters(args))
    if command == "area":
        return alerts.get_active_alerts_for_area(configuration, parse_area_code(args.area))
    if command == "count":
        return alerts.get_active_alerts_count(configuration)
    if command == "marine-region":
        return alerts.get_active_alerts_for_region(configuration, _enum(MarineRegionCode, args.region))
    if command == "zone":
        return alerts.get_active_alerts_for_zone(configuration, args.zone_id)
    if command == "list":
        return alerts.get_alerts(
            configuration,
            active=args.active,
            start=args.start,
            end=args.end,
            cursor=args.cursor,
            **_alert_filters(args),
        )
    if command == "alert":
        return alerts.get_alert(configuration, args.alert_id)
    return alerts.get_alert_types(configuration)


def run_gridpoints(configuration: Configuration, args: argparse.Namespace) -> Any:
    office = _enum(NwsForecastOfficeId, args.office)
    if args.command == "gridpoint":
        return gridpoints.get_gridpoint(configuration, office, args.x, args.y)
    if args.command in ("forecast", "hourly"):
        fetch = gridpoints.get_gridpoint_forecast if args.command == "forecast" else gridpoints.get_gridpoint_forecast_hourly
        return fetch(
            configuration,
            office,
            args.x,
            args.y,
            units=_enum(GridpointForecastUnits, args.units),
            feature_flags=args.feature_flags,
        )
    return gridpoints.get_gridpoint_stations(configuration, office, args.x, args.y, limit=args.limit, cursor=args.cursor)


def run_offices(configuration: Configuration, args: argparse.Namespace) -> Any:
    office = _enum(NwsForecastOfficeId, args.office)
    if args.command == "metadata":
        return offices.get_forecast_office(configuration, office)
    if args.command == "headlines":
        return offices.get_forecast_office_headlines(configuration, office)
    return offices.get_forecast_office_headline(configuration, office, args.headline_id)


def run_points(configuration: Configuration, args: argparse.Namespace) -> Any:
    if args.command == "metadata":
        return points.get_point(configuration, args.point)
    return points.get_point_stations(configuration, args.point)


def run_stations(configuration: Configuration, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "metadata":
        return stations.get_station(configuration, args.station_id)
    if command == "list":
        return stations.get_stations(
            configuration, station_ids=args.id, state=_areas(args.state), limit=args.limit, cursor=args.cursor
        )
    if command == "latest-observation":
        return stations.get_latest_observation(configuration, args.station_id, require_qc=args.require_qc)
    if command == "observations":
        return stations.get_station_observations(
            configuration, args.station_id, start=args.start, end=args.end, limit=args.limit
        )
    if command == "observation":
        return stations.get_observation_at(configuration, args.station_id, args.time)
    if command == "tafs":
        return stations.get_tafs(configuration, args.station_id)
    return stations.get_taf(configuration, args.station_id, args.date, args.time)


def run_zones(configuration: Configuration, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "list":
        filters = {
            "zone_ids": args.id,
            "area": _areas(args.area),
            "region": _regions(args.region),
            "point": args.point,
            "include_geometry": args.include_geometry,
            "limit": args.limit,
            "effective": args.effective,
        }
        if args.type and len(args.type) == 1:
            return zones.get_zones_by_type(configuration, _enum(NwsZoneType, args.type[0]), **filters)
        return zones.get_zones(configuration, zone_type=_enums(NwsZoneType, args.type), **filters)
    if command == "metadata":
        return zones.get_zone(configuration, _enum(NwsZoneType, args.type), args.zone_id, effective=args.effective)
    if command == "forecast":
        return zones.get_zone_forecast(configuration, _enum(NwsZoneType, args.type), args.zone_id)
    if command == "stations":
        return zones.get_zone_stations(configuration, args.zone_id, limit=args.limit, cursor=args.cursor)
    return zones.get_zone_observations(configuration, args.zone_id, start=args.start, end=args.end, limit=args.limit)


def run_radar(configuration: Configuration, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "wind-profiler":
        return radar.get_radar_wind_profiler(configuration, args.station_id, time=args.time, interval=args.interval)
    if command == "data-queue":
        return radar.get_radar_data_queue(
            configuration,
            _enum(RadarQueueHost, args.host),
            limit=args.limit,
            arrived=args.arrived,
            created=args.created,
            published=args.published,
            station=args.station,
            queue_type=args.type,
            feed=args.feed,
            resolution=args.resolution,
        )
    if command == "server":
        return radar.get_radar_server(configuration, args.server_id, reporting_host=args.reporting_host)
    if command == "servers":
        return radar.get_radar_servers(configuration, reporting_host=args.reporting_host)
    if command == "station":
        return radar.get_radar_station(
            configuration, args.station_id, reporting_host=args.reporting_host, host=args.host
        )
    if command == "station-alarms":
        return radar.get_radar_station_alarms(configuration, args.station_id)
    return radar.get_radar_stations(
        configuration, station_type=args.station_type, reporting_host=args.reporting_host, host=args.host
    )


def run_aviation(configuration: Configuration, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "cwa":
        cwsu = _enum(NwsCenterWeatherServiceUnitId, args.cwsu)
        return aviation.get_center_weather_advisories_by_date_and_sequence(configuration, cwsu, args.date, args.sequence)
    if command == "cwas":
        return aviation.get_center_weather_advisories(configuration, _enum(NwsCenterWeatherServiceUnitId, args.cwsu))
    if command == "cwsu":
        return aviation.get_center_weather_service_unit(configuration, _enum(NwsCenterWeatherServiceUnitId, args.cwsu))
    if command == "sigmet":
        return aviation.get_sigmet(configuration, args.atsu, args.date, args.time)
    if args.atsu and not (args.start or args.end or args.sequence):
        if args.date:
            return aviation.get_sigmets_by_air_traffic_service_unit_and_date(configuration, args.atsu, args.date)
        return aviation.get_sigmets_by_air_traffic_service_unit(configuration, args.atsu)
    return aviation.get_sigmets(
        configuration, start=args.start, end=args.end, date=args.date, atsu=args.atsu, sequence=args.sequence
    )


def run_products(configuration: Configuration, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "products-by-location":
        return products.get_products_by_location(configuration, args.location_id)
    if command == "product":
        return products.get_product(configuration, args.product_id)
    if command == "locations":
        return products.get_product_locations(configuration)
    if command == "types":
        return products.get_product_types(configuration)
    if command == "list":
        return products.get_products_query(
            configuration,
            location=args.location,
            start=args.start,
            end=args.end,
            office=args.office,
            wmoid=args.wmoid,
            product_type=args.type,
            limit=args.limit,
        )
    if command == "type":
        return products.get_products_by_type(configuration, args.type_id)
    if command == "types-by-location":
        return products.get_products_by_type_and_location(configuration, args.type_id, args.location_id)
    return products.get_product_issuance_locations_by_type(configuration, args.type_id)


def run_weather(configuration: Configuration, args: argparse.Namespace) -> Any:
    city = find_city(args.city, args.state)
    logger.info("Погода для {}", city)
    return stations.get_city_weather(configuration, city)


def run_glossary(configuration: Configuration, args: argparse.Namespace) -> Any:
    glossary = misc.get_glossary(configuration)
    if args.term:
        return glossary.model_copy(update={"glossary": glossary.find(args.term)})
    return glossary


# ============================================================================
# АРГУМЕНТЫ
# ============================================================================

def _add_alert_filters(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--status", type=_split, help="actual,exercise,system,test,draft")
    parser.add_argument("--message-type", type=_split, help="alert,update,cancel")
    parser.add_argument("--event", type=_split, help="Названия событий через запятую")
    parser.add_argument("--code", type=_split, help="Коды событий через запятую")
    parser.add_argument("--area", type=_split, help="Коды штатов или морских районов")
    parser.add_argument("--point", help="Точка в виде широта,долгота")
    parser.add_argument("--region", type=_split, help="Морские регионы: AL,AT,GL,GM,PA,PI")
    parser.add_argument("--region-type", help="land или marine")
    parser.add_argument("--zone", type=_split, help="Идентификаторы зон")
    parser.add_argument("--urgency", type=_split)
    parser.add_argument("--severity", type=_split)
    parser.add_argument("--certainty", type=_split)
    parser.add_argument("--limit", type=int)


def _gridpoint_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("office", help="Код прогнозного офиса, например PSR")
    parser.add_argument("x", type=int)
    parser.add_argument("y", type=int)


class CommandParser(argparse.ArgumentParser):
    """Парсер, который принимает общие флаги на любом уровне подкоманд."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="Вывести ответ в JSON")
        self.add_argument("-o", "--output", default=argparse.SUPPRESS, help="Записать результат в файл")
        self.add_argument(
            "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Подробный журнал запросов"
        )


def _group(subparsers: Any, name: str, help_text: str, handler: Any) -> Any:
    parser = subparsers.add_parser(name, help=help_text)
    parser.set_defaults(handler=handler)
    commands = parser.add_subparsers(dest="command", required=True)
    return commands


def build_parser() -> argparse.ArgumentParser:
    parser = CommandParser(prog=PROG, description="Данные NOAA / National Weather Service (api.weather.gov).")
    parser.set_defaults(json=False, output=None, verbose=False)
    groups = parser.add_subparsers(dest="group", required=True)

    # оповещения
    commands = _group(groups, "alerts", "Оповещения", run_alerts)
    active = commands.add_parser("active", help="Активные оповещения")
    _add_alert_filters(active)
    active.add_argument("--atom", action="store_true", help="Запросить ленту Atom")
    commands.add_parser("area", help="Активные оповещения по штату или морскому району").add_argument("area")
    commands.add_parser("count", help="Число активных оповещений")
    commands.add_parser("marine-region", help="Активные оповещения по морскому региону").add_argument("region")
    commands.add_parser("zone", help="Активные оповещения по зоне").add_argument("zone_id")
    history = commands.add_parser("list", help="Оповещения за последние 7 дней")
    _add_alert_filters(history)
    history.add_argument("--active", action="store_true", default=None)
    history.add_argument("--start")
    history.add_argument("--end")
    history.add_argument("--cursor")
    commands.add_parser("alert", help="Одно оповещение").add_argument("alert_id")
    commands.add_parser("types", help="Типы событий")

    # сетка прогноза
    commands = _group(groups, "gridpoints", "Прогноз по ячейке сетки", run_gridpoints)
    _gridpoint_args(commands.add_parser("gridpoint", help="Сырые слои прогноза"))
    for name, help_text in (("forecast", "Прогноз по 12-часовым периодам"), ("hourly", "Почасовой прогноз")):
        forecast = commands.add_parser(name, help=help_text)
        _gridpoint_args(forecast)
        forecast.add_argument("--units", help="us или si")
        forecast.add_argument("--feature-flags", type=_split)
    grid_stations = commands.add_parser("stations", help="Станции наблюдения для ячейки")
    _gridpoint_args(grid_stations)
    grid_stations.add_argument("--limit", type=int)
    grid_stations.add_argument("--cursor")

    # офисы
    commands = _group(groups, "offices", "Прогнозные офисы", run_offices)
    commands.add_parser("metadata", help="Сведения об офисе").add_argument("office")
    commands.add_parser("headlines", help="Заголовки новостей офиса").add_argument("office")
    headline = commands.add_parser("headline", help="Одна новость офиса")
    headline.add_argument("office")
    headline.add_argument("headline_id")

    # точки
    commands = _group(groups, "points", "Метаданные точки", run_points)
    commands.add_parser("metadata", help="Сведения о точке").add_argument("point", help="широта,долгота")
    commands.add_parser("stations", help="Станции наблюдения рядом с точкой").add_argument("point")

    # станции
    commands = _group(groups, "stations", "Станции наблюдения", run_stations)
    commands.add_parser("metadata", help="Сведения о станции").add_argument("station_id")
    station_list = commands.add_parser("list", help="Список станций")
    station_list.add_argument("--id", type=_split)
    station_list.add_argument("--state", type=_split)
    station_list.add_argument("--limit", type=int)
    station_list.add_argument("--cursor")
    latest = commands.add_parser("latest-observation", help="Последнее наблюдение")
    latest.add_argument("station_id")
    latest.add_argument("--require-qc", action="store_true", default=None)
    latest.add_argument("--temperature-unit", choices=[CELSIUS, FAHRENHEIT])
    observations = commands.add_parser("observations", help="Наблюдения станции")
    observations.add_argument("station_id")
    observations.add_argument("--start")
    observations.add_argument("--end")
    observations.add_argument("--limit", type=int)
    observation = commands.add_parser("observation", help="Наблюдение на заданное время")
    observation.add_argument("station_id")
    observation.add_argument("time")
    commands.add_parser("tafs", help="Прогнозы TAF станции").add_argument("station_id")
    taf = commands.add_parser("taf", help="Один прогноз TAF")
    taf.add_argument("station_id")
    taf.add_argument("date")
    taf.add_argument("time")

    # зоны
    commands = _group(groups, "zones", "Зоны прогноза", run_zones)
    zone_list = commands.add_parser("list", help="Список зон")
    zone_list.add_argument("--type", type=_split)
    zone_list.add_argument("--id", type=_split)
    zone_list.add_argument("--area", type=_split)
    zone_list.add_argument("--region", type=_split)
    zone_list.add_argument("--point")
    zone_list.add_argument("--include-geometry", action="store_true", default=None)
    zone_list.add_argument("--limit", type=int)
    zone_list.add_argument("--effective")
    zone = commands.add_parser("metadata", help="Сведения о зоне")
    zone.add_argument("type")
    zone.add_argument("zone_id")
    zone.add_argument("--effective")
    zone_forecast = commands.add_parser("forecast", help="Текстовый прогноз для зоны")
    zone_forecast.add_argument("type")
    zone_forecast.add_argument("zone_id")
    zone_stations = commands.add_parser("stations", help="Станции в зоне")
    zone_stations.add_argument("zone_id")
    zone_stations.add_argument("--limit", type=int)
    zone_stations.add_argument("--cursor")
    zone_observations = commands.add_parser("observations", help="Наблюдения в зоне")
    zone_observations.add_argument("zone_id")
    zone_observations.add_argument("--start")
    zone_observations.add_argument("--end")
    zone_observations.add_argument("--limit", type=int)

    # радары
    commands = _group(groups, "radar", "Радары", run_radar)
    profiler = commands.add_parser("wind-profiler", help="Профилемер ветра")
    profiler.add_argument("station_id")
    profiler.add_argument("--time")
    profiler.add_argument("--interval")
    queue = commands.add_parser("data-queue", help="Очередь радарных данных")
    queue.add_argument("host", help="rds или tds")
    queue.add_argument("--limit", type=int)
    for name in ("--arrived", "--created", "--published", "--station", "--type", "--feed"):
        queue.add_argument(name)
    queue.add_argument("--resolution", type=int)
    server = commands.add_parser("server", help="Радарный сервер")
    server.add_argument("server_id")
    server.add_argument("--reporting-host")
    commands.add_parser("servers", help="Радарные серверы").add_argument("--reporting-host")
    radar_station = commands.add_parser("station", help="Радарная станция")
    radar_station.add_argument("station_id")
    radar_station.add_argument("--reporting-host")
    radar_station.add_argument("--host")
    commands.add_parser("station-alarms", help="Тревоги радарной станции").add_argument("station_id")
    radar_stations = commands.add_parser("stations", help="Радарные станции")
    radar_stations.add_argument("--station-type", type=_split)
    radar_stations.add_argument("--reporting-host")
    radar_stations.add_argument("--host")

    # авиация
    commands = _group(groups, "aviation", "Авиационная погода", run_aviation)
    cwa = commands.add_parser("cwa", help="Одно предупреждение CWA")
    cwa.add_argument("cwsu")
    cwa.add_argument("date")
    cwa.add_argument("sequence", type=int)
    commands.add_parser("cwas", help="Предупреждения CWA центра").add_argument("cwsu")
    commands.add_parser("cwsu", help="Сведения о центре CWSU").add_argument("cwsu")
    sigmet = commands.add_parser("sigmet", help="Один SIGMET")
    sigmet.add_argument("atsu")
    sigmet.add_argument("date")
    sigmet.add_argument("time")
    sigmets = commands.add_parser("sigmets", help="Список SIGMET")
    sigmets.add_argument("atsu", nargs="?")
    for name in ("--start", "--end", "--date", "--sequence"):
        sigmets.add_argument(name)

    # текстовые продукты
    commands = _group(groups, "products", "Текстовые продукты", run_products)
    commands.add_parser("products-by-location", help="Типы продуктов места выпуска").add_argument("location_id")
    commands.add_parser("product", help="Один продукт").add_argument("product_id")
    commands.add_parser("locations", help="Места выпуска продуктов")
    commands.add_parser("types", help="Типы продуктов")
    product_list = commands.add_parser("list", help="Поиск продуктов")
    for name in ("--location", "--office", "--wmoid", "--type"):
        product_list.add_argument(name, type=_split)
    product_list.add_argument("--start")
    product_list.add_argument("--end")
    product_list.add_argument("--limit", type=int)
    commands.add_parser("type", help="Продукты одного типа").add_argument("type_id")
    by_location = commands.add_parser("types-by-location", help="Продукты типа для места выпуска")
    by_location.add_argument("type_id")
    by_location.add_argument("location_id")
    commands.add_parser("locations-by-type", help="Места выпуска продуктов типа").add_argument("type_id")

    # погода в городе
    commands = _group(groups, "weather", "Погода в городе", run_weather)
    city = commands.add_parser("city", help="Последнее наблюдение для города")
    city.add_argument("city")
    city.add_argument("state")
    city.add_argument("--temperature-unit", choices=[CELSIUS, FAHRENHEIT])

    glossary = groups.add_parser("glossary", help="Глоссарий терминов NWS")
    glossary.add_argument("--term", help="Искать термин по подстроке")
    glossary.set_defaults(handler=run_glossary, command=None)
    return parser


def main(argv: Optional[List[str]] = None, configuration: Optional[Configuration] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    try:
        configuration = configuration or Configuration()
        result = args.handler(configuration, args)
    except NoaaWeatherError as e:
        logger.debug("Команда {} {} завершилась ошибкой: {!r}", args.group, args.command, e)
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

    if args.json:
        content = to_json(result)
    else:
        content = render(result, temperature_unit=getattr(args, "temperature_unit", None))
    return 0 if write_output(content, args.output) else 1


if __name__ == "__main__":
    sys.exit(main())
