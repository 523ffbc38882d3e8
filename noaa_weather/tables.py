"""Текстовые отчёты по ответам API, в рамке из строк '='*60."""

from typing import Dict, Any, List, Callable, Optional

from noaa_weather.format import (
    format_datetime_human_readable,
    format_dewpoint,
    format_optional,
    format_optional_number,
    format_quantity,
    get_zone_from_url,
)
from noaa_weather.models import (
    ActiveAlertsCountResponse,
    Alert,
    AlertAtomEntry,
    AlertAtomFeed,
    AlertTypesResponse,
    CenterWeatherAdvisory,
    CwsuOffice,
    Feature,
    FeatureCollection,
    Glossary,
    Gridpoint,
    GridpointForecast,
    IconsSummary,
    JsonLdGraph,
    Observation,
    ObservationStation,
    Office,
    OfficeHeadline,
    Point,
    RadarQueue,
    RadarServer,
    RadarStation,
    RadarStationAlarm,
    Sigmet,
    TafMetadata,
    TerminalAerodromeForecast,
    TextProduct,
    TextProductLocationCollection,
    TextProductType,
    Zone,
    ZoneForecast,
)
from noaa_weather.storage import to_json

RULE = "=" * 60


def _header(title: str) -> List[str]:
    return ["", RULE, title, RULE]


def _field(label: str, value: Any) -> str:
    return f"{label}: {format_optional(value)}"


# ============================================================================
# ОПОВЕЩЕНИЯ
# ============================================================================

def alert_lines(alert: Alert) -> List[str]:
    lines = _header(format_optional(alert.headline) if alert.headline else format_optional(alert.event))
    lines += [
        _field("Событие", alert.event),
        _field("Статус", alert.status),
        _field("Серьёзность", alert.severity),
        _field("Срочность", alert.urgency),
        _field("Достоверность", alert.certainty),
        _field("Район", alert.area_desc),
        f"Начало: {format_datetime_human_readable(alert.onset)}",
        f"Окончание: {format_datetime_human_readable(alert.ends or alert.expires)}",
        _field("Отправитель", alert.sender_name),
    ]
    zones = [get_zone_from_url(url) for url in alert.affected_zones or []]
    if zones:
        lines.append(f"Зоны: {', '.join(zones)}")
    if alert.description:
        lines += ["", alert.description]
    if alert.instruction:
        lines += ["", f"Указания: {format_optional(alert.instruction)}"]
    return lines


def atom_entry_lines(entry: AlertAtomEntry) -> List[str]:
    return _header(format_optional(entry.title)) + [
        _field("Событие", entry.event),
        _field("Серьёзность", entry.severity),
        _field("Срочность", entry.urgency),
        _field("Район", entry.area_desc),
        f"Истекает: {format_datetime_human_readable(entry.expires)}",
        _field("Ссылка", entry.link),
    ]


def alerts_count_lines(count: ActiveAlertsCountResponse) -> List[str]:
    lines = _header("Активные оповещения")
    lines += [_field("Всего", count.total), _field("Суша", count.land), _field("Море", count.marine)]
    for title, table in (("Регионы", count.regions), ("Территории", count.areas)):
        if table:
            lines.append(f"{title}: " + ", ".join(f"{k}={v}" for k, v in sorted(table.items())))
    return lines


def alert_types_lines(types: AlertTypesResponse) -> List[str]:
    return _header(f"Типы оповещений ({len(types.event_types)})") + list(types.event_types)


# ============================================================================
# НАБЛЮДЕНИЯ И СТАНЦИИ
# ============================================================================

def observation_lines(observation: Observation, target: Optional[str] = None) -> List[str]:
    dewpoint = observation.dewpoint
    lines = _header(f"Наблюдение {format_optional(observation.station and get_zone_from_url(observation.station))}")
    lines += [
        f"Время: {format_datetime_human_readable(observation.timestamp)}",
        _field("Описание", observation.text_description),
        f"Температура: {format_quantity(observation.temperature)}",
        "Точка росы: " + (
            format_dewpoint(dewpoint.value, dewpoint.unit_code, target) if dewpoint else "N/A"
        ),
        f"Влажность: {format_quantity(observation.relative_humidity)}",
        f"Ветер: {format_quantity(observation.wind_speed)}, направление {format_quantity(observation.wind_direction)}",
        f"Порывы: {format_quantity(observation.wind_gust)}",
        f"Давление: {format_quantity(observation.barometric_pressure)}",
        f"Видимость: {format_quantity(observation.visibility)}",
        _field("METAR", observation.raw_message),
    ]
    return lines


def station_lines(station: ObservationStation) -> List[str]:
    return _header(f"Станция {format_optional(station.station_identifier)}") + [
        _field("Название", station.name),
        f"Высота: {format_quantity(station.elevation)}",
        _field("Часовой пояс", station.time_zone),
        _field("Зона прогноза", get_zone_from_url(station.forecast)),
        _field("Округ", get_zone_from_url(station.county)),
    ]


def point_lines(point: Point) -> List[str]:
    return _header(f"Точка: {format_optional(point.city_state())}") + [
        _field("Офис", point.grid_id),
        f"Ячейка сетки: {format_optional_number(point.grid_x)},{format_optional_number(point.grid_y)}",
        _field("Зона прогноза", get_zone_from_url(point.forecast_zone)),
        _field("Радар", point.radar_station),
        _field("Часовой пояс", point.time_zone),
        _field("Прогноз", point.forecast),
        _field("Почасовой прогноз", point.forecast_hourly),
    ]


# ============================================================================
# ПРОГНОЗЫ
# ============================================================================

def gridpoint_lines(gridpoint: Gridpoint) -> List[str]:
    lines = _header(f"Сетка {format_optional(gridpoint.grid_id)} {gridpoint.grid_x},{gridpoint.grid_y}")
    lines += [
        f"Обновлено: {format_datetime_human_readable(gridpoint.update_time)}",
        f"Высота: {format_quantity(gridpoint.elevation)}",
    ]
    temperature = gridpoint.temperature
    if temperature and temperature.values:
        lines.append(f"Температура ({format_optional(temperature.uom)}):")
        for item in temperature.values[:12]:
            lines.append(f"  {item.valid_time}: {format_optional_number(item.value)}")
    if gridpoint.hazards and gridpoint.hazards.values:
        lines.append("Опасные явления:")
        for period in gridpoint.hazards.values:
            for hazard in period.value:
                lines.append(f"  {period.valid_time}: {hazard.phenomenon}.{hazard.significance}")
    return lines


def forecast_lines(forecast: GridpointForecast) -> List[str]:
    lines = _header(f"Прогноз (обновлён {format_datetime_human_readable(forecast.update_time)})")
    for period in forecast.periods:
        wind = format_optional(period.wind_speed)
        direction = format_optional(period.wind_direction)
        lines += [
            "",
            f"{format_optional(period.name) if period.name else format_datetime_human_readable(period.start_time)}",
            f"  Температура: {period.temperature_display()}",
            f"  Ветер: {wind} {direction}",
            f"  {format_optional(period.short_forecast)}",
        ]
        if period.detailed_forecast:
            lines.append(f"  {period.detailed_forecast}")
    return lines


def zone_forecast_lines(forecast: ZoneForecast) -> List[str]:
    lines = _header(f"Прогноз для зоны {format_optional(get_zone_from_url(forecast.zone))}")
    for period in forecast.periods:
        lines += ["", period.name, f"  {period.detailed_forecast}"]
    return lines


# ============================================================================
# ОФИСЫ, ЗОНЫ, ПРОДУКТЫ
# ============================================================================

def office_lines(office: Office) -> List[str]:
    address = office.address
    lines = _header(f"Офис {format_optional(office.id)}: {format_optional(office.name)}")
    if address:
        lines.append(
            f"Адрес: {format_optional(address.street_address)}, {format_optional(address.city)}, "
            f"{format_optional(address.state)} {format_optional(address.zip_code)}"
        )
    lines += [
        _field("Телефон", office.phone_number),
        _field("Email", office.email),
        _field("Сайт", office.website_url),
        _field("Регион", office.nws_region),
        f"Зон прогноза: {len(office.responsible_forecast_zones)}",
        f"Станций наблюдения: {len(office.approved_observation_stations)}",
    ]
    return lines


def headline_lines(headline: OfficeHeadline) -> List[str]:
    return _header(format_optional(headline.title)) + [
        f"Выпущено: {format_datetime_human_readable(headline.issuance_time)}",
        _field("Важное", headline.important),
        _field("Кратко", headline.summary),
        _field("Ссылка", headline.link),
    ]


def zone_lines(zone: Zone) -> List[str]:
    return _header(f"Зона {format_optional(zone.id)}: {format_optional(zone.name)}") + [
        _field("Тип", zone.type),
        _field("Штат", zone.state),
        _field("Офисы", ", ".join(str(cwa) for cwa in zone.cwa) if zone.cwa else None),
        _field("Радар", zone.radar_station),
        _field("Часовой пояс", ", ".join(zone.time_zone) if zone.time_zone else None),
    ]


def product_lines(product: TextProduct) -> List[str]:
    lines = _header(f"{format_optional(product.product_code)}: {format_optional(product.product_name)}")
    lines += [
        _field("Офис", product.issuing_office),
        f"Выпущен: {format_datetime_human_readable(product.issuance_time)}",
        _field("Id", product.id),
    ]
    if product.product_text:
        lines += ["", product.product_text]
    return lines


def product_type_lines(product_type: TextProductType) -> List[str]:
    return [f"{product_type.product_code}: {product_type.product_name}"]


def product_locations_lines(collection: TextProductLocationCollection) -> List[str]:
    lines = _header(f"Места выпуска продуктов ({len(collection.locations)})")
    for code, name in sorted(collection.locations.items()):
        lines.append(f"{code}: {format_optional(name)}")
    return lines


# ============================================================================
# РАДАРЫ
# ============================================================================

def radar_station_lines(station: RadarStation) -> List[str]:
    lines = _header(f"Радар {format_optional(station.id)}: {format_optional(station.name)}")
    lines += [
        _field("Тип", station.station_type),
        f"Высота: {format_quantity(station.elevation)}",
        _field("Часовой пояс", station.time_zone),
    ]
    if station.latency:
        lines.append(f"Текущая задержка: {format_quantity(station.latency.current)}")
    rda = station.rda.properties if station.rda else None
    if rda:
        lines += [_field("Режим", rda.mode), _field("Статус", rda.status), _field("VCP", rda.volume_coverage_pattern)]
    return lines


def radar_server_lines(server: RadarServer) -> List[str]:
    lines = _header(f"Сервер {format_optional(server.id)}") + [
        _field("Тип", server.type),
        _field("Активен", server.active),
        _field("Основной", server.primary),
        f"Собрано: {format_datetime_human_readable(server.collection_time)}",
    ]
    if server.hardware:
        lines += [
            f"Простой CPU: {format_optional_number(server.hardware.cpu_idle)}",
            f"Память: {format_optional_number(server.hardware.memory)}",
            _field("Аптайм", server.hardware.uptime),
        ]
    return lines


def radar_queue_lines(queue: RadarQueue) -> List[str]:
    return [
        f"{format_optional(queue.host)} {format_optional(queue.type)} {format_optional(queue.feed)} "
        f"{format_datetime_human_readable(queue.arrival_time)} ({format_optional_number(queue.size)} байт)"
    ]


def radar_alarm_lines(alarm: RadarStationAlarm) -> List[str]:
    return [
        f"{format_datetime_human_readable(alarm.timestamp)} [{format_optional(alarm.status)}] "
        f"{format_optional(alarm.message)}"
    ]


# ============================================================================
# АВИАЦИЯ
# ============================================================================

def cwa_lines(advisory: CenterWeatherAdvisory) -> List[str]:
    lines = _header(f"CWA {format_optional(advisory.cwsu)} #{format_optional_number(advisory.sequence)}")
    lines += [
        f"Выпущено: {format_datetime_human_readable(advisory.issue_time)}",
        f"Действует: {format_datetime_human_readable(advisory.start)} - {format_datetime_human_readable(advisory.end)}",
        _field("Явление", advisory.observed_property),
    ]
    if advisory.text:
        lines += ["", advisory.text]
    return lines


def cwsu_lines(office: CwsuOffice) -> List[str]:
    return _header(f"CWSU {format_optional(office.id)}: {format_optional(office.name)}") + [
        f"Адрес: {format_optional(office.street)}, {format_optional(office.city)}, "
        f"{format_optional(office.state)} {format_optional(office.zip_code)}",
        _field("Телефон", office.phone_number),
        _field("Email", office.email),
        _field("Сайт", office.website_url),
    ]


def sigmet_lines(sigmet: Sigmet) -> List[str]:
    return _header(f"SIGMET {format_optional(sigmet.atsu)} {format_optional(sigmet.sequence)}") + [
        f"Выпущен: {format_datetime_human_readable(sigmet.issue_time)}",
        f"Действует: {format_datetime_human_readable(sigmet.start)} - {format_datetime_human_readable(sigmet.end)}",
        _field("Явление", sigmet.phenomenon),
        _field("FIR", sigmet.fir),
    ]


def taf_metadata_lines(taf: TafMetadata) -> List[str]:
    return [f"{taf.id}: выпущен {format_datetime_human_readable(taf.issue_time)}"]


def taf_lines(taf: TerminalAerodromeForecast) -> List[str]:
    lines = _header(f"TAF {format_optional(taf.icao)} ({format_optional(taf.station)})")
    lines += [
        f"Выпущен: {format_datetime_human_readable(taf.issue_time)}",
        f"Действует: {format_datetime_human_readable(taf.valid_start)} - {format_datetime_human_readable(taf.valid_end)}",
    ]
    forecasts = ([taf.base_forecast] if taf.base_forecast else []) + list(taf.change_forecasts)
    for forecast in forecasts:
        clouds = " ".join(
            f"{format_optional(layer.amount)}{format_quantity(layer.base)}" for layer in forecast.clouds
        )
        lines += [
            "",
            f"{forecast.change_indicator or 'BASE'} {format_datetime_human_readable(forecast.start)}",
            f"  Ветер: {format_quantity(forecast.wind_direction)} {format_quantity(forecast.wind_speed)}",
            f"  Видимость: {format_quantity(forecast.prevailing_visibility)}",
            f"  Облачность: {clouds or 'N/A'}",
        ]
        if forecast.weather:
            lines.append(f"  Погода: {' '.join(forecast.weather)}")
    return lines


# ============================================================================
# СПРАВОЧНИКИ
# ============================================================================

def glossary_lines(glossary: Glossary) -> List[str]:
    lines = _header(f"Глоссарий ({len(glossary.glossary)} терминов)")
    for term in glossary.glossary:
        lines += ["", format_optional(term.term), f"  {format_optional(term.definition)}"]
    return lines


def icons_lines(icons: IconsSummary) -> List[str]:
    return _header(f"Иконки ({len(icons.icons)})") + [
        f"{name}: {icon.description}" for name, icon in sorted(icons.icons.items())
    ]


RENDERERS: Dict[type, Callable[[Any], List[str]]] = {
    Alert: alert_lines,
    AlertAtomEntry: atom_entry_lines,
    ActiveAlertsCountResponse: alerts_count_lines,
    AlertTypesResponse: alert_types_lines,
    Observation: observation_lines,
    ObservationStation: station_lines,
    Point: point_lines,
    Gridpoint: gridpoint_lines,
    GridpointForecast: forecast_lines,
    ZoneForecast: zone_forecast_lines,
    Office: office_lines,
    OfficeHeadline: headline_lines,
    Zone: zone_lines,
    TextProduct: product_lines,
    TextProductType: product_type_lines,
    TextProductLocationCollection: product_locations_lines,
    RadarStation: radar_station_lines,
    RadarServer: radar_server_lines,
    RadarQueue: radar_queue_lines,
    RadarStationAlarm: radar_alarm_lines,
    CenterWeatherAdvisory: cwa_lines,
    CwsuOffice: cwsu_lines,
    Sigmet: sigmet_lines,
    TafMetadata: taf_metadata_lines,
    TerminalAerodromeForecast: taf_lines,
    Glossary: glossary_lines,
    IconsSummary: icons_lines,
}


def _items(result: Any) -> List[Any]:
    if isinstance(result, (FeatureCollection, JsonLdGraph)):
        return result.items
    if isinstance(result, AlertAtomFeed):
        return list(result.entry)
    if isinstance(result, Feature):
        return [result.properties]
    return [result]


def _fallback(item: Any) -> List[str]:
    wire = item.to_wire() if hasattr(item, "to_wire") else item
    if isinstance(wire, dict):
        return [f"{key}: {value}" for key, value in wire.items() if not isinstance(value, (dict, list))]
    return [str(wire)]


def render(result: Any, title: Optional[str] = None, temperature_unit: Optional[str] = None) -> str:
    """Отчёт по результату любого вызова API; temperature_unit влияет на точку росы."""
    if isinstance(result, dict):
        return to_json(result)
    items = _items(result)
    lines: List[str] = _header(title) if title else []
    if not items:
        lines.append("Нет данных")
    for item in items:
        if isinstance(item, Observation):
            lines += observation_lines(item, temperature_unit)
            continue
        renderer = RENDERERS.get(type(item), _fallback)
        lines += renderer(item)
    lines.append(RULE)
    return "\n".join(lines).lstrip("\n")
