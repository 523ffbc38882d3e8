from typing import Optional, Dict, Any, List

from bs4 import BeautifulSoup
from loguru import logger
from pydantic import ValidationError as ModelValidationError

from noaa_weather.errors import DecodeError
from noaa_weather.models.alerts import AlertAtomFeed
from noaa_weather.models.aviation import TerminalAerodromeForecast

# Элементы CAP внутри записи ленты и поля модели, в которые они попадают
CAP_FIELDS = {
    "event": "event",
    "sent": "sent",
    "effective": "effective",
    "onset": "onset",
    "expires": "expires",
    "status": "status",
    "msgType": "msg_type",
    "category": "category",
    "urgency": "urgency",
    "severity": "severity",
    "certainty": "certainty",
    "areaDesc": "area_desc",
    "polygon": "polygon",
}


def _soup(xml_text: str, target: str) -> BeautifulSoup:
    if not xml_text or not xml_text.strip():
        raise DecodeError(target, "пустой XML-документ")
    return BeautifulSoup(xml_text, "lxml-xml")


def _child_text(tag: Any, name: str) -> Optional[str]:
    """Текст прямого потомка с локальным именем name."""
    child = tag.find(name, recursive=False)
    if child is None:
        return None
    return child.get_text(strip=True)


def _text(tag: Any, name: str) -> Optional[str]:
    found = tag.find(name)
    if found is None:
        return None
    return found.get_text(strip=True)


def _validate(model: Any, data: Dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ModelValidationError as e:
        logger.error("XML не соответствует {}: {}", model.__name__, e)
        raise DecodeError(model.__name__, str(e)) from e


# ============================================================================
# ЛЕНТА ОПОВЕЩЕНИЙ ATOM
# ============================================================================

def _author(tag: Any) -> Optional[Dict[str, Any]]:
    author = tag.find("author", recursive=False)
    if author is None:
        return None
    return {"name": _child_text(author, "name")}


def _pairs(tag: Any) -> List[Dict[str, str]]:
    """Пары valueName/value из cap:geocode или cap:parameter."""
    names = [n.get_text(strip=True) for n in tag.find_all("valueName")]
    values = [v.get_text(strip=True) for v in tag.find_all("value")]
    return [{"value_name": n, "value": v} for n, v in zip(names, values)]


def _entry(tag: Any) -> Dict[str, Any]:
    link = tag.find("link", recursive=False)
    entry: Dict[str, Any] = {
        "id": _child_text(tag, "id"),
        "updated": _child_text(tag, "updated"),
        "published": _child_text(tag, "published"),
        "author": _author(tag),
        "title": _child_text(tag, "title"),
        "link": link.get("href") if link is not None else None,
        "summary": _child_text(tag, "summary"),
    }
    for element, field in CAP_FIELDS.items():
        value = _child_text(tag, element)
        # пустой cap:polygon означает отсутствие полигона
        entry[field] = value or None

    entry["geocode"] = []
    for geocode in tag.find_all("geocode", recursive=False):
        entry["geocode"].extend(_pairs(geocode))
    entry["parameter"] = []
    for parameter in tag.find_all("parameter", recursive=False):
        entry["parameter"].extend(_pairs(parameter))
    return entry


def parse_alert_feed(xml_text: str) -> AlertAtomFeed:
    """Разобрать ленту активных оповещений в формате Atom."""
    soup = _soup(xml_text, "AlertAtomFeed")
    feed = soup.find("feed")
    if feed is None:
        raise DecodeError("AlertAtomFeed", "в документе нет элемента feed")

    data = {
        "id": _child_text(feed, "id"),
        "generator": _child_text(feed, "generator"),
        "updated": _child_text(feed, "updated"),
        "author": _author(feed),
        "title": _child_text(feed, "title"),
        "entry": [_entry(tag) for tag in feed.find_all("entry", recursive=False)],
    }
    logger.debug("Лента Atom: {} записей", len(data["entry"]))
    return _validate(AlertAtomFeed, data)


# ============================================================================
# TAF В ФОРМАТЕ IWXXM
# ============================================================================

def _code_from_href(tag: Any) -> Optional[str]:
    """Последний сегмент ссылки xlink:href на кодовую таблицу WMO."""
    if tag is None:
        return None
    href = tag.get("xlink:href") or tag.get("href")
    if not href:
        return None
    return href.rstrip("/").rsplit("/", 1)[-1]


def _measure(tag: Any) -> Optional[Dict[str, Any]]:
    if tag is None:
        return None
    text = tag.get_text(strip=True)
    if not text:
        return None
    return {"value": text, "unit_code": tag.get("uom")}


def _flag(tag: Any, attribute: str) -> Optional[bool]:
    if tag is None or tag.get(attribute) is None:
        return None
    return tag.get(attribute).lower() == "true"


def _period(tag: Any) -> Dict[str, Optional[str]]:
    if tag is None:
        return {"start": None, "end": None}
    begin = _text(tag, "beginPosition")
    end = _text(tag, "endPosition")
    if begin is None and end is None:
        instant = _text(tag, "timePosition")
        return {"start": instant, "end": None}
    return {"start": begin, "end": end}


def _forecast(tag: Any) -> Dict[str, Any]:
    wind = tag.find("AerodromeSurfaceWindForecast")
    period = _period(tag.find("phenomenonTime"))
    clouds = []
    for layer in tag.find_all("CloudLayer"):
        clouds.append({
            "amount": _code_from_href(layer.find("amount")),
            "base": _measure(layer.find("base")),
        })
    return {
        "change_indicator": tag.get("changeIndicator"),
        "start": period["start"],
        "end": period["end"],
        "cloud_and_visibility_ok": _flag(tag, "cloudAndVisibilityOK"),
        "prevailing_visibility": _measure(tag.find("prevailingVisibility")),
        "prevailing_visibility_operator": _text(tag, "prevailingVisibilityOperator"),
        "variable_wind_direction": _flag(wind, "variableWindDirection"),
        "wind_direction": _measure(wind.find("meanWindDirection")) if wind else None,
        "wind_speed": _measure(wind.find("meanWindSpeed")) if wind else None,
        "wind_gust": _measure(wind.find("windGustSpeed")) if wind else None,
        "weather": [code for code in (_code_from_href(w) for w in tag.find_all("weather")) if code],
        "clouds": clouds,
    }


def parse_taf(xml_text: str) -> TerminalAerodromeForecast:
    """Разобрать прогноз по аэродрому (TAF) из IWXXM XML."""
    soup = _soup(xml_text, "TerminalAerodromeForecast")
    taf = soup.find("TAF")
    if taf is None:
        raise DecodeError("TerminalAerodromeForecast", "в документе нет элемента TAF")

    position = _text(taf, "pos")
    valid = _period(taf.find("validPeriod"))
    base = taf.find("baseForecast")
    data = {
        "report_status": taf.get("reportStatus"),
        "issue_time": _text(taf.find("issueTime") or taf, "timePosition"),
        "station": _text(taf, "designator"),
        "icao": _text(taf, "locationIndicatorICAO"),
        "position": position.split() if position else None,
        "valid_start": valid["start"],
        "valid_end": valid["end"],
        "base_forecast": _forecast(base.find("MeteorologicalAerodromeForecast") or base) if base else None,
        "change_forecasts": [
            _forecast(change.find("MeteorologicalAerodromeForecast") or change)
            for change in taf.find_all("changeForecast")
        ],
    }
    return _validate(TerminalAerodromeForecast, data)
