import math
from datetime import datetime
from typing import Optional, Any

from noaa_weather.models.enums import NwsUnitCode
from noaa_weather.models.optional import Unset, ExplicitNull, Value
from noaa_weather.models.values import QuantitativeValue, ValueUnit
from noaa_weather.temperature import celsius_to_fahrenheit, fahrenheit_to_celsius

NA = "N/A"

WMO_UNIT_DEGC = "wmoUnit:degC"
WMO_UNIT_DEGF = "wmoUnit:degF"
CELSIUS = "celsius"
FAHRENHEIT = "fahrenheit"


def _plain(value: Any) -> Any:
    """Снять обёртку трёх состояний: Value(x) -> x, Unset/ExplicitNull -> None."""
    if isinstance(value, Value):
        return value.value
    if isinstance(value, (Unset, ExplicitNull)):
        return None
    return value


def get_zone_from_url(url: Optional[str]) -> Optional[str]:
    """Идентификатор зоны - последний сегмент ссылки."""
    if url is None:
        return None
    return url.rsplit("/", 1)[-1]


def format_datetime_human_readable(value: Any) -> str:
    """ISO 8601 -> местное время MM/DD/YY HH:MM:SS AM/PM."""
    value = _plain(value)
    if not value:
        return NA
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return str(value)
    return moment.astimezone().strftime("%m/%d/%y %I:%M:%S %p")


def format_optional(value: Any) -> str:
    value = _plain(value)
    if value is None:
        return NA
    if hasattr(value, "display"):
        return value.display()
    return str(value)


def format_optional_number(value: Any) -> str:
    """Целые значения без дробной части, остальные с двумя знаками."""
    value = _plain(value)
    if value is None:
        return NA
    if isinstance(value, int):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_dewpoint(value: Any, unit_code: Optional[str], target: Optional[str] = None) -> str:
    """Точка росы в единицах target (celsius / fahrenheit), округлённая до целого."""
    if unit_code is None:
        return NA
    unit_code = getattr(unit_code, "value", unit_code)
    try:
        number = float(_plain(value))
    except (TypeError, ValueError):
        return NA

    if unit_code == WMO_UNIT_DEGC:
        label = "°C"
        if target == FAHRENHEIT:
            number, label = celsius_to_fahrenheit(number), "°F"
    elif unit_code == WMO_UNIT_DEGF:
        label = "°F"
        if target == CELSIUS:
            number, label = fahrenheit_to_celsius(number), "°C"
    else:
        return NA
    return f"{_round_half_away(number)} {label}"


def format_quantity(quantity: Optional[Any]) -> str:
    """QuantitativeValue или ValueUnit в виде "значение единица"."""
    if quantity is None:
        return NA
    if isinstance(quantity, QuantitativeValue):
        number = quantity.number
        unit = quantity.unit_label()
    elif isinstance(quantity, ValueUnit):
        number = quantity.value
        unit = quantity.unit_code
        if isinstance(unit, NwsUnitCode):
            unit = unit.pref_label()
    else:
        return format_optional(quantity)
    if number is None:
        return NA
    text = format_optional_number(number)
    return f"{text} {unit}" if unit else text
