from typing import Optional

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import NwsUnitCode, QualityControl
from noaa_weather.models.optional import DoubleOptional, UNSET, Value
from noaa_weather.models.unions import UnitCode


def unit_code_string(unit_code: Optional[UnitCode]) -> Optional[str]:
    """Строка кода единицы в том виде, в каком она пришла от API."""
    if unit_code is None:
        return None
    if isinstance(unit_code, NwsUnitCode):
        return unit_code.to_wire_string()
    return unit_code


class QuantitativeValue(NwsModel):
    """Величина с единицей измерения (wmoUnit:, nwsUnit: или UCUM) и флагом контроля качества."""

    value: DoubleOptional[float] = UNSET
    max_value: Optional[float] = None
    min_value: Optional[float] = None
    unit_code: Optional[UnitCode] = None
    quality_control: Optional[QualityControl] = None

    @property
    def number(self) -> Optional[float]:
        return self.value.value_or(None)

    def unit_label(self) -> Optional[str]:
        """Подпись единицы: для nwsUnit через таблицу меток, остальные коды как есть."""
        if isinstance(self.unit_code, NwsUnitCode):
            return self.unit_code.pref_label()
        return self.unit_code

    def display(self) -> str:
        if not isinstance(self.value, Value):
            return "N/A"
        unit = unit_code_string(self.unit_code)
        return f"{self.value.value} {unit}" if unit else f"{self.value.value}"

    def __str__(self) -> str:
        return self.display()


class ValueUnit(NwsModel):
    """Значение с единицей из ответов радарной подсистемы."""

    unit_code: Optional[UnitCode] = None
    value: Optional[float] = None
    quality_control: Optional[str] = None

    def display(self) -> str:
        if self.value is None:
            return "N/A"
        unit = unit_code_string(self.unit_code)
        return f"{self.value} {unit}" if unit else f"{self.value}"

    def __str__(self) -> str:
        return self.display()
