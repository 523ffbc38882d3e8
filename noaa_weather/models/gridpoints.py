from typing import Annotated, List, Optional, Union

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import (
    GridpointForecastUnits,
    TemperatureTrend,
    TemperatureUnit,
    WeatherAttribute,
    WeatherCoverage,
    WeatherIntensity,
    WeatherType,
    WindDirection,
)
from noaa_weather.models.envelopes import Feature
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext, UntaggedUnion, variant
from noaa_weather.models.values import QuantitativeValue

# Интервал ISO 8601 вида "2025-05-01T10:00:00+00:00/PT1H"
Iso8601Interval = str


class GridpointLayerValue(NwsModel):
    valid_time: Iso8601Interval
    value: DoubleOptional[float] = UNSET


class GridpointQuantitativeValueLayer(NwsModel):
    uom: Optional[str] = None
    values: List[GridpointLayerValue] = []


class GridpointWeatherValue(NwsModel):
    coverage: DoubleOptional[WeatherCoverage] = UNSET
    weather: DoubleOptional[WeatherType] = UNSET
    intensity: DoubleOptional[WeatherIntensity] = UNSET
    visibility: QuantitativeValue
    attributes: List[WeatherAttribute] = []


class GridpointWeatherPeriod(NwsModel):
    valid_time: Iso8601Interval
    value: List[GridpointWeatherValue] = []


class GridpointWeather(NwsModel):
    values: List[GridpointWeatherPeriod] = []


class GridpointHazard(NwsModel):
    phenomenon: str
    significance: str
    event_number: DoubleOptional[int] = Field(default=UNSET, alias="event_number")


class GridpointHazardsPeriod(NwsModel):
    valid_time: Iso8601Interval
    value: List[GridpointHazard] = []


class GridpointHazards(NwsModel):
    values: List[GridpointHazardsPeriod] = []


class Gridpoint(NwsModel):
    """Сырые данные сетки прогноза: временные ряды по каждой величине."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    update_time: Optional[str] = None
    valid_times: Optional[Iso8601Interval] = None
    elevation: Optional[QuantitativeValue] = None
    forecast_office: Optional[str] = None
    grid_id: Optional[str] = None
    grid_x: Optional[int] = None
    grid_y: Optional[int] = None
    temperature: Optional[GridpointQuantitativeValueLayer] = None
    dewpoint: Optional[GridpointQuantitativeValueLayer] = None
    max_temperature: Optional[GridpointQuantitativeValueLayer] = None
    min_temperature: Optional[GridpointQuantitativeValueLayer] = None
    relative_humidity: Optional[GridpointQuantitativeValueLayer] = None
    apparent_temperature: Optional[GridpointQuantitativeValueLayer] = None
    heat_index: Optional[GridpointQuantitativeValueLayer] = None
    wind_chill: Optional[GridpointQuantitativeValueLayer] = None
    sky_cover: Optional[GridpointQuantitativeValueLayer] = None
    wind_direction: Optional[GridpointQuantitativeValueLayer] = None
    wind_speed: Optional[GridpointQuantitativeValueLayer] = None
    wind_gust: Optional[GridpointQuantitativeValueLayer] = None
    probability_of_precipitation: Optional[GridpointQuantitativeValueLayer] = None
    quantitative_precipitation: Optional[GridpointQuantitativeValueLayer] = None
    snowfall_amount: Optional[GridpointQuantitativeValueLayer] = None
    visibility: Optional[GridpointQuantitativeValueLayer] = None
    weather: Optional[GridpointWeather] = None
    hazards: Optional[GridpointHazards] = None


GridpointFeature = Feature[Gridpoint]


# ============================================================================
# ПРОГНОЗ ПО ПЕРИОДАМ
# ============================================================================

FORECAST_TEMPERATURE = UntaggedUnion("GridpointForecastPeriodTemperature", [variant(QuantitativeValue), variant(int)])
ForecastTemperature = Annotated[Union[QuantitativeValue, int], FORECAST_TEMPERATURE]

WIND_VALUE = UntaggedUnion("GridpointForecastPeriodWind", [variant(QuantitativeValue), variant(str)])
WindValue = Annotated[Union[QuantitativeValue, str], WIND_VALUE]


class GridpointForecastPeriod(NwsModel):
    number: Optional[int] = None
    name: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_daytime: Optional[bool] = None
    temperature: Optional[ForecastTemperature] = None
    temperature_unit: Optional[TemperatureUnit] = None
    temperature_trend: DoubleOptional[TemperatureTrend] = UNSET
    probability_of_precipitation: Optional[QuantitativeValue] = None
    dewpoint: Optional[QuantitativeValue] = None
    relative_humidity: Optional[QuantitativeValue] = None
    wind_speed: Optional[WindValue] = None
    wind_gust: DoubleOptional[WindValue] = UNSET
    wind_direction: Optional[WindDirection] = None
    icon: Optional[str] = None
    short_forecast: Optional[str] = None
    detailed_forecast: Optional[str] = None

    def temperature_display(self) -> str:
        temperature = self.temperature
        if temperature is None:
            return "N/A"
        if isinstance(temperature, QuantitativeValue):
            return temperature.display()
        unit = self.temperature_unit.display() if self.temperature_unit else ""
        return f"{temperature}°{unit}"


class GridpointForecast(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    units: Optional[GridpointForecastUnits] = None
    forecast_generator: Optional[str] = None
    generated_at: Optional[str] = None
    update_time: Optional[str] = None
    valid_times: Optional[Iso8601Interval] = None
    elevation: Optional[QuantitativeValue] = None
    periods: List[GridpointForecastPeriod] = []


GridpointForecastFeature = Feature[GridpointForecast]
