from typing import List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import MetarIntensity, MetarModifier, MetarSkyCoverage, MetarWeather
from noaa_weather.models.envelopes import Feature, FeatureCollection, JsonLdGraph
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext
from noaa_weather.models.values import QuantitativeValue


class MetarPhenomenon(NwsModel):
    intensity: Optional[MetarIntensity] = None
    modifier: Optional[MetarModifier] = None
    weather: MetarWeather
    raw_string: str
    in_vicinity: Optional[bool] = None


class CloudLayer(NwsModel):
    base: QuantitativeValue
    amount: MetarSkyCoverage


class Observation(NwsModel):
    """Наблюдение метеостанции (METAR и производные величины)."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    elevation: Optional[QuantitativeValue] = None
    station: Optional[str] = None
    timestamp: Optional[str] = None
    raw_message: Optional[str] = None
    text_description: Optional[str] = None
    icon: DoubleOptional[str] = UNSET
    present_weather: Optional[List[MetarPhenomenon]] = None
    temperature: Optional[QuantitativeValue] = None
    dewpoint: Optional[QuantitativeValue] = None
    wind_direction: Optional[QuantitativeValue] = None
    wind_speed: Optional[QuantitativeValue] = None
    wind_gust: Optional[QuantitativeValue] = None
    barometric_pressure: Optional[QuantitativeValue] = None
    sea_level_pressure: Optional[QuantitativeValue] = None
    visibility: Optional[QuantitativeValue] = None
    max_temperature_last_24_hours: Optional[QuantitativeValue] = Field(
        default=None, alias="maxTemperatureLast24Hours"
    )
    min_temperature_last_24_hours: Optional[QuantitativeValue] = Field(
        default=None, alias="minTemperatureLast24Hours"
    )
    precipitation_last_hour: Optional[QuantitativeValue] = None
    precipitation_last_3_hours: Optional[QuantitativeValue] = Field(default=None, alias="precipitationLast3Hours")
    precipitation_last_6_hours: Optional[QuantitativeValue] = Field(default=None, alias="precipitationLast6Hours")
    relative_humidity: Optional[QuantitativeValue] = None
    wind_chill: Optional[QuantitativeValue] = None
    heat_index: Optional[QuantitativeValue] = None
    cloud_layers: DoubleOptional[List[CloudLayer]] = UNSET


ObservationFeature = Feature[Observation]


class ObservationCollection(FeatureCollection[Observation]):
    pass


class ObservationCollectionJsonLd(JsonLdGraph[Observation]):
    pass


class ObservationStation(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    elevation: Optional[QuantitativeValue] = None
    station_identifier: Optional[str] = None
    name: Optional[str] = None
    time_zone: Optional[str] = None
    forecast: Optional[str] = None
    county: Optional[str] = None
    fire_weather_zone: Optional[str] = None


ObservationStationFeature = Feature[ObservationStation]


class ObservationStationCollection(FeatureCollection[ObservationStation]):
    observation_stations: List[str] = []


class ObservationStationCollectionJsonLd(JsonLdGraph[ObservationStation]):
    observation_stations: List[str] = []
