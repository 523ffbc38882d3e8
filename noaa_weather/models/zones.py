from typing import List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import NwsForecastOfficeId, NwsZoneType
from noaa_weather.models.envelopes import Feature, FeatureCollection, JsonLdGraph
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext, ZoneState


class Zone(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    id: Optional[str] = None
    type: Optional[NwsZoneType] = None
    name: Optional[str] = None
    effective_date: Optional[str] = None
    expiration_date: Optional[str] = None
    state: Optional[ZoneState] = None
    forecast_office: Optional[str] = None
    grid_identifier: Optional[str] = None
    awips_location_identifier: Optional[str] = None
    cwa: Optional[List[NwsForecastOfficeId]] = None
    forecast_offices: Optional[List[str]] = None
    time_zone: Optional[List[str]] = None
    observation_stations: Optional[List[str]] = None
    radar_station: DoubleOptional[str] = UNSET


ZoneFeature = Feature[Zone]


class ZoneCollection(FeatureCollection[Zone]):
    pass


class ZoneCollectionJsonLd(JsonLdGraph[Zone]):
    pass


class ZoneForecastPeriod(NwsModel):
    number: int
    name: str
    detailed_forecast: str


class ZoneForecast(NwsModel):
    """Текстовый прогноз для зоны."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    zone: Optional[str] = None
    updated: Optional[str] = None
    periods: List[ZoneForecastPeriod] = []


ZoneForecastFeature = Feature[ZoneForecast]
