from typing import Annotated, Optional, Union

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import NwsForecastOfficeId
from noaa_weather.models.envelopes import Feature
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext, UntaggedUnion, variant
from noaa_weather.models.values import QuantitativeValue


class RelativeLocation(NwsModel):
    city: Optional[str] = None
    state: Optional[str] = None
    distance: Optional[QuantitativeValue] = None
    bearing: Optional[QuantitativeValue] = None


class RelativeLocationJsonLd(RelativeLocation):
    geometry: DoubleOptional[str] = UNSET


RelativeLocationFeature = Feature[RelativeLocation]

RELATIVE_LOCATION = UntaggedUnion(
    "PointRelativeLocation",
    [("RelativeLocationFeature", RelativeLocationFeature.model_validate), variant(RelativeLocationJsonLd)],
)
PointRelativeLocation = Annotated[Union[RelativeLocationFeature, RelativeLocationJsonLd], RELATIVE_LOCATION]


class Point(NwsModel):
    """Метаданные точки: сетка прогноза, офис, зоны и ближайший город."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    geometry: DoubleOptional[str] = UNSET
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    cwa: Optional[NwsForecastOfficeId] = None
    forecast_office: Optional[str] = None
    grid_id: Optional[NwsForecastOfficeId] = None
    grid_x: Optional[int] = None
    grid_y: Optional[int] = None
    forecast: Optional[str] = None
    forecast_hourly: Optional[str] = None
    forecast_grid_data: Optional[str] = None
    observation_stations: Optional[str] = None
    relative_location: Optional[PointRelativeLocation] = None
    forecast_zone: Optional[str] = None
    county: Optional[str] = None
    fire_weather_zone: Optional[str] = None
    time_zone: Optional[str] = None
    radar_station: Optional[str] = None

    def city_state(self) -> Optional[str]:
        """Ближайший город в виде "Город, ШТАТ", если он известен."""
        location = self.relative_location
        if isinstance(location, Feature):
            location = location.properties
        if location is None or not location.city:
            return None
        return f"{location.city}, {location.state}" if location.state else location.city


PointFeature = Feature[Point]
