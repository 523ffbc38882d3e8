from typing import List, Optional

from pydantic import AliasChoices, Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import MetarSkyCoverage, NwsCenterWeatherServiceUnitId
from noaa_weather.models.envelopes import Feature, FeatureCollection, JsonLdGraph
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.values import ValueUnit


class CenterWeatherAdvisory(NwsModel):
    id: Optional[str] = None
    issue_time: Optional[str] = None
    cwsu: Optional[NwsCenterWeatherServiceUnitId] = None
    sequence: Optional[int] = None
    start: Optional[str] = None
    end: Optional[str] = None
    observed_property: Optional[str] = None
    text: Optional[str] = None


CenterWeatherAdvisoryFeature = Feature[CenterWeatherAdvisory]


class CenterWeatherAdvisoryCollection(FeatureCollection[CenterWeatherAdvisory]):
    pass


class CwsuOffice(NwsModel):
    """Центр метеообеспечения авиации (CWSU) при центре управления воздушным движением."""

    id: Optional[str] = None
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    email: Optional[str] = None
    fax_number: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("fax", "faxNumber", "fax_number"), serialization_alias="fax"
    )
    phone_number: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("phone", "phoneNumber", "phone_number"), serialization_alias="phone"
    )
    website_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("webSiteUrl", "website_url"), serialization_alias="webSiteUrl"
    )
    nws_region: Optional[str] = None
    parent: Optional[str] = None


class Sigmet(NwsModel):
    id: Optional[str] = None
    issue_time: Optional[str] = None
    fir: DoubleOptional[str] = UNSET
    atsu: Optional[str] = None
    sequence: DoubleOptional[str] = UNSET
    phenomenon: DoubleOptional[str] = UNSET
    start: Optional[str] = None
    end: Optional[str] = None


SigmetFeature = Feature[Sigmet]


class SigmetCollection(FeatureCollection[Sigmet]):
    pass


# ============================================================================
# TAF
# ============================================================================

class TafMetadata(NwsModel):
    id: str
    issue_time: Optional[str] = None
    location: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    geometry: Optional[str] = None


class TafCollection(JsonLdGraph[TafMetadata]):
    pass


class TafCloudLayer(NwsModel):
    amount: Optional[MetarSkyCoverage] = None
    base: Optional[ValueUnit] = None


class TafForecast(NwsModel):
    """Базовый прогноз TAF или одно его изменение (BECMG, TEMPO, FM)."""

    change_indicator: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    cloud_and_visibility_ok: Optional[bool] = None
    prevailing_visibility: Optional[ValueUnit] = None
    prevailing_visibility_operator: Optional[str] = None
    variable_wind_direction: Optional[bool] = None
    wind_direction: Optional[ValueUnit] = None
    wind_speed: Optional[ValueUnit] = None
    wind_gust: Optional[ValueUnit] = None
    weather: List[str] = []
    clouds: List[TafCloudLayer] = []


class TerminalAerodromeForecast(NwsModel):
    """Прогноз по аэродрому, разобранный из IWXXM XML."""

    report_status: Optional[str] = None
    issue_time: Optional[str] = None
    station: Optional[str] = None
    icao: Optional[str] = None
    position: Optional[List[float]] = None
    valid_start: Optional[str] = None
    valid_end: Optional[str] = None
    base_forecast: Optional[TafForecast] = None
    change_forecasts: List[TafForecast] = []
