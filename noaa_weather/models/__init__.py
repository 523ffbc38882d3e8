from noaa_weather.models.alerts import (
    ActiveAlertsCountResponse,
    Alert,
    AlertAtomAuthor,
    AlertAtomEntry,
    AlertAtomFeed,
    AlertCollection,
    AlertCollectionJsonLd,
    AlertFeature,
    AlertGeocode,
    AlertReference,
    AlertTypesResponse,
    AlertXmlParameter,
)
from noaa_weather.models.aviation import (
    CenterWeatherAdvisory,
    CenterWeatherAdvisoryCollection,
    CenterWeatherAdvisoryFeature,
    CwsuOffice,
    Sigmet,
    SigmetCollection,
    SigmetFeature,
    TafCloudLayer,
    TafCollection,
    TafForecast,
    TafMetadata,
    TerminalAerodromeForecast,
)
from noaa_weather.models.base import NwsModel, to_wire_value
from noaa_weather.models.enums import (
    CASE_INSENSITIVE,
    CASE_SENSITIVE,
    AlertCategory,
    AlertCertainty,
    AlertMessageType,
    AlertResponse,
    AlertSeverity,
    AlertStatus,
    AlertUrgency,
    CasePolicy,
    ClosedEnum,
    GridpointForecastUnits,
    LandRegionCode,
    MarineAreaCode,
    MarineRegionCode,
    MetarIntensity,
    MetarModifier,
    MetarSkyCoverage,
    MetarWeather,
    NwsCenterWeatherServiceUnitId,
    NwsForecastOfficeId,
    NwsRegionalHq,
    NwsUnitCode,
    NwsZoneType,
    QualityControl,
    RadarQueueHost,
    RegionType,
    StateTerritoryCode,
    TemperatureTrend,
    TemperatureUnit,
    WeatherAttribute,
    WeatherCoverage,
    WeatherIntensity,
    WeatherType,
    WindDirection,
)
from noaa_weather.models.envelopes import (
    CollectionMetadata,
    Feature,
    FeatureCollection,
    JsonLdGraph,
    PaginationInfo,
)
from noaa_weather.models.geometry import (
    GeoJsonGeometry,
    GeoJsonLineString,
    GeoJsonMultiLineString,
    GeoJsonMultiPoint,
    GeoJsonMultiPolygon,
    GeoJsonPoint,
    GeoJsonPolygon,
    coordinates_depth,
    parse_geometry,
)
from noaa_weather.models.gridpoints import (
    Gridpoint,
    GridpointFeature,
    GridpointForecast,
    GridpointForecastFeature,
    GridpointForecastPeriod,
    GridpointHazard,
    GridpointHazards,
    GridpointLayerValue,
    GridpointQuantitativeValueLayer,
    GridpointWeather,
    GridpointWeatherValue,
)
from noaa_weather.models.misc import Glossary, GlossaryTerm, IconDescription, IconsSummary, ProblemDetail
from noaa_weather.models.observations import (
    CloudLayer,
    MetarPhenomenon,
    Observation,
    ObservationCollection,
    ObservationCollectionJsonLd,
    ObservationFeature,
    ObservationStation,
    ObservationStationCollection,
    ObservationStationCollectionJsonLd,
    ObservationStationFeature,
)
from noaa_weather.models.offices import Office, OfficeAddress, OfficeHeadline, OfficeHeadlineCollection
from noaa_weather.models.optional import EXPLICIT_NULL, UNSET, DoubleOptional, ExplicitNull, Unset, Value, value_of
from noaa_weather.models.points import Point, PointFeature, RelativeLocation, RelativeLocationFeature, RelativeLocationJsonLd
from noaa_weather.models.products import (
    TextProduct,
    TextProductCollection,
    TextProductLocationCollection,
    TextProductType,
    TextProductTypeCollection,
)
from noaa_weather.models.radar import (
    RadarQueue,
    RadarQueueCollection,
    RadarServer,
    RadarServerCollection,
    RadarStation,
    RadarStationAlarm,
    RadarStationAlarmCollection,
    RadarStationCollection,
    RadarStationFeature,
)
from noaa_weather.models.unions import (
    AreaCode,
    JsonLdContext,
    RegionCode,
    UnitCode,
    UntaggedUnion,
    ZoneState,
    parse_area_code,
    parse_region_code,
    resolve_union,
)
from noaa_weather.models.values import QuantitativeValue, ValueUnit
from noaa_weather.models.zones import (
    Zone,
    ZoneCollection,
    ZoneCollectionJsonLd,
    ZoneFeature,
    ZoneForecast,
    ZoneForecastFeature,
    ZoneForecastPeriod,
)
