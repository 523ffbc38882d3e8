import pytest

from noaa_weather.apis import alerts, aviation, gridpoints, misc, offices, points, products, radar, stations, zones
from noaa_weather.city import find_city
from noaa_weather.errors import DecodeError, ValidationError
from noaa_weather.models import (
    AlertAtomFeed,
    AlertSeverity,
    AlertStatus,
    GridpointForecastUnits,
    MarineRegionCode,
    NwsCenterWeatherServiceUnitId,
    NwsForecastOfficeId,
    NwsZoneType,
    RadarQueueHost,
    StateTerritoryCode,
    TerminalAerodromeForecast,
)
from tests.conftest import (
    ALERT_COLLECTION,
    ATOM_FEED,
    FORECAST_FEATURE,
    OBSERVATION_FEATURE,
    POINT_FEATURE,
    TAF_XML,
    FakeResponse,
    make_config,
)

EMPTY_FEATURES = {"type": "FeatureCollection", "features": []}
EMPTY_GRAPH = {"@graph": []}


# ============================================================================
# ОПОВЕЩЕНИЯ
# ============================================================================

def test_active_alerts_filters():
    config = make_config(FakeResponse(body=ALERT_COLLECTION))
    collection = alerts.get_active_alerts(
        config,
        status=[AlertStatus.ACTUAL],
        area=[StateTerritoryCode.AZ, StateTerritoryCode.CA],
        severity=[AlertSeverity.SEVERE, AlertSeverity.EXTREME],
        limit=10,
    )
    call = config.session.last
    assert call["url"] == "https://api.test/alerts/active"
    assert call["params"] == {"status": "actual", "area": "AZ,CA", "severity": "Severe,Extreme", "limit": "10"}
    assert collection.items[0].event == "Excessive Heat Warning"


def test_active_alerts_limit_checked_before_request():
    config = make_config()
    with pytest.raises(ValidationError):
        alerts.get_active_alerts(config, limit=501)
    assert config.session.calls == []


def test_active_alerts_atom():
    config = make_config(FakeResponse(body=ATOM_FEED, content_type="application/atom+xml"))
    feed = alerts.get_active_alerts_atom(config, zone=["AZZ540"])
    call = config.session.last
    assert call["headers"]["Accept"] == "application/atom+xml"
    assert call["params"] == {"zone": "AZZ540"}
    assert isinstance(feed, AlertAtomFeed)
    assert feed.entry[0].event == "Excessive Heat Warning"


def test_active_alerts_atom_rejects_json():
    config = make_config(FakeResponse(body=ALERT_COLLECTION))
    with pytest.raises(DecodeError):
        alerts.get_active_alerts_atom(config)


def test_alert_paths():
    config = make_config(*[FakeResponse(body=ALERT_COLLECTION) for _ in range(3)])
    alerts.get_active_alerts_for_area(config, StateTerritoryCode.AZ)
    alerts.get_active_alerts_for_region(config, MarineRegionCode.AL)
    alerts.get_active_alerts_for_zone(config, "AZZ540")
    urls = [call["url"] for call in config.session.calls]
    assert urls == [
        "https://api.test/alerts/active/area/AZ",
        "https://api.test/alerts/active/region/AL",
        "https://api.test/alerts/active/zone/AZZ540",
    ]


def test_alert_history_params():
    config = make_config(FakeResponse(body=ALERT_COLLECTION))
    alerts.get_alerts(config, active=True, start="2025-06-01T00:00:00Z", cursor="abc", event=["Heat Advisory"])
    assert config.session.last["params"] == {
        "active": "true",
        "start": "2025-06-01T00:00:00Z",
        "event": "Heat Advisory",
        "cursor": "abc",
    }


def test_single_alert_and_count_and_types():
    feature = {"type": "Feature", "properties": ALERT_COLLECTION["features"][0]["properties"]}
    config = make_config(
        FakeResponse(body=feature),
        FakeResponse(body={"total": 12, "land": 10, "marine": 2, "areas": {"AZ": 3}}),
        FakeResponse(body={"eventTypes": ["Heat Advisory", "Flood Watch"]}, content_type="application/ld+json"),
    )
    alert = alerts.get_alert(config, "urn:oid:2.49.0.1.840.0.1")
    count = alerts.get_active_alerts_count(config)
    types = alerts.get_alert_types(config)

    assert config.session.calls[0]["url"] == "https://api.test/alerts/urn:oid:2.49.0.1.840.0.1"
    assert alert.properties.sender_name == "NWS Phoenix AZ"
    assert count.areas == {"AZ": 3}
    assert types.event_types == ["Heat Advisory", "Flood Watch"]


# ============================================================================
# СЕТКА, ТОЧКИ, ОФИСЫ
# ============================================================================

def test_gridpoint_forecast_units_and_feature_flags():
    config = make_config(FakeResponse(body=FORECAST_FEATURE))
    forecast = gridpoints.get_gridpoint_forecast(
        config,
        NwsForecastOfficeId.PSR,
        159,
        57,
        units=GridpointForecastUnits.SI,
        feature_flags=["forecast_temperature_qv", "forecast_wind_speed_qv"],
    )
    call = config.session.last
    assert call["url"] == "https://api.test/gridpoints/PSR/159,57/forecast"
    assert call["params"] == {"units": "si"}
    assert call["headers"]["Feature-Flags"] == "forecast_temperature_qv,forecast_wind_speed_qv"
    assert forecast.properties.periods[0].name == "This Afternoon"


def test_gridpoint_paths():
    config = make_config(
        FakeResponse(body={"type": "Feature", "properties": {"gridId": "PSR", "gridX": 159, "gridY": 57}}),
        FakeResponse(body=FORECAST_FEATURE),
        FakeResponse(body=EMPTY_FEATURES),
    )
    gridpoint = gridpoints.get_gridpoint(config, "PSR", 159, 57)
    gridpoints.get_gridpoint_forecast_hourly(config, "PSR", 159, 57)
    gridpoints.get_gridpoint_stations(config, "PSR", 159, 57, limit=5)
    urls = [call["url"] for call in config.session.calls]
    assert urls == [
        "https://api.test/gridpoints/PSR/159,57",
        "https://api.test/gridpoints/PSR/159,57/forecast/hourly",
        "https://api.test/gridpoints/PSR/159,57/stations",
    ]
    assert "Feature-Flags" not in config.session.calls[1]["headers"]
    assert config.session.last["params"] == {"limit": "5"}
    assert gridpoint.properties.grid_x == 159


def test_point_and_point_stations():
    config = make_config(FakeResponse(body=POINT_FEATURE), FakeResponse(body=EMPTY_FEATURES))
    point = points.get_point(config, "33.4484,-112.074")
    points.get_point_stations(config, "33.4484,-112.074")
    assert config.session.calls[0]["url"] == "https://api.test/points/33.4484,-112.074"
    assert config.session.last["url"] == "https://api.test/points/33.4484,-112.074/stations"
    assert point.properties.grid_id is NwsForecastOfficeId.PSR


def test_offices():
    office = {
        "@type": "GovernmentOrganization",
        "id": "PSR",
        "name": "Phoenix, AZ",
        "address": {"streetAddress": "PO Box 52025", "addressLocality": "Phoenix", "addressRegion": "AZ"},
        "telephone": "602-275-0073",
    }
    headline = {"id": "abc", "title": "Heat safety", "summary": None, "important": True}
    config = make_config(
        FakeResponse(body=office, content_type="application/ld+json"),
        FakeResponse(body={"@graph": [headline]}, content_type="application/ld+json"),
        FakeResponse(body=headline, content_type="application/ld+json"),
    )
    result = offices.get_forecast_office(config, NwsForecastOfficeId.PSR)
    headlines = offices.get_forecast_office_headlines(config, "PSR")
    single = offices.get_forecast_office_headline(config, "PSR", "abc")

    assert result.address.city == "Phoenix"
    assert result.phone_number == "602-275-0073"
    assert result.to_wire()["telephone"] == "602-275-0073"
    assert headlines.items[0].title == "Heat safety"
    assert config.session.last["url"] == "https://api.test/offices/PSR/headlines/abc"
    assert single.important is True


# ============================================================================
# СТАНЦИИ И ПОГОДА В ГОРОДЕ
# ============================================================================

def test_stations_list_params():
    config = make_config(FakeResponse(body=EMPTY_FEATURES))
    stations.get_stations(config, station_ids=["KPHX", "KIWA"], state=[StateTerritoryCode.AZ], limit=50, cursor="c1")
    assert config.session.last["params"] == {"id": "KPHX,KIWA", "state": "AZ", "limit": "50", "cursor": "c1"}


def test_latest_observation_require_qc():
    config = make_config(FakeResponse(body=OBSERVATION_FEATURE))
    observation = stations.get_latest_observation(config, "KIWA", require_qc=True)
    call = config.session.last
    assert call["url"] == "https://api.test/stations/KIWA/observations/latest"
    assert call["params"] == {"require_qc": "true"}
    assert observation.properties.raw_message.startswith("KIWA")


def test_observation_at_time_encodes_offset():
    config = make_config(FakeResponse(body=OBSERVATION_FEATURE))
    stations.get_observation_at(config, "KIWA", "2025-06-01T17:00:00+00:00")
    assert config.session.last["url"] == "https://api.test/stations/KIWA/observations/2025-06-01T17:00:00%2B00:00"


def test_station_observations_and_metadata():
    station = {"type": "Feature", "properties": {"stationIdentifier": "KPHX", "name": "Phoenix Sky Harbor"}}
    config = make_config(FakeResponse(body=station), FakeResponse(body=EMPTY_FEATURES))
    result = stations.get_station(config, "KPHX")
    stations.get_station_observations(config, "KPHX", start="2025-06-01T00:00:00Z", limit=3)
    assert result.properties.station_identifier == "KPHX"
    assert config.session.last["url"] == "https://api.test/stations/KPHX/observations"
    assert config.session.last["params"] == {"start": "2025-06-01T00:00:00Z", "limit": "3"}


def test_tafs_and_taf_formats():
    tafs = {"@graph": [{"id": "KPHX-2025-06-01T17:20:00+00:00", "issueTime": "2025-06-01T17:20:00+00:00"}]}
    config = make_config(
        FakeResponse(body=tafs, content_type="application/ld+json"),
        FakeResponse(body=TAF_XML, content_type="application/vnd.noaa.iwxxm+xml"),
        FakeResponse(body={"raw": "TAF KPHX"}, content_type="application/json"),
        FakeResponse(body="TAF KPHX", content_type="text/html"),
    )
    listing = stations.get_tafs(config, "KPHX")
    xml_taf = stations.get_taf(config, "KPHX", "2025-06-01", "1720")
    json_taf = stations.get_taf(config, "KPHX", "2025-06-01", "1720")

    assert listing.items[0].issue_time == "2025-06-01T17:20:00+00:00"
    assert config.session.calls[1]["url"] == "https://api.test/stations/KPHX/tafs/2025-06-01/1720"
    assert isinstance(xml_taf, TerminalAerodromeForecast)
    assert json_taf == {"raw": "TAF KPHX"}
    with pytest.raises(DecodeError):
        stations.get_taf(config, "KPHX", "2025-06-01", "1720")


def test_city_weather_uses_point_radar_station():
    config = make_config(FakeResponse(body=POINT_FEATURE), FakeResponse(body=OBSERVATION_FEATURE))
    observation = stations.get_city_weather(config, find_city("Phoenix", "AZ"))
    urls = [call["url"] for call in config.session.calls]
    assert urls == [
        "https://api.test/points/33.4484,-112.074",
        "https://api.test/stations/KIWA/observations/latest",
    ]
    assert observation.properties.temperature.number == 33.0


def test_city_weather_without_radar_station():
    point = dict(POINT_FEATURE, properties=dict(POINT_FEATURE["properties"], radarStation=None))
    config = make_config(FakeResponse(body=point))
    with pytest.raises(DecodeError):
        stations.get_city_weather(config, find_city("phoenix", "Arizona"))


# ============================================================================
# ЗОНЫ
# ============================================================================

def test_zone_list_filters():
    config = make_config(FakeResponse(body=EMPTY_FEATURES), FakeResponse(body=EMPTY_FEATURES))
    zones.get_zones(config, zone_type=[NwsZoneType.FORECAST, NwsZoneType.FIRE], area=[StateTerritoryCode.AZ],
                    include_geometry=False)
    assert config.session.last["url"] == "https://api.test/zones"
    assert config.session.last["params"] == {"type": "forecast,fire", "area": "AZ", "include_geometry": "false"}

    zones.get_zones_by_type(config, NwsZoneType.COUNTY, limit=2)
    assert config.session.last["url"] == "https://api.test/zones/county"
    assert config.session.last["params"] == {"limit": "2"}


def test_zone_metadata_and_forecast():
    zone = {"type": "Feature", "properties": {"id": "AZZ540", "type": "public", "name": "Phoenix", "state": "AZ"}}
    forecast = {
        "type": "Feature",
        "properties": {
            "zone": "https://api.weather.gov/zones/forecast/AZZ540",
            "periods": [{"number": 1, "name": "Today", "detailedForecast": "Sunny and hot."}],
        },
    }
    config = make_config(FakeResponse(body=zone), FakeResponse(body=forecast))
    result = zones.get_zone(config, NwsZoneType.FORECAST, "AZZ540", effective="2025-06-01T00:00:00Z")
    zone_forecast = zones.get_zone_forecast(config, NwsZoneType.FORECAST, "AZZ540")

    assert config.session.calls[0]["url"] == "https://api.test/zones/forecast/AZZ540"
    assert config.session.calls[0]["params"] == {"effective": "2025-06-01T00:00:00Z"}
    assert config.session.last["url"] == "https://api.test/zones/forecast/AZZ540/forecast"
    assert result.properties.type is NwsZoneType.PUBLIC
    assert result.properties.state is StateTerritoryCode.AZ
    assert zone_forecast.properties.periods[0].detailed_forecast == "Sunny and hot."


def test_zone_state_keeps_unknown_string():
    config = make_config(FakeResponse(body={"type": "Feature", "properties": {"state": "XX"}}))
    assert zones.get_zone(config, "forecast", "XXZ001").properties.state == "XX"


def test_zone_observations_and_stations():
    config = make_config(FakeResponse(body=EMPTY_FEATURES), FakeResponse(body=EMPTY_FEATURES))
    zones.get_zone_observations(config, "AZZ540", end="2025-06-02T00:00:00Z")
    zones.get_zone_stations(config, "AZZ540", cursor="next")
    assert config.session.calls[0]["url"] == "https://api.test/zones/forecast/AZZ540/observations"
    assert config.session.calls[0]["params"] == {"end": "2025-06-02T00:00:00Z"}
    assert config.session.last["url"] == "https://api.test/zones/forecast/AZZ540/stations"
    assert config.session.last["params"] == {"cursor": "next"}


# ============================================================================
# РАДАРЫ, АВИАЦИЯ, ПРОДУКТЫ, СПРАВОЧНИКИ
# ============================================================================

def test_radar_endpoints():
    config = make_config(
        FakeResponse(body=EMPTY_GRAPH, content_type="application/ld+json"),
        FakeResponse(body={"id": "ldm1", "type": "ldm", "active": True}, content_type="application/ld+json"),
        FakeResponse(body=EMPTY_FEATURES),
        FakeResponse(body={"type": "Feature", "properties": {"id": "KIWA", "stationType": "WSR-88D"}}),
        FakeResponse(body=EMPTY_GRAPH, content_type="application/ld+json"),
        FakeResponse(body=EMPTY_GRAPH, content_type="application/ld+json"),
        FakeResponse(body={"profiler": []}, content_type="application/json"),
    )
    radar.get_radar_servers(config, reporting_host="rds")
    assert config.session.last["params"] == {"reportingHost": "rds"}
    radar.get_radar_server(config, "ldm1")
    assert config.session.last["url"] == "https://api.test/radar/servers/ldm1"
    radar.get_radar_stations(config, station_type=["WSR-88D", "TDWR"])
    assert config.session.last["params"] == {"stationType": "WSR-88D,TDWR"}
    station = radar.get_radar_station(config, "KIWA", host="rds")
    assert station.properties.station_type == "WSR-88D"
    radar.get_radar_station_alarms(config, "KIWA")
    assert config.session.last["url"] == "https://api.test/radar/stations/KIWA/alarms"
    radar.get_radar_data_queue(config, RadarQueueHost.TDS, limit=20, queue_type="L2")
    assert config.session.last["url"] == "https://api.test/radar/queues/tds"
    assert config.session.last["params"] == {"limit": "20", "type": "L2"}
    assert radar.get_radar_wind_profiler(config, "KXYZ", interval="PT1H") == {"profiler": []}
    assert config.session.last["params"] == {"interval": "PT1H"}


def test_aviation_endpoints():
    advisory = {"type": "Feature", "properties": {"cwsu": "ZAB", "sequence": 101, "text": "CWA text"}}
    config = make_config(
        FakeResponse(body={"id": "ZAB", "name": "Albuquerque CWSU"}, content_type="application/ld+json"),
        FakeResponse(body=EMPTY_FEATURES),
        FakeResponse(body=advisory),
        FakeResponse(body=EMPTY_FEATURES),
        FakeResponse(body=EMPTY_FEATURES),
        FakeResponse(body=EMPTY_FEATURES),
        FakeResponse(body={"type": "Feature", "properties": {"atsu": "KKCI", "fir": None}}),
    )
    cwsu = aviation.get_center_weather_service_unit(config, NwsCenterWeatherServiceUnitId.ZAB)
    aviation.get_center_weather_advisories(config, "ZAB")
    cwa = aviation.get_center_weather_advisories_by_date_and_sequence(config, "ZAB", "2025-06-01", 101)
    assert config.session.last["url"] == "https://api.test/aviation/cwsus/ZAB/cwas/2025-06-01/101"
    aviation.get_sigmets(config, atsu="KKCI", date="2025-06-01")
    assert config.session.last["params"] == {"date": "2025-06-01", "atsu": "KKCI"}
    aviation.get_sigmets_by_air_traffic_service_unit(config, "KKCI")
    aviation.get_sigmets_by_air_traffic_service_unit_and_date(config, "KKCI", "2025-06-01")
    assert config.session.last["url"] == "https://api.test/aviation/sigmets/KKCI/2025-06-01"
    sigmet = aviation.get_sigmet(config, "KKCI", "2025-06-01", "1655")
    assert config.session.last["url"] == "https://api.test/aviation/sigmets/KKCI/2025-06-01/1655"

    assert cwsu.name == "Albuquerque CWSU"
    assert cwa.properties.cwsu is NwsCenterWeatherServiceUnitId.ZAB
    assert not sigmet.properties.fir


def test_product_endpoints():
    product = {"id": "abc", "productCode": "AFD", "productName": "Area Forecast Discussion", "productText": "..."}
    types = {"@graph": [{"productCode": "AFD", "productName": "Area Forecast Discussion"}]}
    config = make_config(
        FakeResponse(body={"@graph": [product]}, content_type="application/ld+json"),
        FakeResponse(body=product, content_type="application/ld+json"),
        FakeResponse(body={"locations": {"PSR": "Phoenix", "XYZ": None}}, content_type="application/ld+json"),
        FakeResponse(body=types, content_type="application/ld+json"),
        FakeResponse(body={"@graph": [product]}, content_type="application/ld+json"),
        FakeResponse(body={"locations": {}}, content_type="application/ld+json"),
        FakeResponse(body={"@graph": []}, content_type="application/ld+json"),
        FakeResponse(body=types, content_type="application/ld+json"),
    )
    found = products.get_products_query(config, office=["KPSR"], product_type=["AFD"], limit=1)
    assert config.session.last["params"] == {"office": "KPSR", "type": "AFD", "limit": "1"}
    single = products.get_product(config, "abc")
    locations = products.get_product_locations(config)
    product_types = products.get_product_types(config)
    products.get_products_by_type(config, "AFD")
    products.get_product_issuance_locations_by_type(config, "AFD")
    assert config.session.last["url"] == "https://api.test/products/types/AFD/locations"
    products.get_products_by_type_and_location(config, "AFD", "PSR")
    assert config.session.last["url"] == "https://api.test/products/types/AFD/locations/PSR"
    by_location = products.get_products_by_location(config, "PSR")
    assert config.session.last["url"] == "https://api.test/products/locations/PSR/types"

    assert found.items[0].product_code == "AFD"
    assert single.product_name == "Area Forecast Discussion"
    assert locations.locations["XYZ"] is None
    assert product_types.items[0].product_code == "AFD"
    assert by_location.items[0].product_name == "Area Forecast Discussion"


def test_glossary_and_icons():
    glossary = {"glossary": [{"term": "Dewpoint", "definition": "..."}, {"term": "Haboob", "definition": "..."}]}
    config = make_config(
        FakeResponse(body=glossary, content_type="application/ld+json"),
        FakeResponse(body={"icons": {"skc": {"description": "Fair/clear"}}}, content_type="application/ld+json"),
    )
    result = misc.get_glossary(config)
    icons = misc.get_icons_summary(config)
    assert [term.term for term in result.find("dew")] == ["Dewpoint"]
    assert icons.icons["skc"].description == "Fair/clear"
    assert config.session.last["url"] == "https://api.test/icons"
