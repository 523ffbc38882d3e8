import json
from typing import Any, Dict, List, Optional

from noaa_weather.api_client import Configuration

BASE_URL = "https://api.test"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, content_type: str = "application/geo+json",
                 reason: str = "OK"):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.headers = {"Content-Type": content_type} if content_type else {}
        self.reason = reason


class FakeSession:
    """Подменяет requests.Session: отдаёт заготовленные ответы и запоминает запросы."""

    def __init__(self, *responses: FakeResponse):
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, str]] = None, headers: Optional[Dict[str, str]] = None,
            timeout: Optional[float] = None) -> FakeResponse:
        self.calls.append({"url": url, "params": params or {}, "headers": headers or {}, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]


def make_config(*responses: Any) -> Configuration:
    return Configuration(base_url=BASE_URL, user_agent="(tests, tests@example.com)", session=FakeSession(*responses),
                         timeout=5)


# ============================================================================
# ОТВЕТЫ API
# ============================================================================

QV_CELSIUS = {"unitCode": "wmoUnit:degC", "value": 21.7, "qualityControl": "V"}

ALERT_PROPERTIES = {
    "@id": "https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.1",
    "@type": "wx:Alert",
    "id": "urn:oid:2.49.0.1.840.0.1",
    "areaDesc": "Maricopa",
    "geocode": {"UGC": ["AZZ540"], "SAME": ["004013"]},
    "affectedZones": ["https://api.weather.gov/zones/forecast/AZZ540"],
    "references": [],
    "sent": "2025-06-01T10:00:00-07:00",
    "effective": "2025-06-01T10:00:00-07:00",
    "onset": "2025-06-01T11:00:00-07:00",
    "expires": "2025-06-01T20:00:00-07:00",
    "ends": None,
    "status": "Actual",
    "messageType": "Alert",
    "category": "Met",
    "severity": "Severe",
    "certainty": "Likely",
    "urgency": "Expected",
    "event": "Excessive Heat Warning",
    "sender": "w-nws.webmaster@noaa.gov",
    "senderName": "NWS Phoenix AZ",
    "headline": "Excessive Heat Warning issued June 1",
    "description": "Dangerously hot conditions.",
    "response": "Execute",
}

ALERT_COLLECTION = {
    "@context": ["https://geojson.org/geojson-ld/geojson-context.jsonld", {"@version": "1.1"}],
    "type": "FeatureCollection",
    "features": [
        {
            "id": ALERT_PROPERTIES["@id"],
            "type": "Feature",
            "geometry": None,
            "properties": ALERT_PROPERTIES,
        }
    ],
    "title": "Current watches, warnings, and advisories",
    "updated": "2025-06-01T17:00:00+00:00",
    "pagination": {"next": "https://api.weather.gov/alerts?cursor=abc"},
}

POINT_FEATURE = {
    "@context": ["https://geojson.org/geojson-ld/geojson-context.jsonld"],
    "id": "https://api.weather.gov/points/33.4484,-112.074",
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [-112.074, 33.4484]},
    "properties": {
        "@id": "https://api.weather.gov/points/33.4484,-112.074",
        "@type": "wx:Point",
        "cwa": "PSR",
        "forecastOffice": "https://api.weather.gov/offices/PSR",
        "gridId": "PSR",
        "gridX": 159,
        "gridY": 57,
        "forecast": "https://api.weather.gov/gridpoints/PSR/159,57/forecast",
        "forecastHourly": "https://api.weather.gov/gridpoints/PSR/159,57/forecast/hourly",
        "relativeLocation": {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-112.07, 33.45]},
            "properties": {
                "city": "Phoenix",
                "state": "AZ",
                "distance": {"unitCode": "wmoUnit:m", "value": 1234.5},
                "bearing": {"unitCode": "wmoUnit:degree_(angle)", "value": 90},
            },
        },
        "forecastZone": "https://api.weather.gov/zones/forecast/AZZ540",
        "timeZone": "America/Phoenix",
        "radarStation": "KIWA",
    },
}

OBSERVATION_FEATURE = {
    "id": "https://api.weather.gov/stations/KIWA/observations/2025-06-01T17:00:00+00:00",
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [-111.67, 33.3]},
    "properties": {
        "@id": "https://api.weather.gov/stations/KIWA/observations/2025-06-01T17:00:00+00:00",
        "station": "https://api.weather.gov/stations/KIWA",
        "timestamp": "2025-06-01T17:00:00+00:00",
        "rawMessage": "KIWA 011700Z 25008KT 10SM CLR 33/M03 A2990",
        "textDescription": "Clear",
        "icon": None,
        "presentWeather": [],
        "temperature": {"unitCode": "wmoUnit:degC", "value": 33.0, "qualityControl": "V"},
        "dewpoint": {"unitCode": "wmoUnit:degC", "value": 7.777777777777778, "qualityControl": "V"},
        "windSpeed": {"unitCode": "wmoUnit:km_h-1", "value": None, "qualityControl": "Z"},
        "relativeHumidity": {"unitCode": "wmoUnit:percent", "value": 11.2},
        "maxTemperatureLast24Hours": {"unitCode": "wmoUnit:degC", "value": 41.1},
        "precipitationLast3Hours": {"unitCode": "wmoUnit:mm"},
        "cloudLayers": [{"base": {"unitCode": "wmoUnit:m", "value": None}, "amount": "CLR"}],
    },
}

FORECAST_FEATURE = {
    "type": "Feature",
    "geometry": {"type": "Polygon", "coordinates": [[[-112.1, 33.4], [-112.0, 33.4], [-112.0, 33.5], [-112.1, 33.4]]]},
    "properties": {
        "units": "us",
        "forecastGenerator": "BaselineForecastGenerator",
        "generatedAt": "2025-06-01T17:00:00+00:00",
        "updateTime": "2025-06-01T15:00:00+00:00",
        "validTimes": "2025-06-01T09:00:00+00:00/P7DT16H",
        "elevation": {"unitCode": "wmoUnit:m", "value": 340.1},
        "periods": [
            {
                "number": 1,
                "name": "This Afternoon",
                "startTime": "2025-06-01T10:00:00-07:00",
                "endTime": "2025-06-01T18:00:00-07:00",
                "isDaytime": True,
                "temperature": 108,
                "temperatureUnit": "F",
                "temperatureTrend": None,
                "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": None},
                "windSpeed": "5 to 10 mph",
                "windDirection": "SW",
                "shortForecast": "Sunny",
                "detailedForecast": "Sunny, with a high near 108.",
            },
            {
                "number": 2,
                "name": "Tonight",
                "isDaytime": False,
                "temperature": {"unitCode": "wmoUnit:degC", "value": 29},
                "windSpeed": {"unitCode": "wmoUnit:km_h-1", "value": 8},
                "windGust": {"unitCode": "wmoUnit:km_h-1", "value": 24},
                "windDirection": "W",
                "shortForecast": "Clear",
            },
        ],
    },
}

ATOM_FEED = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:cap="urn:oasis:names:tc:emergency:cap:1.2">
  <id>https://api.weather.gov/alerts/active</id>
  <generator>NWS CAP Server</generator>
  <updated>2025-06-01T17:00:00+00:00</updated>
  <author><name>w-nws.webmaster@noaa.gov</name></author>
  <title>Current watches, warnings, and advisories</title>
  <entry>
    <id>urn:oid:2.49.0.1.840.0.1</id>
    <updated>2025-06-01T10:00:00-07:00</updated>
    <published>2025-06-01T10:00:00-07:00</published>
    <author><name>w-nws.webmaster@noaa.gov</name></author>
    <title>Excessive Heat Warning issued June 1</title>
    <link href="https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.1"/>
    <summary>Dangerously hot conditions.</summary>
    <cap:event>Excessive Heat Warning</cap:event>
    <cap:sent>2025-06-01T10:00:00-07:00</cap:sent>
    <cap:effective>2025-06-01T10:00:00-07:00</cap:effective>
    <cap:onset>2025-06-01T11:00:00-07:00</cap:onset>
    <cap:expires>2025-06-01T20:00:00-07:00</cap:expires>
    <cap:status>Actual</cap:status>
    <cap:msgType>Alert</cap:msgType>
    <cap:category>Met</cap:category>
    <cap:urgency>Expected</cap:urgency>
    <cap:severity>Severe</cap:severity>
    <cap:certainty>Likely</cap:certainty>
    <cap:areaDesc>Maricopa</cap:areaDesc>
    <cap:polygon></cap:polygon>
    <cap:geocode>
      <valueName>FIPS6</valueName>
      <value>004013</value>
      <valueName>UGC</valueName>
      <value>AZZ540</value>
    </cap:geocode>
    <cap:parameter>
      <valueName>VTEC</valueName>
      <value>/O.NEW.KPSR.EH.W.0001.250601T1800Z-250602T0300Z/</value>
    </cap:parameter>
  </entry>
</feed>
"""

TAF_XML = """<?xml version="1.0" encoding="UTF-8"?>
<iwxxm:TAF xmlns:iwxxm="http://icao.int/iwxxm/3.0" xmlns:gml="http://www.opengis.net/gml/3.2"
    xmlns:aixm="http://www.aixm.aero/schema/5.1.1" xmlns:xlink="http://www.w3.org/1999/xlink"
    gml:id="taf-KPHX" reportStatus="NORMAL">
  <iwxxm:issueTime>
    <gml:TimeInstant gml:id="ti-1"><gml:timePosition>2025-06-01T17:20:00Z</gml:timePosition></gml:TimeInstant>
  </iwxxm:issueTime>
  <iwxxm:aerodrome>
    <aixm:AirportHeliport gml:id="ad-1">
      <aixm:timeSlice>
        <aixm:AirportHeliportTimeSlice gml:id="ts-1">
          <aixm:designator>PHX</aixm:designator>
          <aixm:name>PHOENIX SKY HARBOR INTL</aixm:name>
          <aixm:locationIndicatorICAO>KPHX</aixm:locationIndicatorICAO>
          <aixm:ARP><aixm:ElevatedPoint gml:id="p-1"><gml:pos>33.43 -112.02</gml:pos></aixm:ElevatedPoint></aixm:ARP>
        </aixm:AirportHeliportTimeSlice>
      </aixm:timeSlice>
    </aixm:AirportHeliport>
  </iwxxm:aerodrome>
  <iwxxm:validPeriod>
    <gml:TimePeriod gml:id="vp-1">
      <gml:beginPosition>2025-06-01T18:00:00Z</gml:beginPosition>
      <gml:endPosition>2025-06-02T24:00:00Z</gml:endPosition>
    </gml:TimePeriod>
  </iwxxm:validPeriod>
  <iwxxm:baseForecast>
    <iwxxm:MeteorologicalAerodromeForecast gml:id="bf-1" cloudAndVisibilityOK="false">
      <iwxxm:phenomenonTime>
        <gml:TimePeriod gml:id="pt-1">
          <gml:beginPosition>2025-06-01T18:00:00Z</gml:beginPosition>
          <gml:endPosition>2025-06-02T24:00:00Z</gml:endPosition>
        </gml:TimePeriod>
      </iwxxm:phenomenonTime>
      <iwxxm:prevailingVisibility uom="m">10000</iwxxm:prevailingVisibility>
      <iwxxm:prevailingVisibilityOperator>ABOVE</iwxxm:prevailingVisibilityOperator>
      <iwxxm:surfaceWind>
        <iwxxm:AerodromeSurfaceWindForecast variableWindDirection="false">
          <iwxxm:meanWindDirection uom="deg">250</iwxxm:meanWindDirection>
          <iwxxm:meanWindSpeed uom="[kn_i]">8</iwxxm:meanWindSpeed>
        </iwxxm:AerodromeSurfaceWindForecast>
      </iwxxm:surfaceWind>
      <iwxxm:cloud>
        <iwxxm:AerodromeCloudForecast gml:id="cf-1">
          <iwxxm:layer>
            <iwxxm:CloudLayer>
              <iwxxm:amount xlink:href="http://codes.wmo.int/49-2/CloudAmountReportedAtAerodrome/FEW"/>
              <iwxxm:base uom="[ft_i]">15000</iwxxm:base>
            </iwxxm:CloudLayer>
          </iwxxm:layer>
        </iwxxm:AerodromeCloudForecast>
      </iwxxm:cloud>
    </iwxxm:MeteorologicalAerodromeForecast>
  </iwxxm:baseForecast>
  <iwxxm:changeForecast>
    <iwxxm:MeteorologicalAerodromeForecast gml:id="cf-2" changeIndicator="BECOMING">
      <iwxxm:phenomenonTime>
        <gml:TimePeriod gml:id="pt-2">
          <gml:beginPosition>2025-06-02T02:00:00Z</gml:beginPosition>
          <gml:endPosition>2025-06-02T04:00:00Z</gml:endPosition>
        </gml:TimePeriod>
      </iwxxm:phenomenonTime>
      <iwxxm:surfaceWind>
        <iwxxm:AerodromeSurfaceWindForecast variableWindDirection="false">
          <iwxxm:meanWindDirection uom="deg">90</iwxxm:meanWindDirection>
          <iwxxm:meanWindSpeed uom="[kn_i]">12</iwxxm:meanWindSpeed>
          <iwxxm:windGustSpeed uom="[kn_i]">22</iwxxm:windGustSpeed>
        </iwxxm:AerodromeSurfaceWindForecast>
      </iwxxm:surfaceWind>
      <iwxxm:weather xlink:href="http://codes.wmo.int/306/4678/TSRA"/>
    </iwxxm:MeteorologicalAerodromeForecast>
  </iwxxm:changeForecast>
</iwxxm:TAF>
"""
