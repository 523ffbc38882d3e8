import pytest

from noaa_weather.errors import DecodeError
from noaa_weather.models import AlertMessageType, AlertSeverity, AlertStatus, AlertUrgency, MetarSkyCoverage
from noaa_weather.parsers import parse_alert_feed, parse_taf
from tests.conftest import ATOM_FEED, TAF_XML


# ============================================================================
# ЛЕНТА ATOM
# ============================================================================

def test_atom_feed_header():
    feed = parse_alert_feed(ATOM_FEED)
    assert feed.id == "https://api.weather.gov/alerts/active"
    assert feed.generator == "NWS CAP Server"
    assert feed.author.name == "w-nws.webmaster@noaa.gov"
    assert feed.title == "Current watches, warnings, and advisories"
    assert len(feed.entry) == 1


def test_atom_entry_cap_fields():
    entry = parse_alert_feed(ATOM_FEED).entry[0]
    assert entry.link == "https://api.weather.gov/alerts/urn:oid:2.49.0.1.840.0.1"
    assert entry.status is AlertStatus.ACTUAL
    assert entry.msg_type is AlertMessageType.ALERT
    assert entry.severity is AlertSeverity.SEVERE
    assert entry.urgency is AlertUrgency.EXPECTED
    assert entry.area_desc == "Maricopa"
    assert entry.expires == "2025-06-01T20:00:00-07:00"


def test_atom_entry_empty_polygon_is_none():
    entry = parse_alert_feed(ATOM_FEED).entry[0]
    assert entry.polygon is None


def test_atom_entry_geocode_pairs():
    entry = parse_alert_feed(ATOM_FEED).entry[0]
    assert [(p.value_name, p.value) for p in entry.geocode] == [("FIPS6", "004013"), ("UGC", "AZZ540")]
    assert entry.parameter[0].value_name == "VTEC"


def test_atom_feed_with_unknown_severity_fails():
    broken = ATOM_FEED.replace("<cap:severity>Severe</cap:severity>", "<cap:severity>Awful</cap:severity>")
    with pytest.raises(DecodeError):
        parse_alert_feed(broken)


@pytest.mark.parametrize("text", ["", "   ", "<?xml version='1.0'?><root/>"])
def test_atom_feed_invalid_document(text):
    with pytest.raises(DecodeError):
        parse_alert_feed(text)


# ============================================================================
# TAF
# ============================================================================

def test_taf_header():
    taf = parse_taf(TAF_XML)
    assert taf.report_status == "NORMAL"
    assert taf.issue_time == "2025-06-01T17:20:00Z"
    assert taf.station == "PHX"
    assert taf.icao == "KPHX"
    assert taf.position == [33.43, -112.02]
    assert taf.valid_start == "2025-06-01T18:00:00Z"
    assert taf.valid_end == "2025-06-02T24:00:00Z"


def test_taf_base_forecast():
    base = parse_taf(TAF_XML).base_forecast
    assert base.change_indicator is None
    assert base.cloud_and_visibility_ok is False
    assert base.prevailing_visibility.value == 10000
    assert base.prevailing_visibility.unit_code == "m"
    assert base.prevailing_visibility_operator == "ABOVE"
    assert base.variable_wind_direction is False
    assert base.wind_direction.value == 250
    assert base.wind_speed.unit_code == "[kn_i]"
    assert base.wind_gust is None
    assert base.clouds[0].amount is MetarSkyCoverage.FEW
    assert base.clouds[0].base.value == 15000
    assert base.weather == []


def test_taf_change_forecast():
    change = parse_taf(TAF_XML).change_forecasts[0]
    assert change.change_indicator == "BECOMING"
    assert change.start == "2025-06-02T02:00:00Z"
    assert change.wind_gust.value == 22
    assert change.weather == ["TSRA"]
    assert change.clouds == []


def test_taf_missing_element():
    with pytest.raises(DecodeError):
        parse_taf("<?xml version='1.0'?><METAR/>")
