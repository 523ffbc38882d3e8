from typing import Annotated, Any, Dict, Optional

from pydantic import BeforeValidator, Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.envelopes import Feature, FeatureCollection, JsonLdGraph
from noaa_weather.models.unions import JsonLdContext
from noaa_weather.models.values import ValueUnit


# ============================================================================
# РАДАРНЫЕ СТАНЦИИ
# ============================================================================

class RadarLatency(NwsModel):
    current: Optional[ValueUnit] = None
    average: Optional[ValueUnit] = None
    max: Optional[ValueUnit] = None
    level_two_last_received_time: Optional[str] = None
    max_latency_time: Optional[str] = None
    reporting_host: Optional[str] = None
    host: Optional[str] = None


class RdaProperties(NwsModel):
    resolution_version: Optional[str] = None
    nl2_path: Optional[str] = Field(default=None, alias="nl2Path")
    volume_coverage_pattern: Optional[str] = None
    control_status: Optional[str] = None
    build_number: Optional[float] = None
    alarm_summary: Optional[str] = None
    mode: Optional[str] = None
    generator_state: Optional[str] = None
    super_resolution_status: Optional[str] = None
    operability_status: Optional[str] = None
    status: Optional[str] = None
    average_transmitter_power: Optional[ValueUnit] = None
    reflectivity_calibration_correction: Optional[ValueUnit] = None


class RadarDataAcquisition(NwsModel):
    timestamp: Optional[str] = None
    reporting_host: Optional[str] = None
    properties: Optional[RdaProperties] = None


class RadarStation(NwsModel):
    """Радар (WSR-88D, TDWR): задержки, состояние RDA, производительность."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    id: Optional[str] = None
    name: Optional[str] = None
    station_type: Optional[str] = None
    elevation: Optional[ValueUnit] = None
    time_zone: Optional[str] = None
    latency: Optional[RadarLatency] = None
    rda: Optional[RadarDataAcquisition] = None
    # состав полей зависит от типа радара
    performance: Optional[Dict[str, Any]] = None
    adaptation: Optional[Dict[str, Any]] = None


RadarStationFeature = Feature[RadarStation]


class RadarStationCollection(FeatureCollection[RadarStation]):
    pass


class RadarStationAlarm(NwsModel):
    at_type: Optional[str] = Field(default=None, alias="@type")
    station_id: Optional[str] = None
    status: Optional[str] = None
    timestamp: Optional[str] = None
    active_channel: Optional[int] = None
    message: Optional[str] = None


class RadarStationAlarmCollection(JsonLdGraph[RadarStationAlarm]):
    at_id: Optional[str] = Field(default=None, alias="@id")


# ============================================================================
# ОЧЕРЕДИ ДАННЫХ
# ============================================================================

class RadarQueue(NwsModel):
    at_type: Optional[str] = Field(default=None, alias="@type")
    host: Optional[str] = None
    arrival_time: Optional[str] = None
    creation_time: Optional[str] = None
    type: Optional[str] = None
    feed: Optional[str] = None
    resolution_version: Optional[int] = None
    sequence_number: Optional[str] = None
    size: Optional[int] = None


class RadarQueueCollection(JsonLdGraph[RadarQueue]):
    at_id: Optional[str] = Field(default=None, alias="@id")


# ============================================================================
# СЕРВЕРЫ
# ============================================================================

def _map_or_empty_array(value: Any) -> Any:
    # сервер отдаёт [] вместо {} для пустых таблиц пинга
    if isinstance(value, list) and not value:
        return {}
    return value


PingTable = Annotated[Optional[Dict[str, bool]], BeforeValidator(_map_or_empty_array)]


class RadarServerPingTargets(NwsModel):
    client: PingTable = None
    ldm: PingTable = None
    radar: PingTable = None
    server: PingTable = None
    misc: PingTable = None


class RadarServerPing(NwsModel):
    targets: Optional[RadarServerPingTargets] = None
    timestamp: Optional[str] = None


class RadarServerCommand(NwsModel):
    last_executed: Optional[str] = None
    last_executed_time: Optional[str] = None
    last_nexrad_data_time: Optional[str] = None
    last_received: Optional[str] = None
    last_received_time: Optional[str] = None
    timestamp: Optional[str] = None


class RadarServerHardware(NwsModel):
    timestamp: Optional[str] = None
    cpu_idle: Optional[float] = None
    io_utilization: Optional[float] = None
    disk: Optional[int] = None
    load1: Optional[float] = None
    load5: Optional[float] = None
    load15: Optional[float] = None
    memory: Optional[float] = None
    uptime: Optional[str] = None


class RadarServerLdm(NwsModel):
    timestamp: Optional[str] = None
    latest_product: Optional[str] = None
    oldest_product: Optional[str] = None
    storage_size: Optional[int] = None
    count: Optional[int] = None
    active: Optional[bool] = None


class RadarServerInterfaceStats(NwsModel):
    interface: Optional[str] = None
    active: Optional[bool] = None
    trans_no_error: Optional[int] = None
    trans_error: Optional[int] = None
    trans_dropped: Optional[int] = None
    trans_overrun: Optional[int] = None
    recv_no_error: Optional[int] = None
    recv_error: Optional[int] = None
    recv_dropped: Optional[int] = None
    recv_overrun: Optional[int] = None


class RadarServerNetwork(NwsModel):
    timestamp: Optional[str] = None
    eth0: Optional[RadarServerInterfaceStats] = None
    eth1: Optional[RadarServerInterfaceStats] = None


class RadarServer(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    id: Optional[str] = None
    type: Optional[str] = None
    active: Optional[bool] = None
    primary: Optional[bool] = None
    aggregate: Optional[bool] = None
    locked: Optional[bool] = None
    radar_network_up: Optional[bool] = None
    collection_time: Optional[str] = None
    reporting_host: Optional[str] = None
    ping: Optional[RadarServerPing] = None
    command: Optional[RadarServerCommand] = None
    hardware: Optional[RadarServerHardware] = None
    ldm: Optional[RadarServerLdm] = None
    network: Optional[RadarServerNetwork] = None


class RadarServerCollection(JsonLdGraph[RadarServer]):
    pass
