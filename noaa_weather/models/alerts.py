from typing import Any, Dict, List, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.enums import (
    AlertCategory,
    AlertCertainty,
    AlertMessageType,
    AlertResponse,
    AlertSeverity,
    AlertStatus,
    AlertUrgency,
)
from noaa_weather.models.envelopes import Feature, FeatureCollection, JsonLdGraph
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext


class AlertGeocode(NwsModel):
    ugc: Optional[List[str]] = Field(default=None, alias="UGC")
    same: Optional[List[str]] = Field(default=None, alias="SAME")


class AlertReference(NwsModel):
    at_id: Optional[str] = Field(default=None, alias="@id")
    identifier: Optional[str] = None
    sender: Optional[str] = None
    sent: Optional[str] = None


class Alert(NwsModel):
    """Оповещение в формате CAP."""

    at_id: Optional[str] = Field(default=None, alias="@id")
    at_type: Optional[str] = Field(default=None, alias="@type")
    id: Optional[str] = None
    area_desc: Optional[str] = None
    geocode: Optional[AlertGeocode] = None
    affected_zones: Optional[List[str]] = None
    references: Optional[List[AlertReference]] = None
    sent: Optional[str] = None
    effective: Optional[str] = None
    onset: DoubleOptional[str] = UNSET
    expires: Optional[str] = None
    ends: DoubleOptional[str] = UNSET
    status: Optional[AlertStatus] = None
    message_type: Optional[AlertMessageType] = None
    category: Optional[AlertCategory] = None
    severity: Optional[AlertSeverity] = None
    certainty: Optional[AlertCertainty] = None
    urgency: Optional[AlertUrgency] = None
    event: Optional[str] = None
    sender: Optional[str] = None
    sender_name: Optional[str] = None
    headline: DoubleOptional[str] = UNSET
    description: Optional[str] = None
    instruction: DoubleOptional[str] = UNSET
    response: Optional[AlertResponse] = None
    parameters: Optional[Dict[str, List[Any]]] = None


AlertFeature = Feature[Alert]


class AlertCollection(FeatureCollection[Alert]):
    pass


class AlertCollectionJsonLd(JsonLdGraph[Alert]):
    pass


class AlertTypesResponse(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    event_types: List[str] = []


class ActiveAlertsCountResponse(NwsModel):
    """Число активных оповещений в разрезе территорий, регионов и зон."""

    total: Optional[int] = None
    land: Optional[int] = None
    marine: Optional[int] = None
    regions: Optional[Dict[str, int]] = None
    areas: Optional[Dict[str, int]] = None
    zones: Optional[Dict[str, int]] = None


# ============================================================================
# ЛЕНТА ATOM
# ============================================================================

class AlertAtomAuthor(NwsModel):
    name: Optional[str] = None


class AlertXmlParameter(NwsModel):
    value_name: str
    value: str


class AlertAtomEntry(NwsModel):
    id: Optional[str] = None
    updated: Optional[str] = None
    published: Optional[str] = None
    author: Optional[AlertAtomAuthor] = None
    title: Optional[str] = None
    link: Optional[str] = None
    summary: Optional[str] = None
    event: Optional[str] = None
    sent: Optional[str] = None
    effective: Optional[str] = None
    onset: Optional[str] = None
    expires: Optional[str] = None
    status: Optional[AlertStatus] = None
    msg_type: Optional[AlertMessageType] = None
    category: Optional[AlertCategory] = None
    urgency: Optional[AlertUrgency] = None
    severity: Optional[AlertSeverity] = None
    certainty: Optional[AlertCertainty] = None
    area_desc: Optional[str] = None
    polygon: Optional[str] = None
    geocode: List[AlertXmlParameter] = []
    parameter: List[AlertXmlParameter] = []


class AlertAtomFeed(NwsModel):
    id: Optional[str] = None
    generator: Optional[str] = None
    updated: Optional[str] = None
    author: Optional[AlertAtomAuthor] = None
    title: Optional[str] = None
    entry: List[AlertAtomEntry] = []
