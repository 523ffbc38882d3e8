from typing import List, Optional

from pydantic import AliasChoices, Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.envelopes import JsonLdGraph
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext


class OfficeAddress(NwsModel):
    street_address: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("streetAddress", "street_address"), serialization_alias="streetAddress"
    )
    city: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("addressLocality", "city"), serialization_alias="addressLocality"
    )
    state: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("addressRegion", "state"), serialization_alias="addressRegion"
    )
    zip_code: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("postalCode", "zipCode", "zip_code"), serialization_alias="postalCode"
    )


class Office(NwsModel):
    """Прогнозный офис NWS (schema.org GovernmentOrganization)."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    at_type: Optional[str] = Field(default=None, alias="@type")
    at_id: Optional[str] = Field(default=None, alias="@id")
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[OfficeAddress] = None
    phone_number: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("telephone", "phone", "phone_number"), serialization_alias="telephone"
    )
    fax_number: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("faxNumber", "fax", "fax_number"), serialization_alias="faxNumber"
    )
    email: Optional[str] = None
    website_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("sameAs", "webSiteUrl", "website_url"), serialization_alias="sameAs"
    )
    nws_region: Optional[str] = None
    parent_organization: Optional[str] = None
    responsible_counties: List[str] = []
    responsible_forecast_zones: List[str] = []
    responsible_fire_zones: List[str] = []
    approved_observation_stations: List[str] = []


class OfficeHeadline(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    at_id: Optional[str] = Field(default=None, alias="@id")
    id: Optional[str] = None
    office: Optional[str] = None
    important: Optional[bool] = None
    issuance_time: Optional[str] = None
    link: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    summary: DoubleOptional[str] = UNSET
    content: Optional[str] = None


class OfficeHeadlineCollection(JsonLdGraph[OfficeHeadline]):
    pass
