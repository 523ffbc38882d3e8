from typing import Dict, Optional

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.envelopes import JsonLdGraph
from noaa_weather.models.unions import JsonLdContext


class TextProduct(NwsModel):
    """Текстовый продукт NWS (AFD, HWO и т.п.)."""

    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    at_id: Optional[str] = Field(default=None, alias="@id")
    id: Optional[str] = None
    wmo_collective_id: Optional[str] = None
    issuing_office: Optional[str] = None
    issuance_time: Optional[str] = None
    product_code: Optional[str] = None
    product_name: Optional[str] = None
    product_text: Optional[str] = None


class TextProductCollection(JsonLdGraph[TextProduct]):
    pass


class TextProductLocationCollection(NwsModel):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    locations: Dict[str, Optional[str]] = {}


class TextProductType(NwsModel):
    product_code: str
    product_name: str


class TextProductTypeCollection(JsonLdGraph[TextProductType]):
    pass
