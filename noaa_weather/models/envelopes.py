"""Обёртки GeoJSON и JSON-LD, общие для всех ресурсов.

Модель элемента описывается один раз, а Feature, FeatureCollection и
JsonLdGraph параметризуются ею. Поле type у обёрток GeoJSON всегда
выводится фиксированной строкой; другое значение во входных данных
считается ошибкой разбора.
"""

from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import Field

from noaa_weather.models.base import NwsModel
from noaa_weather.models.geometry import GeoJsonGeometry
from noaa_weather.models.optional import DoubleOptional, UNSET
from noaa_weather.models.unions import JsonLdContext

P = TypeVar("P")


class PaginationInfo(NwsModel):
    """Ссылка на следующую страницу. Клиент сам по ней не переходит."""

    next: str


class CollectionMetadata(NwsModel):
    """Заголовок, время обновления и пагинация коллекции."""

    title: Optional[str] = None
    updated: Optional[str] = None
    pagination: Optional[PaginationInfo] = None


class Feature(NwsModel, Generic[P]):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    id: Optional[str] = None
    type: Literal["Feature"] = "Feature"
    geometry: DoubleOptional[GeoJsonGeometry] = UNSET
    properties: P


class FeatureCollection(CollectionMetadata, Generic[P]):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature[P]] = []

    @property
    def items(self) -> List[P]:
        return [feature.properties for feature in self.features]


class JsonLdGraph(CollectionMetadata, Generic[P]):
    context: Optional[JsonLdContext] = Field(default=None, alias="@context")
    graph: List[P] = Field(default=[], alias="@graph")

    @property
    def items(self) -> List[P]:
        return list(self.graph)
