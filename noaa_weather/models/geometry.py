"""Геометрии GeoJSON.

Вариант определяется глубиной вложенности coordinates (1 у Point, 2 у
LineString и MultiPoint, 3 у Polygon и MultiLineString, 4 у MultiPolygon)
и тегом type, если он есть. Тег и глубина должны совпадать; без тега
выбирается первый вариант нужной глубины в порядке GEOMETRY_VARIANTS.
"""

from typing import Annotated, Any, Callable, List, Literal, Optional, Type, Union

from noaa_weather.models.base import NwsModel
from noaa_weather.models.unions import UntaggedUnion

Position = List[float]


class GeoJsonPoint(NwsModel):
    type: Literal["Point"] = "Point"
    coordinates: Position
    bbox: Optional[List[float]] = None


class GeoJsonLineString(NwsModel):
    type: Literal["LineString"] = "LineString"
    coordinates: List[Position]
    bbox: Optional[List[float]] = None


class GeoJsonMultiPoint(NwsModel):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: List[Position]
    bbox: Optional[List[float]] = None


class GeoJsonPolygon(NwsModel):
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[Position]]
    bbox: Optional[List[float]] = None


class GeoJsonMultiLineString(NwsModel):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: List[List[Position]]
    bbox: Optional[List[float]] = None


class GeoJsonMultiPolygon(NwsModel):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: List[List[List[Position]]]
    bbox: Optional[List[float]] = None


GEOMETRY_VARIANTS = (
    (GeoJsonPoint, 1),
    (GeoJsonLineString, 2),
    (GeoJsonPolygon, 3),
    (GeoJsonMultiPoint, 2),
    (GeoJsonMultiLineString, 3),
    (GeoJsonMultiPolygon, 4),
)


def coordinates_depth(coordinates: Any) -> int:
    """Глубина вложенности массива координат; пустой массив имеет глубину 1."""
    depth = 0
    node = coordinates
    while isinstance(node, list):
        depth += 1
        if not node:
            break
        node = node[0]
    return depth


def _geometry_parser(model: Type[NwsModel], depth: int) -> Callable[[Any], Any]:
    tag = model.model_fields["type"].default

    def parse(raw: Any) -> Any:
        if isinstance(raw, NwsModel):
            if isinstance(raw, model):
                return raw
            raise TypeError(f"is {type(raw).__name__}")
        if not isinstance(raw, dict) or "coordinates" not in raw:
            raise ValueError("no coordinates")
        actual = coordinates_depth(raw["coordinates"])
        if actual != depth:
            raise ValueError(f"coordinates depth {actual}, expected {depth}")
        if raw.get("type") is not None and raw["type"] != tag:
            raise ValueError(f"type tag {raw['type']!r}")
        return model.model_validate(raw)

    return parse


GEOMETRY: UntaggedUnion = UntaggedUnion(
    "GeoJsonGeometry",
    [(model.__name__, _geometry_parser(model, depth)) for model, depth in GEOMETRY_VARIANTS],
)

GeoJsonGeometry = Annotated[
    Union[
        GeoJsonPoint,
        GeoJsonLineString,
        GeoJsonPolygon,
        GeoJsonMultiPoint,
        GeoJsonMultiLineString,
        GeoJsonMultiPolygon,
    ],
    GEOMETRY,
]


def parse_geometry(raw: Any) -> Any:
    return GEOMETRY.resolve(raw)