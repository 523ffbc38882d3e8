"""Объединения без явного дискриминатора: варианты перебираются по порядку."""

from typing import Annotated, Any, Callable, Dict, List, Sequence, Tuple, Union

from pydantic import BaseModel
from pydantic_core import core_schema

from noaa_weather.errors import NoMatchingVariant, ValidationError, describe_shape
from noaa_weather.models.base import to_wire_value
from noaa_weather.models.enums import (
    ClosedEnum,
    LandRegionCode,
    MarineAreaCode,
    MarineRegionCode,
    NwsUnitCode,
    StateTerritoryCode,
)

Candidate = Tuple[str, Callable[[Any], Any]]


def resolve_union(union_name: str, raw: Any, candidates: Sequence[Candidate]) -> Any:
    """Вернуть результат первого подошедшего варианта или поднять NoMatchingVariant."""
    reasons: List[str] = []
    for label, parse in candidates:
        try:
            return parse(raw)
        except (ValueError, TypeError) as e:
            reasons.append(f"{label}: {str(e).splitlines()[0] if str(e) else type(e).__name__}")
    raise NoMatchingVariant(union_name, describe_shape(raw), reasons)


def variant(kind: Any) -> Candidate:
    """Кандидат для модели, перечисления или примитивного типа."""
    if isinstance(kind, type) and issubclass(kind, ClosedEnum):
        return kind.__name__, kind.parse
    if isinstance(kind, type) and issubclass(kind, BaseModel):
        return kind.__name__, kind.model_validate
    return kind.__name__, exact_type(kind)


def exact_type(*kinds: type) -> Callable[[Any], Any]:
    """Парсер примитива без приведения типов: 5 не станет "5", True не станет 1."""
    def parse(raw: Any) -> Any:
        if isinstance(raw, bool) and bool not in kinds:
            raise TypeError(f"expected {'/'.join(k.__name__ for k in kinds)}, got bool")
        if not isinstance(raw, kinds):
            raise TypeError(f"expected {'/'.join(k.__name__ for k in kinds)}, got {type(raw).__name__}")
        return raw
    return parse


class UntaggedUnion:
    """Метаданные для Annotated: подключают resolve_union к валидации pydantic."""

    def __init__(self, name: str, candidates: Sequence[Candidate]):
        self.name = name
        self.candidates = list(candidates)

    def resolve(self, raw: Any) -> Any:
        return resolve_union(self.name, raw, self.candidates)

    def __get_pydantic_core_schema__(self, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self.resolve,
            serialization=core_schema.plain_serializer_function_ser_schema(to_wire_value),
        )


# ============================================================================
# КОДЫ ТЕРРИТОРИЙ И РЕГИОНОВ
# ============================================================================

AREA_CODE = UntaggedUnion("AreaCode", [variant(StateTerritoryCode), variant(MarineAreaCode)])
AreaCode = Annotated[Union[StateTerritoryCode, MarineAreaCode], AREA_CODE]

REGION_CODE = UntaggedUnion("RegionCode", [variant(LandRegionCode), variant(MarineRegionCode)])
RegionCode = Annotated[Union[LandRegionCode, MarineRegionCode], REGION_CODE]

ZONE_STATE = UntaggedUnion("ZoneState", [variant(StateTerritoryCode), variant(str)])
ZoneState = Annotated[Union[StateTerritoryCode, str], ZONE_STATE]

UNIT_CODE = UntaggedUnion("UnitCode", [variant(NwsUnitCode), variant(str)])
UnitCode = Annotated[Union[NwsUnitCode, str], UNIT_CODE]


def _json_ld_array(raw: Any) -> List[Any]:
    if not isinstance(raw, list):
        raise TypeError("expected array")
    for item in raw:
        if not isinstance(item, (str, dict)):
            raise TypeError(f"array item must be string or object, got {type(item).__name__}")
    return raw


JSON_LD_CONTEXT = UntaggedUnion(
    "JsonLdContext",
    [variant(str), ("array", _json_ld_array), ("object", exact_type(dict))],
)
JsonLdContext = Annotated[Union[str, List[Any], Dict[str, Any]], JSON_LD_CONTEXT]


def parse_area_code(value: str) -> Any:
    """Разобрать код территории: сначала штат/территория, затем морской район."""
    try:
        return AREA_CODE.resolve(value)
    except NoMatchingVariant:
        raise ValidationError(f"Invalid area code: {value}") from None


def parse_region_code(value: str) -> Any:
    """Разобрать код региона: сначала сухопутный, затем морской."""
    try:
        return REGION_CODE.resolve(value)
    except NoMatchingVariant:
        raise ValidationError(f"Invalid region code: {value}") from None
