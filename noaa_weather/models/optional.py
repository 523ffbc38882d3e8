"""Поля с тремя состояниями: ключ отсутствует, ключ равен null, ключ со значением."""

from dataclasses import dataclass
from typing import Annotated, Any, Generic, TypeVar

from pydantic_core import core_schema

T = TypeVar("T")


class Unset:
    """Ключ отсутствовал в ответе."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def value_or(self, default: Any = None) -> Any:
        return default


class ExplicitNull:
    """Ключ присутствовал со значением null."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EXPLICIT_NULL"

    def __bool__(self) -> bool:
        return False

    def value_or(self, default: Any = None) -> Any:
        return default


@dataclass(frozen=True)
class Value(Generic[T]):
    value: T

    def value_or(self, default: Any = None) -> T:
        return self.value


UNSET = Unset()
EXPLICIT_NULL = ExplicitNull()


class _DoubleOptionalSchema:
    def __init__(self, inner: Any):
        self.inner = inner

    def __get_pydantic_core_schema__(self, source: Any, handler: Any) -> core_schema.CoreSchema:
        inner_schema = handler.generate_schema(self.inner)

        def validate(value: Any, validate_inner: Any) -> Any:
            if isinstance(value, (Unset, ExplicitNull)):
                return value
            if value is None:
                return EXPLICIT_NULL
            if isinstance(value, Value):
                value = value.value
            return Value(validate_inner(value))

        def serialize(value: Any, serialize_inner: Any) -> Any:
            if isinstance(value, Value):
                return serialize_inner(value.value)
            return None

        return core_schema.no_info_wrap_validator_function(
            validate,
            inner_schema,
            serialization=core_schema.wrap_serializer_function_ser_schema(serialize, schema=inner_schema),
        )


class DoubleOptional:
    """DoubleOptional[T]: поле модели, различающее UNSET, EXPLICIT_NULL и Value(x).

    Значение по умолчанию у такого поля всегда UNSET; при сериализации
    UNSET убирает ключ, EXPLICIT_NULL даёт null, Value(x) даёт x.
    """

    def __class_getitem__(cls, inner: Any) -> Any:
        return Annotated[Any, _DoubleOptionalSchema(inner)]


def value_of(field: Any, default: Any = None) -> Any:
    """Достать значение из поля с тремя состояниями или вернуть default."""
    if isinstance(field, (Unset, ExplicitNull, Value)):
        return field.value_or(default)
    return default if field is None else field
