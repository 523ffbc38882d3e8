from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

from noaa_weather.models.enums import ClosedEnum
from noaa_weather.models.optional import Unset


class NwsModel(BaseModel):
    """Базовая модель ответа API: неизменяемая, поля по имени или по имени в API."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def serialize_present_fields(self, handler: Any) -> Any:
        # None у обычных полей и UNSET у полей с тремя состояниями не выводятся
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None or isinstance(value, Unset):
                for key in (name, field.alias, field.serialization_alias):
                    if key:
                        data.pop(key, None)
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Представление модели в том виде, в каком его отдаёт API."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls, data: Any) -> "NwsModel":
        return cls.model_validate(data)


def to_wire_value(value: Any) -> Any:
    """Сериализовать произвольное значение варианта объединения."""
    if isinstance(value, NwsModel):
        return value.to_wire()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, ClosedEnum):
        return value.to_wire_string()
    if isinstance(value, list):
        return [to_wire_value(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire_value(item) for key, item in value.items()}
    return value
