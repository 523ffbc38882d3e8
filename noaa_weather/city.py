from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from noaa_weather.errors import CityNotInState, UnknownCity, UnknownState


class USState(Enum):
    ARIZONA = "AZ"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "USState":
        """Штат по коду или полному названию, без учёта регистра."""
        key = text.strip().upper()
        for state in cls:
            if key in (state.value, state.name):
                return state
        raise UnknownState(text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class USCity:
    name: str
    state: USState
    latitude: float
    longitude: float

    def coordinates(self) -> Tuple[float, float]:
        return self.latitude, self.longitude

    def coordinate_string(self) -> str:
        """Координаты в виде "широта,долгота" для запроса /points."""
        return f"{self.latitude},{self.longitude}"

    def __str__(self) -> str:
        return f"{self.name}, {self.state}"


# Поддерживаемые города: ключ - название в нижнем регистре
CITIES = {
    "phoenix": USCity("Phoenix", USState.ARIZONA, 33.4484, -112.0740),
}


def find_city(city: str, state: Union[str, USState]) -> USCity:
    if not isinstance(state, USState):
        state = USState.parse(state)
    known = CITIES.get(city.strip().lower())
    if known is None:
        raise UnknownCity(city)
    if known.state is not state:
        raise CityNotInState(city, state.code)
    return known


def lookup(city: str, state: Union[str, USState]) -> Tuple[float, float]:
    """Координаты (широта, долгота) города из закрытого справочника."""
    return find_city(city, state).coordinates()
