from typing import Optional, Any, Iterable


class NoaaWeatherError(Exception):
    """Базовая ошибка клиента NOAA."""


class TransportError(NoaaWeatherError):
    """Сетевая ошибка или ответ сервера с кодом вне диапазона 2xx."""

    def __init__(self, url: str, status: Optional[int] = None, body: str = "", reason: str = "", problem: Any = None):
        self.url = url
        self.status = status
        self.body = body
        self.reason = reason
        self.problem = problem
        super().__init__(self._message())

    def _message(self) -> str:
        if self.status is None:
            return f"Сетевая ошибка при запросе {self.url}: {self.reason}"
        detail = getattr(self.problem, "detail", None) or getattr(self.problem, "title", None)
        if detail:
            return f"HTTP {self.status} для {self.url}: {detail}"
        return f"HTTP {self.status} для {self.url}: {self.body.strip() or self.reason}"


class DecodeError(NoaaWeatherError):
    """Тело ответа не соответствует ожидаемой модели."""

    def __init__(self, target: str, message: str):
        self.target = target
        super().__init__(f"Не удалось разобрать ответ как {target}: {message}")


class ValidationError(NoaaWeatherError):
    """Аргумент вызова не прошёл локальную проверку."""


class UnknownState(ValidationError):
    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Unknown state: {state}")


class UnknownCity(ValidationError):
    def __init__(self, city: str):
        self.city = city
        super().__init__(f"Unknown city: {city}")


class CityNotInState(ValidationError):
    def __init__(self, city: str, state: str):
        self.city = city
        self.state = state
        super().__init__(f"{city} is not in state {state}")


# ============================================================================
# ОШИБКИ РАЗБОРА МОДЕЛЕЙ
# ============================================================================
# Наследуются от ValueError: pydantic оборачивает их в свою ValidationError.

class InvalidEnumValue(ValueError):
    def __init__(self, enum_name: str, value: Any):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Invalid {enum_name} value: {value!r}")


class NoMatchingVariant(ValueError):
    def __init__(self, union_name: str, shape: str, reasons: Iterable[str] = ()):
        self.union_name = union_name
        self.shape = shape
        self.reasons = list(reasons)
        message = f"No variant of {union_name} matches {shape}"
        if self.reasons:
            message += " (" + "; ".join(self.reasons) + ")"
        super().__init__(message)


def describe_shape(raw: Any) -> str:
    """Короткое описание формы значения для сообщений об ошибках."""
    if isinstance(raw, dict):
        return "object with keys [" + ", ".join(sorted(str(k) for k in raw)) + "]"
    if isinstance(raw, list):
        return f"array of length {len(raw)}"
    if raw is None:
        return "null"
    return f"{type(raw).__name__} {raw!r}"
