import json
import os
from typing import Optional, Dict, Any, Iterable
from urllib.parse import quote

import requests
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError as ModelValidationError

from noaa_weather.errors import DecodeError, TransportError, ValidationError
from noaa_weather.models.misc import ProblemDetail

load_dotenv()
BASE_URL = os.getenv("NOAA_BASE_URL", "https://api.weather.gov")
USER_AGENT = os.getenv("NOAA_USER_AGENT", "(noaa_weather_python, github.com/noaa-weather/noaa_weather_python)")
DEFAULT_TIMEOUT = 30.0

MAX_LIMIT = 500


def _timeout(value: Any) -> float:
    """Таймаут запроса в секундах: положительное число."""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid timeout: {value!r}") from None
    if seconds <= 0:
        raise ValidationError(f"Invalid timeout: {value!r}")
    return seconds


class Configuration:
    """Адрес сервиса, User-Agent и HTTP-сессия для одного запуска."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        session: Any = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self.user_agent = user_agent or USER_AGENT
        self.session = session if session is not None else requests.Session()
        self.timeout = _timeout(timeout if timeout is not None else os.getenv("NOAA_TIMEOUT", DEFAULT_TIMEOUT))

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"


# ============================================================================
# ПАРАМЕТРЫ ЗАПРОСА
# ============================================================================

def wire(value: Any) -> str:
    """Строковое значение параметра: перечисления через to_wire_string, bool в нижнем регистре."""
    if hasattr(value, "to_wire_string"):
        return value.to_wire_string()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def csv(values: Iterable[Any]) -> str:
    return ",".join(wire(v) for v in values)


def segment(value: Any) -> str:
    """Часть пути URL; запятая и двоеточие остаются как есть (координаты, время)."""
    return quote(wire(value), safe=",:")


def query(**params: Any) -> Dict[str, str]:
    """Собрать query-параметры: None пропускается, списки склеиваются через запятую."""
    result: Dict[str, str] = {}
    for name, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set)):
            if not value:
                continue
            result[name] = csv(value)
        else:
            result[name] = wire(value)
    return result


def check_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_LIMIT:
        raise ValidationError(f"limit должен быть целым числом от 1 до {MAX_LIMIT}, получено: {limit!r}")
    return limit


# ============================================================================
# ТИП СОДЕРЖИМОГО
# ============================================================================

def content_kind(content_type: Optional[str]) -> str:
    """json, text, xml или unsupported по заголовку Content-Type."""
    media = (content_type or "application/octet-stream").split(";")[0].strip().lower()
    if media.startswith("application/") and "json" in media:
        return "json"
    if media == "text/plain":
        return "text"
    if media.startswith("application/") and "xml" in media:
        return "xml"
    return "unsupported"


def response_content_type(response: Any) -> str:
    return response.headers.get("Content-Type") or "application/octet-stream"


# ============================================================================
# ЗАПРОСЫ
# ============================================================================

def parse_problem(body: str) -> Optional[ProblemDetail]:
    """Описание ошибки из тела ответа, если тело в формате problem+json."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    try:
        return ProblemDetail.model_validate(data)
    except ModelValidationError:
        return None


def send(
    configuration: Configuration,
    path: str,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """Выполнить один GET-запрос; ошибка сети или ответ вне 2xx поднимает TransportError."""
    url = configuration.url(path)
    request_headers = {"User-Agent": configuration.user_agent}
    request_headers.update(headers or {})
    logger.debug("GET {} params={}", url, params or {})

    try:
        response = configuration.session.get(
            url, params=params or None, headers=request_headers, timeout=configuration.timeout
        )
    except requests.RequestException as e:
        logger.warning("Сетевая ошибка при запросе {}: {}", url, e)
        raise TransportError(url, reason=str(e)) from e

    if not 200 <= response.status_code < 300:
        body = response.text or ""
        logger.warning("Ответ {} для {}", response.status_code, url)
        raise TransportError(
            url,
            status=response.status_code,
            body=body,
            reason=getattr(response, "reason", "") or "",
            problem=parse_problem(body),
        )
    return response


def decode_json(text: str, model: Any = None, target: Optional[str] = None) -> Any:
    """Разобрать JSON и, если указана модель, проверить его моделью."""
    target = target or getattr(model, "__name__", "JSON")
    try:
        data = json.loads(text)
    except ValueError as e:
        logger.error("Некорректный JSON для {}: {}", target, e)
        raise DecodeError(target, str(e)) from e
    if model is None:
        return data
    try:
        return model.model_validate(data)
    except ModelValidationError as e:
        logger.error("Ответ не соответствует {}: {}", target, e)
        raise DecodeError(target, str(e)) from e


def get_json(
    configuration: Configuration,
    path: str,
    model: Any = None,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """GET с ожиданием JSON-ответа; без модели возвращает разобранный dict."""
    target = getattr(model, "__name__", "JSON")
    response = send(configuration, path, params=params, headers=headers)
    content_type = response_content_type(response)
    if content_kind(content_type) != "json":
        logger.error("Неожиданный тип содержимого {} для {}", content_type, target)
        raise DecodeError(target, f"получен ответ с типом содержимого `{content_type}`")
    return decode_json(response.text, model, target)
