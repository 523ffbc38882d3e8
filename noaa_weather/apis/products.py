from typing import Optional, List

from noaa_weather.api_client import Configuration, check_limit, get_json, query, segment
from noaa_weather.models import (
    TextProduct,
    TextProductCollection,
    TextProductLocationCollection,
    TextProductTypeCollection,
)


def get_products_query(
    configuration: Configuration,
    location: Optional[List[str]] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    office: Optional[List[str]] = None,
    wmoid: Optional[List[str]] = None,
    product_type: Optional[List[str]] = None,
    limit: Optional[int] = None,
) -> TextProductCollection:
    """Поиск текстовых продуктов по местоположению, офису, WMO-заголовку и типу."""
    params = query(
        location=location,
        start=start,
        end=end,
        office=office,
        wmoid=wmoid,
        type=product_type,
        limit=check_limit(limit),
    )
    return get_json(configuration, "/products", TextProductCollection, params=params)


def get_product(configuration: Configuration, product_id: str) -> TextProduct:
    return get_json(configuration, f"/products/{segment(product_id)}", TextProduct)


def get_product_locations(configuration: Configuration) -> TextProductLocationCollection:
    return get_json(configuration, "/products/locations", TextProductLocationCollection)


def get_product_types(configuration: Configuration) -> TextProductTypeCollection:
    return get_json(configuration, "/products/types", TextProductTypeCollection)


def get_products_by_type(configuration: Configuration, type_id: str) -> TextProductCollection:
    return get_json(configuration, f"/products/types/{segment(type_id)}", TextProductCollection)


def get_product_issuance_locations_by_type(configuration: Configuration, type_id: str) -> TextProductLocationCollection:
    return get_json(configuration, f"/products/types/{segment(type_id)}/locations", TextProductLocationCollection)


def get_products_by_type_and_location(
    configuration: Configuration, type_id: str, location_id: str
) -> TextProductCollection:
    path = f"/products/types/{segment(type_id)}/locations/{segment(location_id)}"
    return get_json(configuration, path, TextProductCollection)


def get_products_by_location(configuration: Configuration, location_id: str) -> TextProductTypeCollection:
    """Типы продуктов, выпускаемых для данного местоположения."""
    return get_json(configuration, f"/products/locations/{segment(location_id)}/types", TextProductTypeCollection)
